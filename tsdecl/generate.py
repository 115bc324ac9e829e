"""
One-shot driver for the bundled schema.

Steps
-----
1. Parse/validate schemas/indoormap.sdef -> `model`
2. Take its export list, in order
3. Write one TypeScript declaration per exported struct to stdout

Meant to run as a build step, e.g. `python -m tsdecl.generate > types.ts`.
"""
from __future__ import annotations

from tsdecl.api.generator import render_model_declarations
from tsdecl.language import build_default_model


def to_tsx(out=None) -> int:
    """Generate declarations for the bundled schema's export list."""
    return render_model_declarations(build_default_model(), out=out)


if __name__ == "__main__":
    to_tsx()
