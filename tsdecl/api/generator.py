"""
Main entry point for declaration generation.

Takes an explicit, ordered export list of structs and writes one TypeScript
declaration per struct, each followed by a blank line. The run stops at the
first field type without a translation: declarations already written stay
written, nothing is written for the failing struct or any struct after it.

Architecture:
    - extractors/: struct field extraction and type mapping
    - generators/: declaration rendering (Jinja2)
"""

import io
import sys
from pathlib import Path

from .errors import DuplicateDeclarationError, UnsupportedTypeError
from .extractors import get_exported_structs
from .gen_logging import get_logger
from .generators import TEMPLATES_DIR, generate_declaration

logger = get_logger(__name__)

DECLARATION_SEPARATOR = "\n\n"


def _verify_unique_declarations(structs):
    seen = set()
    for struct in structs:
        if struct.name in seen:
            raise DuplicateDeclarationError(struct.name)
        seen.add(struct.name)


def generate_declarations(structs, out=None, templates_dir: Path = TEMPLATES_DIR) -> int:
    """
    Write declarations for `structs` to `out` (default: sys.stdout).

    Args:
        structs: Ordered export list of Struct nodes
        out: Text stream to write to
        templates_dir: Directory holding declaration.jinja

    Returns:
        Number of declarations written

    Raises:
        UnsupportedTypeError: a field type has no translation
        DuplicateDeclarationError: the export list names a struct twice
    """
    if out is None:
        out = sys.stdout
    structs = list(structs)
    _verify_unique_declarations(structs)

    written = 0
    for struct in structs:
        try:
            declaration = generate_declaration(struct, templates_dir)
        except UnsupportedTypeError as e:
            logger.error(f"[ERROR] {struct.name}: {e}")
            raise
        out.write(declaration + DECLARATION_SEPARATOR)
        written += 1

    logger.info(f"[DONE] {written} declaration(s) generated")
    return written


def render_declarations(structs, templates_dir: Path = TEMPLATES_DIR) -> str:
    """Return the full generated text for `structs` instead of writing it."""
    buffer = io.StringIO()
    generate_declarations(structs, out=buffer, templates_dir=templates_dir)
    return buffer.getvalue()


def render_model_declarations(model, out=None) -> int:
    """Generate declarations for the export list of a parsed schema."""
    return generate_declarations(get_exported_structs(model), out=out)
