"""TypeScript declaration rendering for a single struct."""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..extractors import extract_struct, map_to_ts_type
from ..gen_logging import get_logger

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates" / "typescript"


@lru_cache(maxsize=None)
def _jinja_env(templates_dir: str):
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(disabled_extensions=("jinja",)),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def emit_declaration(name, fields, templates_dir=TEMPLATES_DIR):
    """
    Format one declaration block.

    `fields` is an ordered list of (emitted_name, ts_type) pairs; the output is

        export type <name> = {
        \t<emitted_name>: <ts_type>
        }

    with no trailing newline.
    """
    template = _jinja_env(str(templates_dir)).get_template("declaration.jinja")
    return template.render(
        name=name,
        fields=[{"name": field_name, "ts_type": ts_type} for field_name, ts_type in fields],
    )


def generate_declaration(struct, templates_dir=TEMPLATES_DIR):
    """
    Extract, translate and format one struct.

    Every field is translated before anything is rendered, so an
    UnsupportedTypeError leaves no partial declaration behind.
    """
    name, descriptors = extract_struct(struct)
    fields = [(d.emitted_name, map_to_ts_type(d.type_spec)) for d in descriptors]
    logger.debug(f"[GEN] {name} ({len(fields)} fields)")
    return emit_declaration(name, fields, templates_dir)
