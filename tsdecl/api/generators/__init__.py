"""Code generators for tsdecl."""

from .declaration_generator import (
    TEMPLATES_DIR,
    emit_declaration,
    generate_declaration,
)

__all__ = [
    "TEMPLATES_DIR",
    "emit_declaration",
    "generate_declaration",
]
