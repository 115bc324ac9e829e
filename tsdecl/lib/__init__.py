"""Schema-level building blocks: typed field types and struct tag parsing."""

from tsdecl.lib.type_spec import (
    DEFAULT_PACKAGE,
    GO_BUILTIN_TYPES,
    Primitive,
    NamedType,
    QualifiedReference,
    PointerTo,
    SequenceOf,
    TypeSpec,
    parse_signature,
    resolve_name,
    strip_pointers,
)
from tsdecl.lib.tags import (
    JSON_TAG_KEY,
    SKIP_SENTINEL,
    lookup_tag,
    parse_json_tag,
    strip_tag_quotes,
)

__all__ = [
    "DEFAULT_PACKAGE",
    "GO_BUILTIN_TYPES",
    "Primitive",
    "NamedType",
    "QualifiedReference",
    "PointerTo",
    "SequenceOf",
    "TypeSpec",
    "parse_signature",
    "resolve_name",
    "strip_pointers",
    "JSON_TAG_KEY",
    "SKIP_SENTINEL",
    "lookup_tag",
    "parse_json_tag",
    "strip_tag_quotes",
]
