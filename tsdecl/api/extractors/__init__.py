"""Model extraction utilities."""

from .struct_extractor import (
    FieldDescriptor,
    get_structs,
    get_exported_structs,
    find_struct,
    extract_struct,
)
from .type_mapper import map_to_ts_type, TS_PRIMITIVE_TYPES

__all__ = [
    "FieldDescriptor",
    "get_structs",
    "get_exported_structs",
    "find_struct",
    "extract_struct",
    "map_to_ts_type",
    "TS_PRIMITIVE_TYPES",
]
