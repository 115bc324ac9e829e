"""
Validation module for tsdecl.

Field-level checks live in the struct object processor; the checks here need
the whole schema.
"""

from tsdecl.validation.struct_validators import (
    verify_unique_struct_names,
    verify_export_list,
)

__all__ = [
    "verify_unique_struct_names",
    "verify_export_list",
]
