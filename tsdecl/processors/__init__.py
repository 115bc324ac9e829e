"""
Processors module for tsdecl.

This module contains TextX object processors that run during model construction
to validate and normalize individual model elements.
"""

from tsdecl.processors.object_processors import (
    get_obj_processors,
    tag_processor,
    struct_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "tag_processor",
    "struct_obj_processor",
]
