"""Type mapping from declared struct field types to TypeScript types."""

from tsdecl.lib.type_spec import (
    QualifiedReference,
    SequenceOf,
    Primitive,
    parse_signature,
    strip_pointers,
)
from ..errors import UnsupportedTypeError

TS_PRIMITIVE_TYPES = {
    "int": "number",
    "float64": "number",
    "string": "string",
    "bool": "boolean",
}


def map_to_ts_type(type_spec):
    """
    Map a declared field type to a TypeScript type name.

    Accepts a TypeSpec or a raw signature string ("*float64", "[]model.Room").

    - model.Point2f      -> Point2f     (reference to another declaration)
    - []model.Room       -> Room[]
    - *float64 / float64 -> number      (pointers carry no nullability)
    - int -> number, string -> string, bool -> boolean

    Raises UnsupportedTypeError for anything else, e.g. complex128 or []int.
    """
    if isinstance(type_spec, str):
        type_spec = parse_signature(type_spec)

    ts_type = _translate(type_spec)
    if ts_type is None:
        raise UnsupportedTypeError(type_spec.signature)
    return ts_type


def _translate(type_spec):
    type_spec = strip_pointers(type_spec)

    # References are assumed to be declared elsewhere; no existence check
    if isinstance(type_spec, QualifiedReference):
        return type_spec.name

    # Sequences are only supported for referenced types
    if isinstance(type_spec, SequenceOf):
        if not _is_reference(type_spec.item):
            return None
        return f"{_translate(type_spec.item)}[]"

    if isinstance(type_spec, Primitive):
        return TS_PRIMITIVE_TYPES.get(type_spec.kind)

    return None


def _is_reference(type_spec):
    type_spec = strip_pointers(type_spec)
    if isinstance(type_spec, SequenceOf):
        return _is_reference(type_spec.item)
    return isinstance(type_spec, QualifiedReference)
