"""Extract structs and their field descriptors from a parsed schema."""

from dataclasses import dataclass

from textx import get_children_of_type

from tsdecl.lib.tags import JSON_TAG_KEY, lookup_tag, parse_json_tag
from tsdecl.lib.type_spec import TypeSpec
from ..gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    declared_name: str
    emitted_name: str
    type_spec: TypeSpec
    skip: bool = False

    @property
    def signature(self) -> str:
        return self.type_spec.signature


def get_structs(model):
    """Extract all Struct nodes from the schema, in declaration order."""
    return list(get_children_of_type("Struct", model))


def get_exported_structs(model):
    """Return the structs named in the schema's export list, in list order."""
    export = getattr(model, "export", None)
    if export is None:
        return []
    return list(export.structs)


def find_struct(model, name):
    for struct in get_structs(model):
        if struct.name == name:
            return struct
    return None


def extract_struct(struct):
    """
    Walk a struct's fields in declaration order.

    Returns (struct name, [FieldDescriptor]). Fields tagged json:"-" are
    dropped here, before their type is ever looked at. A non-empty json name
    replaces the declared field name.
    """
    descriptors = []
    for field in struct.fields:
        json_name, skip = parse_json_tag(lookup_tag(field.tag, JSON_TAG_KEY))
        if skip:
            logger.debug(f"  [SKIP] {struct.name}.{field.name}")
            continue
        descriptors.append(FieldDescriptor(
            declared_name=field.name,
            emitted_name=json_name or field.name,
            type_spec=field.type_spec,
        ))
    return struct.name, descriptors
