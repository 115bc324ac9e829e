"""
TextX object processors for struct schemas.

Object processors run during model construction to validate and normalize
individual model elements (tags, structs).
"""

from textx import get_location, TextXSemanticError

from tsdecl.lib.tags import JSON_TAG_KEY, lookup_tag, parse_json_tag, strip_tag_quotes


# ------------------------------------------------------------------------------
# Match rule converters

def tag_processor(raw):
    """Drop the backticks around a raw struct tag."""
    return strip_tag_quotes(raw)


# ------------------------------------------------------------------------------
# Struct processors

def struct_obj_processor(struct):
    """
    Struct validation:
    - Field names must be unique
    - Emitted (json) names of non-skipped fields must be unique
    """
    seen = set()
    emitted = {}
    for field in getattr(struct, "fields", []) or []:
        if field.name in seen:
            raise TextXSemanticError(
                f"Struct '{struct.name}' field '{field.name}' already exists.",
                **get_location(field),
            )
        seen.add(field.name)

        json_name, skip = parse_json_tag(lookup_tag(field.tag, JSON_TAG_KEY))
        if skip:
            continue
        emitted_name = json_name or field.name
        if emitted_name in emitted:
            raise TextXSemanticError(
                f"Struct '{struct.name}' fields '{emitted[emitted_name]}' and '{field.name}' "
                f"are both serialized as '{emitted_name}'.",
                **get_location(field),
            )
        emitted[emitted_name] = field.name


# ------------------------------------------------------------------------------
# Export all processors

def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "Tag": tag_processor,
        "Struct": struct_obj_processor,
    }
