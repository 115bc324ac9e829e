"""Model-wide checks for struct schemas (run after all objects are built)."""

from textx import get_children_of_type, get_location, TextXSemanticError


def verify_unique_struct_names(model):
    """Two structs with one name would emit colliding declarations."""
    seen = set()
    for struct in get_children_of_type("Struct", model):
        if struct.name in seen:
            raise TextXSemanticError(
                f"Struct with name '{struct.name}' already exists.",
                **get_location(struct),
            )
        seen.add(struct.name)


def verify_export_list(model):
    """Each struct may appear in the export list at most once."""
    export = getattr(model, "export", None)
    if export is None:
        return
    seen = set()
    for struct in export.structs:
        if struct.name in seen:
            raise TextXSemanticError(
                f"Struct '{struct.name}' is exported more than once.",
                **get_location(export),
            )
        seen.add(struct.name)
