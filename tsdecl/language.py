"""
Core metamodel and model builders for struct schemas.

This module provides the main entry points for building and validating
schemas. Validation logic is organized in the validation/ package, and object
processors are in the processors/ package.
"""

from os.path import join, dirname, abspath
from textx import (
    metamodel_from_file,
    get_children_of_type,
    get_location,
    TextXSemanticError,
)

from tsdecl.lib.type_spec import (
    DEFAULT_PACKAGE,
    PointerTo,
    QualifiedReference,
    SequenceOf,
    resolve_name,
)
from tsdecl.validation import verify_unique_struct_names, verify_export_list
from tsdecl.processors import get_obj_processors


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")
SCHEMAS_DIR = join(THIS_DIR, "schemas")
DEFAULT_SCHEMA = join(SCHEMAS_DIR, "indoormap.sdef")


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path: str):
    """Parse & validate a schema from a file path."""
    return StructSchemaMetaModel.model_from_file(model_path)


def build_model_str(model_str: str):
    """Parse & validate a schema from a string."""
    return StructSchemaMetaModel.model_from_str(model_str)


def build_default_model():
    """Parse the bundled indoor-map schema."""
    return build_model(DEFAULT_SCHEMA)


# ------------------------------------------------------------------------------
# Type resolution

def _to_type_spec(node, struct_names, package):
    """Convert a TypeRef AST node into a TypeSpec."""
    cls = type(node).__name__

    if cls == "PointerType":
        return PointerTo(_to_type_spec(node.elem, struct_names, package))
    if cls == "SequenceType":
        return SequenceOf(_to_type_spec(node.elem, struct_names, package))
    if cls == "QualifiedType":
        return QualifiedReference(node.qualifier, node.name)
    if cls == "NamedType":
        return resolve_name(node.name, struct_names, package)

    raise TextXSemanticError(
        f"Unknown type node '{cls}'.",
        **get_location(node),
    )


def _resolve_field_types(model):
    """
    Attach a typed `type_spec` to every field.

    Bare names of structs in this schema are qualified with the schema's
    package, the way they appear in the Go runtime (Point2f -> model.Point2f).
    """
    package = getattr(model, "package", None) or DEFAULT_PACKAGE
    model.package = package
    structs = list(get_children_of_type("Struct", model))
    struct_names = {s.name for s in structs}

    for struct in structs:
        for field in struct.fields:
            field.type_spec = _to_type_spec(field.type, struct_names, package)


def model_processor(model, metamodel=None):
    """
    Main model processor - runs after parsing to perform cross-object validation.
    Order matters: unique names -> export list -> field types
    """
    verify_unique_struct_names(model)
    verify_export_list(model)
    _resolve_field_types(model)


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/schema.tx.
    Registers object processors and the model processor.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "schema.tx"),
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    # Model processors run after the whole model is built
    mm.register_model_processor(model_processor)

    return mm


# Create the global metamodel instance
StructSchemaMetaModel = get_metamodel(debug=False)
