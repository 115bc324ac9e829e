"""Errors raised while turning structs into declarations."""


class GenerationError(Exception):
    """Base class for failures that abort a generation run."""


class UnsupportedTypeError(GenerationError):
    """A field type has no TypeScript translation."""

    def __init__(self, signature: str):
        self.signature = signature
        super().__init__(f"No translation for type: {signature}")


class DuplicateDeclarationError(GenerationError):
    """Two structs in one export list would emit the same type name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Declaration '{name}' is exported more than once.")
