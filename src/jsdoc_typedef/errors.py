"""Exceptions raised by jsdoc_typedef."""


class TypedefError(Exception):
    """Base class for all jsdoc_typedef errors."""


class InvalidInputError(TypedefError):
    """The payload could not be parsed as JSON."""


class InvalidExtraTypeError(TypedefError):
    """A user-supplied named type definition could not be processed."""


class UnsupportedValueError(TypedefError, TypeError):
    """A value that has no JSON representation was passed to inference."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Cannot infer a schema for value of type {type(value).__name__}"
        )
