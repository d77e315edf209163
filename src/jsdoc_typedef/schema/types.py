"""Named type registry data model.

A schema is plain JSON-compatible data:

- a primitive tag (``"string"``, ``"number"``, ``"boolean"``, ``"undefined"``,
  or ``NULL_TAG`` for nulls)
- the name of a registry entry (``"URI"``, ``"User"``)
- a dict mapping field names to schemas
- a one-element list ``[schema]`` describing an array

Registries map type names to ``StringType`` or ``StructType`` entries. Their
iteration order is the order in which named types are tried during inference.
"""

import re
from dataclasses import dataclass
from typing import Any, Union

# Nulls can't be told apart from a single sample, so they are reported as
# "maybe a string".
NULL_TAG = "(string|null)"

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
UNDEFINED = "undefined"

Schema = Union[str, dict, list]


@dataclass(frozen=True)
class StringType:
    """A string subtype recognised by a regular expression."""

    description: str
    match: re.Pattern

    def matches(self, value: str) -> bool:
        return self.match.search(value) is not None

    def to_json(self) -> dict:
        return {"description": self.description, "match": self.match.pattern}


@dataclass(frozen=True)
class StructType:
    """A structural subtype described by a (possibly unhydrated) schema."""

    description: str
    schema: Any

    def to_json(self) -> dict:
        return {"description": self.description, "schema": self.schema}


NamedType = Union[StringType, StructType]
Registry = dict[str, NamedType]


def is_schema(value: Any) -> bool:
    """Check that a value has the shape of a schema.

    Leaves must be strings, objects must have string keys, and arrays must
    hold exactly one element schema.
    """
    if isinstance(value, str):
        return True
    if isinstance(value, list):
        return len(value) == 1 and is_schema(value[0])
    if isinstance(value, dict):
        return all(
            isinstance(key, str) and is_schema(field) for key, field in value.items()
        )
    return False


def string_types(registry: Registry) -> list[str]:
    """Names of the string subtypes, in registry order."""
    return [name for name, entry in registry.items() if isinstance(entry, StringType)]


def struct_types(registry: Registry) -> list[str]:
    """Names of the structural subtypes, in registry order."""
    return [name for name, entry in registry.items() if isinstance(entry, StructType)]


def registry_to_json(registry: Registry) -> dict:
    return {name: entry.to_json() for name, entry in registry.items()}
