"""Render schemas as JSDoc @typedef comments."""

from typing import Any, Optional

from .hydrate import HydrationCache
from .inference import infer_schema
from .types import STRING, UNDEFINED, Registry, string_types, struct_types


def render_schema(schema: Any, indent: int = 0) -> str:
    """Format a schema as an uncommented JSDoc type expression.

    Args:
        schema: The schema to render
        indent: Number of spaces the enclosing object is indented by

    Returns:
        The type expression; objects span several lines
    """
    if isinstance(schema, str):
        return schema

    if isinstance(schema, list):
        element = schema[0] if schema else UNDEFINED
        return f"Array<{render_schema(element, indent)}>"

    prefix = " " * (indent + 2)
    lines = ["{"]
    for key, value in schema.items():
        lines.append(f"{prefix}{key}: {render_schema(value, indent + 2)}")
    lines.append(" " * indent + "}")
    return "\n".join(lines)


def wrap_typedef_comment(name: str, description: str, type_string: str) -> str:
    """Wrap a rendered type expression as a @typedef doc comment."""
    lines = ["/**"]
    for line in description.split("\n"):
        lines.append(f" * {line}")

    type_lines = type_string.split("\n")
    lines.append(f" * @typedef {{{type_lines[0]}")
    for line in type_lines[1:]:
        lines.append(f" * {line}")
    lines[-1] += f"}} {name}"
    lines.append(" */")
    return "\n".join(lines)


def serialize(
    name: str,
    description: str,
    value: Any,
    registry: Optional[Registry] = None,
    cache: Optional[HydrationCache] = None,
) -> str:
    """Generate typedef comments for a value and every named type.

    The root type comes first, followed by the string subtypes and then the
    structural subtypes, each in registry order. Structural subtypes are
    rendered from their original schema so nested names stay visible.
    """
    registry = registry or {}
    blocks = [
        wrap_typedef_comment(
            name, description, render_schema(infer_schema(value, registry, cache))
        )
    ]

    for type_name in string_types(registry):
        blocks.append(
            wrap_typedef_comment(type_name, registry[type_name].description, STRING)
        )

    for type_name in struct_types(registry):
        entry = registry[type_name]
        blocks.append(
            wrap_typedef_comment(
                type_name, entry.description, render_schema(entry.schema)
            )
        )

    return "\n\n".join(blocks)
