"""Loaders for payloads and user-supplied named types.

Extra types are JSON objects mapping a type name to either a string subtype
or a structural subtype:

{
    "URI": {"description": "A fully qualified URL", "match": "^https?://"},
    "Label": {"description": "A label", "schema": {"name": "string"}}
}

Several fragments can be merged into one registry; a later definition of a
name replaces an earlier one.
"""

import json
import logging
import re
import sys
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO, Union

from .errors import InvalidExtraTypeError, InvalidInputError
from .schema.hydrate import HydrationCache
from .schema.inference import infer_schema
from .schema.types import Registry, StringType, StructType, is_schema

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Generated by jsdoc-typedef"


def load_payload(source: Union[Path, str, TextIO, None] = None) -> Any:
    """Load the JSON value to infer a schema from.

    Args:
        source: Path to a JSON file, an open text stream, or None for stdin

    Returns:
        The parsed JSON value

    Raises:
        InvalidInputError: If the content is not valid JSON
    """
    if source is None:
        source = sys.stdin

    try:
        if isinstance(source, (str, Path)):
            logger.debug("Reading payload from %s", source)
            with open(source, "r", encoding="utf-8") as f:
                text = f.read()
        else:
            text = source.read()
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Payload is not valid JSON: {e}") from e


def parse_extra_types(fragment: str, source: Optional[str] = None) -> Registry:
    """Parse one JSON fragment of named type definitions.

    Args:
        fragment: JSON text mapping type names to definitions
        source: Where the fragment came from, used in error messages.
                Defaults to the fragment itself.

    Returns:
        Registry entries in the order they appear in the fragment

    Raises:
        InvalidExtraTypeError: If the fragment is not valid JSON, an entry is
            malformed, or a ``match`` pattern does not compile
    """
    source = source or fragment
    try:
        parsed = json.loads(fragment)
    except json.JSONDecodeError as e:
        raise InvalidExtraTypeError(
            f"Input for --extra is not valid JSON: {source}"
        ) from e

    if not isinstance(parsed, dict):
        raise InvalidExtraTypeError(
            f"Input for --extra must be a JSON object: {source}"
        )

    registry = {}
    for type_name, definition in parsed.items():
        registry[type_name] = _parse_definition(type_name, definition)
    return registry


def _parse_definition(type_name: str, definition: Any):
    if not isinstance(definition, dict):
        raise InvalidExtraTypeError(f"Definition of {type_name} must be an object.")

    description = definition.get("description", "")
    if not isinstance(description, str):
        raise InvalidExtraTypeError(
            f"Definition of {type_name} has a description that is not a string."
        )

    if definition.get("match"):
        try:
            pattern = re.compile(definition["match"])
        except (re.error, TypeError) as e:
            raise InvalidExtraTypeError(
                f"Value for {type_name}.match could not be processed as a "
                "regular expression."
            ) from e
        return StringType(description=description, match=pattern)

    if "schema" in definition:
        if not is_schema(definition["schema"]):
            raise InvalidExtraTypeError(
                f"Definition of {type_name} has an invalid schema: "
                f"{definition['schema']!r}"
            )
        return StructType(description=description, schema=definition["schema"])

    raise InvalidExtraTypeError(
        f"Definition of {type_name} needs either a 'match' or a 'schema'."
    )


def load_extra_file(file_path: Path) -> Registry:
    """Parse named type definitions stored in a JSON file."""
    file_path = Path(file_path)
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_extra_types(f.read(), source=str(file_path))


def build_registry(fragments: Iterable[Registry]) -> Registry:
    """Merge registry fragments, later definitions win."""
    registry = {}
    for fragment in fragments:
        for type_name in fragment:
            if type_name in registry:
                logger.debug("Named type %s redefined", type_name)
        registry.update(fragment)
    return registry


def infer_named_type(
    value: Any,
    description: str,
    registry: Optional[Registry] = None,
) -> StructType:
    """Build a structural subtype from a sample value.

    The sample is inferred against ``registry``, so named types can be built
    up from each other (a Repository made of Users and URIs).
    """
    return StructType(description=description, schema=infer_schema(value, registry))


def to_json_document(
    name: str,
    description: str,
    value: Any,
    registry: Optional[Registry] = None,
    cache: Optional[HydrationCache] = None,
) -> dict:
    """Machine-readable form of the root type: {name: {schema, description}}."""
    return {
        name: {
            "schema": infer_schema(value, registry, cache),
            "description": description,
        }
    }
