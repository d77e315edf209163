"""Infer a schema from a JSON-serializable value.

Inference looks at a single sample:

- arrays are described by their first element only
- nulls are reported as ``(string|null)``
- strings and objects are reported by name when they match a registry entry,
  trying entries in registry order (first match wins)
"""

import logging
from typing import Any, Optional

from ..errors import UnsupportedValueError
from .hydrate import HydrationCache, hydrate_named
from .types import (
    BOOLEAN,
    NULL_TAG,
    NUMBER,
    STRING,
    UNDEFINED,
    Registry,
    string_types,
    struct_types,
)

logger = logging.getLogger(__name__)


def infer_type(value: Any) -> str:
    """Get the kind of a JSON value."""
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return BOOLEAN
    elif isinstance(value, (int, float)):
        return NUMBER
    elif isinstance(value, str):
        return STRING
    elif isinstance(value, (list, tuple)):
        return "array"
    elif isinstance(value, dict):
        return "object"
    raise UnsupportedValueError(value)


def infer_schema(
    value: Any,
    registry: Optional[Registry] = None,
    cache: Optional[HydrationCache] = None,
) -> Any:
    """Recursively infer the schema of a JSON value.

    Args:
        value: Any JSON-serializable value
        registry: Named types to report matching strings and objects by name
        cache: Hydration memo to reuse across calls sharing ``registry``

    Returns:
        The inferred schema

    Raises:
        UnsupportedValueError: If the value contains something JSON can't hold
    """
    registry = registry or {}
    if cache is None:
        cache = HydrationCache()
    return _infer(value, registry, cache)


def _infer(value, registry, cache):
    kind = infer_type(value)

    if kind == STRING:
        for type_name in string_types(registry):
            if registry[type_name].matches(value):
                return type_name
        return STRING

    if kind == "null":
        # TODO: use multiple sample documents to infer the real type of nulls
        return NULL_TAG

    if kind == "array":
        if not value:
            return [UNDEFINED]
        return [_infer(value[0], registry, cache)]

    if kind != "object":
        return kind

    for type_name in struct_types(registry):
        if is_of_type(value, hydrate_named(type_name, registry, cache)):
            logger.debug("Object matched named type %s", type_name)
            return type_name

    return {key: _infer(field, registry, cache) for key, field in value.items()}


def is_of_type(value: Any, schema: Any) -> bool:
    """Determine whether a value has exactly the shape of a hydrated schema.

    The value is inferred without any named types and compared field for
    field; missing or extra keys are a mismatch.
    """
    try:
        return infer_schema(value) == schema
    except UnsupportedValueError:
        return False
