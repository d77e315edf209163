"""Expand named type references into primitive-only schemas."""

import copy
import logging
from typing import Any, Optional

from .types import STRING, Registry, StringType, StructType

logger = logging.getLogger(__name__)


class HydrationCache:
    """Memo of hydrated structural subtypes.

    Entries are keyed by type name and the set of names excluded while
    hydrating it. A cache belongs to one registry; call ``clear()`` if that
    registry's entries are replaced.
    """

    def __init__(self):
        self._hydrated: dict[tuple[str, frozenset], Any] = {}

    def get(self, name: str, visited: frozenset):
        return self._hydrated.get((name, visited))

    def put(self, name: str, visited: frozenset, schema) -> None:
        self._hydrated[(name, visited)] = schema

    def __contains__(self, key) -> bool:
        return key in self._hydrated

    def __len__(self) -> int:
        return len(self._hydrated)

    def clear(self) -> None:
        self._hydrated.clear()


def hydrate(
    schema: Any,
    registry: Optional[Registry] = None,
    visited: frozenset = frozenset(),
    cache: Optional[HydrationCache] = None,
) -> Any:
    """Replace named type references in a schema with their structure.

    Structural subtypes are expanded recursively. A name is never expanded
    inside its own expansion: once a name is in ``visited`` it is left as a
    plain string, which also stops cycles between distinct names. String
    subtypes collapse to ``"string"``.

    Args:
        schema: The schema to hydrate
        registry: Named types that may be referenced
        visited: Names already being expanded higher up the tree
        cache: Optional memo shared across calls on the same registry

    Returns:
        A schema made only of primitive tags, dicts and lists (plus any names
        that could not be expanded)
    """
    registry = registry or {}

    if isinstance(schema, str):
        entry = registry.get(schema)
        if isinstance(entry, StructType) and schema not in visited:
            return _hydrate_entry(schema, entry, registry, visited, cache)
        if isinstance(entry, StringType):
            return STRING
        return schema

    if isinstance(schema, list):
        return [hydrate(elem, registry, visited, cache) for elem in schema]

    if isinstance(schema, dict):
        return {
            key: hydrate(value, registry, visited, cache)
            for key, value in schema.items()
        }

    return schema


def hydrate_named(
    name: str,
    registry: Registry,
    cache: Optional[HydrationCache] = None,
) -> Any:
    """Return the fully hydrated shape of one structural subtype."""
    return hydrate(name, registry, frozenset(), cache)


def _hydrate_entry(name, entry, registry, visited, cache):
    inner_visited = visited | {name}
    if cache is not None:
        cached = cache.get(name, inner_visited)
        if cached is not None:
            return copy.deepcopy(cached)

    logger.debug("Hydrating named type %s", name)
    hydrated = hydrate(entry.schema, registry, inner_visited, cache)

    if cache is not None:
        cache.put(name, inner_visited, copy.deepcopy(hydrated))
    return hydrated
