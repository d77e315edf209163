"""Schema engine: inference, hydration, matching and the typedef codec."""

from .deserialize import deserialize, parse_type_literal
from .hydrate import HydrationCache, hydrate, hydrate_named
from .inference import infer_schema, infer_type, is_of_type
from .serialize import render_schema, serialize, wrap_typedef_comment
from .types import (
    NULL_TAG,
    is_schema,
    NamedType,
    Registry,
    StringType,
    StructType,
    registry_to_json,
    string_types,
    struct_types,
)

__all__ = [
    # Inference
    "infer_schema",
    "infer_type",
    "is_of_type",
    # Hydration
    "hydrate",
    "hydrate_named",
    "HydrationCache",
    # Typedef comments
    "serialize",
    "render_schema",
    "wrap_typedef_comment",
    "deserialize",
    "parse_type_literal",
    # Registry model
    "StringType",
    "StructType",
    "NamedType",
    "Registry",
    "NULL_TAG",
    "is_schema",
    "registry_to_json",
    "string_types",
    "struct_types",
]
