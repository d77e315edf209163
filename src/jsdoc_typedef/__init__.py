"""Generate JSDoc @typedef comments from JSON payloads.

This package provides:
- Schema inference with named string and structural subtypes
- Rendering schemas as @typedef comments, and parsing them back
- Loaders for payloads and user-supplied subtype definitions
"""

from .errors import (
    InvalidExtraTypeError,
    InvalidInputError,
    TypedefError,
    UnsupportedValueError,
)
from .loaders import (
    build_registry,
    infer_named_type,
    load_payload,
    parse_extra_types,
    to_json_document,
)
from .schema import (
    HydrationCache,
    StringType,
    StructType,
    deserialize,
    hydrate,
    infer_schema,
    is_of_type,
    render_schema,
    serialize,
)

__version__ = "0.1.0"

__all__ = [
    # Schema engine
    "infer_schema",
    "is_of_type",
    "hydrate",
    "HydrationCache",
    "serialize",
    "render_schema",
    "deserialize",
    # Named types
    "StringType",
    "StructType",
    "infer_named_type",
    # Loaders
    "load_payload",
    "parse_extra_types",
    "build_registry",
    "to_json_document",
    # Errors
    "TypedefError",
    "InvalidInputError",
    "InvalidExtraTypeError",
    "UnsupportedValueError",
]
