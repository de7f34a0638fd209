"""graphdoc — normalize cyclic object graphs into resource documents.

A schema of types (attribute and relationship fields per type) drives a
normalizer that splits every reachable object into a flat resource, replaces
nested objects with ``{id, type}`` references, and emits each related
resource exactly once under ``included``.
"""

__version__ = "0.3.0"

from graphdoc.errors import (
    DuplicateTypeError,
    FieldMismatchError,
    InvalidTypeDescriptorError,
    NormalizationError,
    NotSerializableError,
    SchemaFileError,
    UnknownTypeError,
)
from graphdoc.normalizer.collector import GraphNormalizer, create_normalizer
from graphdoc.registry.models import TypeDescriptor
from graphdoc.registry.type_registry import TypeRegistry

__all__ = [
    "__version__",
    "DuplicateTypeError",
    "FieldMismatchError",
    "GraphNormalizer",
    "InvalidTypeDescriptorError",
    "NormalizationError",
    "NotSerializableError",
    "SchemaFileError",
    "TypeDescriptor",
    "TypeRegistry",
    "UnknownTypeError",
    "create_normalizer",
]
