"""JSON Schema for graphdoc schema configuration files.

A schema file declares the resource types a normalizer knows about. This
schema is the first gate when loading one: a file that fails it is rejected
before any descriptor is built.
"""

from graphdoc.spec import SCHEMA_FORMAT_VERSION

_FIELD_NAME = {
    "type": "string",
    "minLength": 1,
    "pattern": r"^[A-Za-z_][A-Za-z0-9_\-]*$",
}

TYPE_DESCRIPTOR_SCHEMA: dict = {
    "type": "object",
    "required": ["type", "attributes", "relationships"],
    "additionalProperties": False,
    "properties": {
        "id": {
            "type": "string",
            "enum": ["string", "number"],
            "description": "Kind of identifier the type uses. Informational only.",
        },
        "type": {
            "type": "string",
            "minLength": 1,
            "description": "Type name; the registry's primary key.",
        },
        "attributes": {
            "type": "array",
            "items": _FIELD_NAME,
            "description": "Scalar fields copied into 'attributes', in output order.",
        },
        "relationships": {
            "type": "array",
            "items": _FIELD_NAME,
            "description": "Fields holding nested objects, replaced by references.",
        },
    },
}

SCHEMA_FILE_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": f"https://graphdoc.dev/schema/types/v{SCHEMA_FORMAT_VERSION}",
    "title": "graphdoc type schema",
    "description": "Resource types known to a graphdoc normalizer.",
    "type": "object",
    "required": ["types"],
    "additionalProperties": False,
    "properties": {
        "version": {"type": "string"},
        "types": {
            "type": "array",
            "items": TYPE_DESCRIPTOR_SCHEMA,
        },
    },
}


def get_schema() -> dict:
    """Return the canonical JSON Schema for schema configuration files."""
    return SCHEMA_FILE_SCHEMA
