"""Single-object decomposition.

Splits one serializable object into its resource form and the list of
related objects that still need to be visited. Objects may be mappings,
dataclass instances, or plain objects; fields are read in their natural
iteration order (key order, declared field order, or ``vars()`` order).
"""

from __future__ import annotations

import dataclasses
import logging
import math
import numbers
from typing import Any, Mapping

from graphdoc.errors import FieldMismatchError, NotSerializableError
from graphdoc.registry.models import RESERVED_FIELDS
from graphdoc.registry.type_registry import TypeRegistry

logger = logging.getLogger(__name__)

ResourceKey = tuple[str, str]


def read_fields(obj: Any) -> Mapping[str, Any]:
    """Return the object's fields as an ordered mapping.

    Raises NotSerializableError for values that carry no fields at all
    (scalars, lists, None).
    """
    if isinstance(obj, Mapping):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return vars(obj)
    raise NotSerializableError(f"Object is not serializable: {type(obj).__name__}")


def format_id(value: Any) -> str:
    """Render an identifier as a locale-independent string.

    Strings pass through; integers use decimal notation; integral floats drop
    the fractional part so ``1.0`` and ``1`` name the same resource.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NotSerializableError(
            f"Object id must be a string or number, got {type(value).__name__}"
        )
    if isinstance(value, numbers.Integral):
        return str(int(value))
    as_float = float(value)
    if not math.isfinite(as_float):
        raise NotSerializableError(f"Object id must be a finite number, got {as_float!r}")
    if as_float.is_integer():
        return str(int(as_float))
    return repr(as_float)


def identify(obj: Any) -> ResourceKey:
    """Return the dedup key ``(type, id-string)`` of a serializable object."""
    fields = read_fields(obj)
    if "id" not in fields or "type" not in fields:
        raise NotSerializableError("Object is not serializable: missing 'id' or 'type'")
    type_name = fields["type"]
    if not isinstance(type_name, str):
        raise NotSerializableError(
            f"Object type must be a string, got {type(type_name).__name__}"
        )
    return type_name, format_id(fields["id"])


def decompose(
    obj: Any,
    registry: TypeRegistry,
    strict_field_order: bool = True,
) -> tuple[dict, list]:
    """Decompose *obj* into ``(resource, targets)``.

    ``targets`` lists the related objects in field order (array elements in
    array order) so the caller can queue them for their own decomposition.
    """
    type_name, resource_id = identify(obj)
    descriptor = registry.resolve(type_name)
    fields = read_fields(obj)

    actual = [name for name in fields if name not in RESERVED_FIELDS]
    expected = list(descriptor.expected_fields)
    if strict_field_order:
        matches = actual == expected
    else:
        matches = len(actual) == len(expected) and set(actual) == set(expected)
    if not matches:
        raise FieldMismatchError(type_name, expected, actual)

    resource: dict[str, Any] = {"id": resource_id, "type": type_name}
    targets: list = []

    if descriptor.has_attributes:
        resource["attributes"] = {name: fields[name] for name in descriptor.attribute_fields}

    if descriptor.has_relationships:
        relationships = {}
        for name in descriptor.relationship_fields:
            relationships[name] = _relationship_reference(fields[name], targets)
        resource["relationships"] = relationships

    logger.debug(
        "Decomposed %s[%s] with %d related object(s)", type_name, resource_id, len(targets)
    )
    return resource, targets


def _relationship_reference(value: Any, targets: list) -> dict:
    """Build the reference for one relationship field and collect its targets."""
    if value is None:
        return {"data": None}

    if isinstance(value, (list, tuple)):
        data = []
        for item in value:
            data.append(_linkage(item))
            targets.append(item)
        return {"data": data}

    linkage = _linkage(value)
    targets.append(value)
    return {"data": linkage}


def _linkage(obj: Any) -> dict:
    type_name, resource_id = identify(obj)
    return {"id": resource_id, "type": type_name}
