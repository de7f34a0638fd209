"""Registry data models — type descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from graphdoc.errors import InvalidTypeDescriptorError

RESERVED_FIELDS = ("id", "type")


@dataclass(frozen=True)
class TypeDescriptor:
    """Schema entry for one resource type.

    ``attribute_fields`` are copied verbatim into ``attributes``;
    ``relationship_fields`` hold nested objects (or lists of them) and are
    replaced by references. Both keep declaration order.
    """

    type: str
    attribute_fields: tuple[str, ...] = ()
    relationship_fields: tuple[str, ...] = ()
    id_kind: str = "string"  # Informational only

    # Populated in __post_init__
    expected_fields: tuple[str, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self):
        for label, fields in (
            ("attributes", self.attribute_fields),
            ("relationships", self.relationship_fields),
        ):
            if not isinstance(fields, (list, tuple)):
                raise InvalidTypeDescriptorError(
                    self.type, f"{label} must be a list of field names, got {type(fields).__name__}"
                )
        object.__setattr__(self, "attribute_fields", tuple(self.attribute_fields))
        object.__setattr__(self, "relationship_fields", tuple(self.relationship_fields))
        object.__setattr__(
            self, "expected_fields", self.attribute_fields + self.relationship_fields
        )

    @property
    def has_attributes(self) -> bool:
        return bool(self.attribute_fields)

    @property
    def has_relationships(self) -> bool:
        return bool(self.relationship_fields)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TypeDescriptor:
        """Build a descriptor from its configuration form.

        Accepts ``{id, type, attributes, relationships}``; the ``id`` entry is
        the informational id kind (e.g. ``"number"``).
        """
        if "type" not in data:
            raise InvalidTypeDescriptorError(repr(data), "missing 'type'")
        return cls(
            type=data["type"],
            attribute_fields=data.get("attributes") or (),
            relationship_fields=data.get("relationships") or (),
            id_kind=str(data.get("id", "string")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id_kind,
            "type": self.type,
            "attributes": list(self.attribute_fields),
            "relationships": list(self.relationship_fields),
        }
