"""In-memory, read-only registry of type descriptors."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Union

from graphdoc.errors import DuplicateTypeError, InvalidTypeDescriptorError, UnknownTypeError
from graphdoc.registry.models import RESERVED_FIELDS, TypeDescriptor

logger = logging.getLogger(__name__)

DescriptorLike = Union[TypeDescriptor, Mapping[str, Any]]


class TypeRegistry:
    """Immutable mapping from type name to ``TypeDescriptor``.

    - resolve / get: O(1)
    - types: O(n), declaration order

    Construction fails fast on duplicate type names instead of letting the
    last declaration win.
    """

    def __init__(self, descriptors: Iterable[DescriptorLike] = ()):
        types: dict[str, TypeDescriptor] = {}
        for raw in descriptors:
            descriptor = raw if isinstance(raw, TypeDescriptor) else TypeDescriptor.from_dict(raw)
            _check_descriptor(descriptor)
            if descriptor.type in types:
                raise DuplicateTypeError(descriptor.type)
            types[descriptor.type] = descriptor

        self._types: Mapping[str, TypeDescriptor] = MappingProxyType(types)
        logger.info("Type registry built with %d type(s)", len(types))

    def resolve(self, type_name: str) -> TypeDescriptor:
        """Return the descriptor for *type_name* or raise ``UnknownTypeError``."""
        try:
            return self._types[type_name]
        except (KeyError, TypeError):
            raise UnknownTypeError(type_name) from None

    def get(self, type_name: str) -> TypeDescriptor | None:
        """Return the descriptor for *type_name*, or None."""
        try:
            return self._types.get(type_name)
        except TypeError:
            return None

    def types(self) -> list[TypeDescriptor]:
        """List descriptors in declaration order."""
        return list(self._types.values())

    def __contains__(self, type_name: object) -> bool:
        return self.get(type_name) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry({list(self._types)!r})"


def _check_descriptor(descriptor: TypeDescriptor):
    """Enforce the descriptor invariants: disjoint, unique, non-reserved fields."""
    if not isinstance(descriptor.type, str) or not descriptor.type:
        raise InvalidTypeDescriptorError(repr(descriptor.type), "type name must be a non-empty string")

    for label, fields in (
        ("attributes", descriptor.attribute_fields),
        ("relationships", descriptor.relationship_fields),
    ):
        if len(set(fields)) != len(fields):
            raise InvalidTypeDescriptorError(descriptor.type, f"duplicate names in {label}")
        reserved = [f for f in fields if f in RESERVED_FIELDS]
        if reserved:
            raise InvalidTypeDescriptorError(
                descriptor.type, f"{label} may not declare reserved field(s) {reserved}"
            )

    overlap = set(descriptor.attribute_fields) & set(descriptor.relationship_fields)
    if overlap:
        raise InvalidTypeDescriptorError(
            descriptor.type,
            f"fields declared as both attribute and relationship: {sorted(overlap)}",
        )
