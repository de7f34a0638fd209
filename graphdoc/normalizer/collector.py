"""Graph collection — breadth-first normalization with deduplication.

Roots become ``data``; every other reachable object becomes one entry in
``included``. Objects are keyed by ``(type, id-string)``: the first object
discovered for a key wins and later objects with the same key are skipped,
which is what makes shared references and cycles safe. Callers must ensure
that objects sharing a key carry the same content.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Mapping

from graphdoc.normalizer.decompose import ResourceKey, decompose, identify
from graphdoc.registry.type_registry import DescriptorLike, TypeRegistry

logger = logging.getLogger(__name__)


class GraphNormalizer:
    """Normalize object graphs against a fixed ``TypeRegistry``.

    Instances hold no per-call state, so one normalizer can serve any number
    of (including concurrent) ``normalize`` calls.
    """

    def __init__(self, registry: TypeRegistry, strict_field_order: bool = True):
        self.registry = registry
        self.strict_field_order = strict_field_order

    def normalize(self, root: Any) -> dict:
        """Normalize ``None``, one object, or a list of objects into a document.

        ``data`` mirrors the root shape; ``included`` holds every non-root
        resource reachable from the roots and is omitted when empty.
        """
        if root is None:
            return {"data": None}

        is_collection = isinstance(root, (list, tuple))
        roots = list(root) if is_collection else [root]

        data = []
        queue: deque = deque()
        seen: set[ResourceKey] = set()
        for obj in roots:
            resource, targets = self._decompose(obj)
            data.append(resource)
            seen.add((resource["type"], resource["id"]))
            queue.extend(targets)

        included: dict[ResourceKey, dict] = {}
        while queue:
            current = queue.popleft()
            key = identify(current)
            if key in seen:
                logger.debug("Skipping already collected %s[%s]", *key)
                continue

            resource, targets = self._decompose(current)
            seen.add(key)
            included[key] = resource
            queue.extend(targets)

        document: dict[str, Any] = {"data": data if is_collection else data[0]}
        if included:
            document["included"] = list(included.values())

        logger.debug(
            "Normalized %d root(s) with %d included resource(s)", len(data), len(included)
        )
        return document

    def deserialize(self, document: dict) -> Any:
        """Rebuild an object graph from a normalized document.

        Part of the public contract but not supported.
        """
        raise NotImplementedError("Deserialization of normalized documents is not supported")

    def _decompose(self, obj: Any) -> tuple[dict, list]:
        return decompose(obj, self.registry, strict_field_order=self.strict_field_order)


def create_normalizer(
    type_descriptors: TypeRegistry | Mapping[str, Any] | Iterable[DescriptorLike],
    *,
    strict_field_order: bool = True,
) -> GraphNormalizer:
    """Build a ``GraphNormalizer`` from a descriptor list or an existing registry.

    A schema mapping of the form ``{"types": [...]}`` is accepted as well.

    Raises DuplicateTypeError or InvalidTypeDescriptorError while building
    the registry.
    """
    if isinstance(type_descriptors, Mapping):
        type_descriptors = type_descriptors.get("types") or []
    registry = (
        type_descriptors
        if isinstance(type_descriptors, TypeRegistry)
        else TypeRegistry(type_descriptors)
    )
    return GraphNormalizer(registry, strict_field_order=strict_field_order)
