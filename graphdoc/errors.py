"""Error taxonomy for registry construction and graph normalization.

Every failure is detected synchronously and aborts the whole call; there is
no partial document. All errors derive from ``NormalizationError`` so callers
can catch the family in one place.
"""

from __future__ import annotations


class NormalizationError(ValueError):
    """Base class for all graphdoc failures."""


class DuplicateTypeError(NormalizationError):
    """Two descriptors declare the same type name."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Duplicate type descriptor: {type_name!r}")


class InvalidTypeDescriptorError(NormalizationError):
    """A descriptor's field lists overlap, repeat, or use reserved names."""

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Invalid type descriptor {type_name!r}: {reason}")


class NotSerializableError(NormalizationError):
    """An object lacks a usable ``id`` or ``type``."""


class UnknownTypeError(NormalizationError):
    """An object's type has no registered descriptor."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Type is unknown: {type_name!r}")


class FieldMismatchError(NormalizationError):
    """An object's fields do not match its descriptor."""

    def __init__(self, type_name: str, expected: list[str], actual: list[str]):
        self.type_name = type_name
        self.expected = list(expected)
        self.actual = list(actual)
        self.missing = [f for f in expected if f not in actual]
        self.extra = [f for f in actual if f not in expected]

        details = []
        if self.missing:
            details.append(f"missing {self.missing}")
        if self.extra:
            details.append(f"unexpected {self.extra}")
        if not details:
            details.append(f"order {self.actual}, expected {self.expected}")
        super().__init__(
            f"Detected field difference for type {type_name!r}: " + "; ".join(details)
        )


class SchemaFileError(NormalizationError):
    """A schema configuration file could not be read or failed validation."""

    def __init__(self, path: str, issues: list[str]):
        self.path = path
        self.issues = list(issues)
        summary = "; ".join(self.issues) if self.issues else "unreadable"
        super().__init__(f"Invalid schema file {path}: {summary}")
