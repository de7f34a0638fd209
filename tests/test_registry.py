"""Tests for the type registry."""

import pytest

from graphdoc.errors import DuplicateTypeError, InvalidTypeDescriptorError, UnknownTypeError
from graphdoc.registry.models import TypeDescriptor
from graphdoc.registry.type_registry import TypeRegistry


def _book(**overrides) -> dict:
    data = {
        "id": "number",
        "type": "book",
        "attributes": ["title", "pageCount"],
        "relationships": ["author", "publisher"],
    }
    data.update(overrides)
    return data


def test_descriptor_from_dict():
    descriptor = TypeDescriptor.from_dict(_book())
    assert descriptor.type == "book"
    assert descriptor.id_kind == "number"
    assert descriptor.attribute_fields == ("title", "pageCount")
    assert descriptor.relationship_fields == ("author", "publisher")
    assert descriptor.expected_fields == ("title", "pageCount", "author", "publisher")
    assert descriptor.has_attributes
    assert descriptor.has_relationships


def test_descriptor_round_trips_config_form():
    assert TypeDescriptor.from_dict(_book()).to_dict() == _book()


def test_descriptor_without_fields():
    descriptor = TypeDescriptor(type="tag")
    assert descriptor.expected_fields == ()
    assert not descriptor.has_attributes
    assert not descriptor.has_relationships


def test_descriptor_requires_type():
    with pytest.raises(InvalidTypeDescriptorError):
        TypeDescriptor.from_dict({"attributes": ["name"]})


def test_field_lists_must_be_lists():
    with pytest.raises(InvalidTypeDescriptorError, match="attributes must be a list"):
        TypeDescriptor.from_dict(_book(attributes="name"))
    with pytest.raises(InvalidTypeDescriptorError, match="relationships must be a list"):
        TypeRegistry([_book(relationships="author")])


def test_empty_registry():
    registry = TypeRegistry([])
    assert len(registry) == 0
    assert registry.types() == []
    assert "book" not in registry


def test_resolve_returns_same_descriptor():
    registry = TypeRegistry([_book()])
    first = registry.resolve("book")
    assert registry.resolve("book") is first
    assert first.attribute_fields == ("title", "pageCount")


def test_resolve_unknown_type():
    registry = TypeRegistry([_book()])
    with pytest.raises(UnknownTypeError) as exc_info:
        registry.resolve("magazine")
    assert exc_info.value.type_name == "magazine"


def test_get_returns_none_for_unknown():
    registry = TypeRegistry([_book()])
    assert registry.get("magazine") is None
    assert registry.get(["not", "hashable"]) is None
    assert registry.get("book") is registry.resolve("book")


def test_accepts_descriptor_instances():
    registry = TypeRegistry([TypeDescriptor(type="person", attribute_fields=("name",))])
    assert "person" in registry
    assert registry.resolve("person").attribute_fields == ("name",)


def test_types_keep_declaration_order():
    registry = TypeRegistry(
        [
            {"type": "publisher", "attributes": ["name"], "relationships": []},
            _book(),
            {"type": "person", "attributes": ["name"], "relationships": []},
        ]
    )
    assert [d.type for d in registry.types()] == ["publisher", "book", "person"]
    assert [d.type for d in registry] == ["publisher", "book", "person"]


def test_duplicate_type_fails_fast():
    with pytest.raises(DuplicateTypeError) as exc_info:
        TypeRegistry([_book(), _book(attributes=["title"])])
    assert exc_info.value.type_name == "book"


def test_overlapping_fields_rejected():
    with pytest.raises(InvalidTypeDescriptorError, match="both attribute and relationship"):
        TypeRegistry([_book(attributes=["title", "author"])])


def test_reserved_fields_rejected():
    with pytest.raises(InvalidTypeDescriptorError, match="reserved"):
        TypeRegistry([_book(attributes=["id", "title"])])


def test_repeated_field_rejected():
    with pytest.raises(InvalidTypeDescriptorError, match="duplicate names"):
        TypeRegistry([_book(relationships=["author", "author"])])


def test_registry_is_read_only():
    registry = TypeRegistry([_book()])
    with pytest.raises(TypeError):
        registry._types["magazine"] = TypeDescriptor(type="magazine")
