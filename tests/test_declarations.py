"""Tests for @dto and field declarations."""
import pytest

from fieldmap.builder.declarations import (
    AccessMode,
    FieldDeclaration,
    dto,
    get_declarations,
    include,
    is_dto,
    read_only,
    write_only,
)
from fieldmap.schema.models import Transformer


class TestDtoDecorator:
    """Test @dto."""

    def test_marks_class(self):
        @dto
        class SampleDto:
            pass

        assert is_dto(SampleDto)

    def test_with_parentheses(self):
        @dto()
        class SampleDto:
            a = include()

        assert is_dto(SampleDto)
        assert list(get_declarations(SampleDto)) == ["a"]

    def test_undecorated_class(self):
        class Plain:
            pass

        assert not is_dto(Plain)

    def test_marker_is_not_inherited(self):
        @dto
        class Base:
            pass

        class Child(Base):
            pass

        assert not is_dto(Child)

    def test_declarations_removed_from_class(self):
        @dto
        class SampleDto:
            a = include()

        assert not hasattr(SampleDto(), "a")

    def test_other_attributes_kept(self):
        @dto
        class SampleDto:
            a = include()
            VERSION = 2

        assert SampleDto.VERSION == 2


class TestInclude:
    """Test include options."""

    def test_defaults(self):
        declaration = include()

        assert isinstance(declaration, FieldDeclaration)
        assert declaration.map_to is None
        assert declaration.scopes is None
        assert declaration.transforms == ()
        assert declaration.nested is None
        assert declaration.access == AccessMode.ALL

    def test_records_attribute_name(self):
        class SampleDto:
            a = include()

        assert get_declarations(SampleDto)["a"].name == "a"

    def test_single_scope(self):
        assert include(scopes="admin").scopes == ("admin",)

    def test_many_scopes(self):
        assert include(scopes=["scope-1", "scope-2"]).scopes == ("scope-1", "scope-2")

    def test_empty_scopes_means_unrestricted(self):
        assert include(scopes=[]).scopes is None

    def test_single_transform(self):
        transformer = Transformer()

        assert include(transform=transformer).transforms == (transformer,)

    def test_stacked_transforms(self):
        first, second = Transformer(), Transformer()

        assert include(transform=[first, "TRIM", second]).transforms == (first, "TRIM", second)

    def test_nested(self):
        class Other:
            pass

        declaration = include(nested=lambda: Other, many=True)

        assert declaration.nested.accessor() is Other
        assert declaration.nested.many is True

    def test_nested_defaults_to_single(self):
        assert include(nested=lambda: object).nested.many is False

    def test_read_only(self):
        assert read_only().access == AccessMode.READ

    def test_write_only(self):
        assert write_only(map_to="secret").access == AccessMode.WRITE
        assert write_only(map_to="secret").map_to == "secret"

    def test_access_mode_values(self):
        assert AccessMode.ALL == AccessMode.READ | AccessMode.WRITE
        assert AccessMode.NONE == 0


class TestGetDeclarations:
    """Test declaration collection along the class hierarchy."""

    def test_order(self):
        @dto
        class SampleDto:
            b = include()
            a = include()
            c = include()

        assert list(get_declarations(SampleDto)) == ["b", "a", "c"]

    def test_inherited_fields_first(self):
        @dto
        class Resource:
            id = include()
            meta = include()

        @dto
        class User(Resource):
            email = include()
            meta = include(map_to="tag")

        declarations = get_declarations(User)

        assert list(declarations) == ["id", "meta", "email"]
        assert declarations["meta"].map_to == "tag"
        assert get_declarations(Resource)["meta"].map_to is None

    def test_undecorated_base_fields_are_collected(self):
        class Base:
            id = include()

        @dto
        class Child(Base):
            name = include()

        assert list(get_declarations(Child)) == ["id", "name"]

    @pytest.mark.parametrize("cls", [object, int])
    def test_no_declarations(self, cls):
        assert get_declarations(cls) == {}
