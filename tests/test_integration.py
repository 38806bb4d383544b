"""
Integration tests: declared DTOs -> built mapper -> conversions

Covers nested DTOs, scopes, renaming and inheritance end to end.
"""

from datetime import datetime

import pytest

from fieldmap import (
    MISSING,
    build_mapper,
    dto,
    include,
    read_only,
    write_only,
)


# ============================================================================
# FIXTURES
# ============================================================================


@dto
class DtoB:
    c = include()


@dto
class DtoA:
    a = include(scopes="admin")
    b = include(map_to="c")
    nested = include(nested=lambda: DtoB)
    nested_many = include(nested=lambda: DtoB, many=True)


@pytest.fixture
def mapper():
    return build_mapper(DtoA)


@pytest.fixture
def entity():
    return {
        "a": "a",
        "c": "c",
        "nested": {"c": "nested-c", "secret": "secret"},
        "nested_many": [{"c": "nested-many-c", "secret": "secret"}],
    }


@pytest.fixture
def dto_a():
    value = DtoA()
    value.a = "a"
    value.b = "c"
    value.nested = {"c": "nested-c"}
    value.nested_many = [{"c": "nested-many-c"}]
    return value


# ============================================================================
# TEST: basic integration
# ============================================================================


class TestBasicIntegration:
    """Nested DTOs, scopes and renaming"""

    def test_serialize(self, mapper, entity):
        serialized = mapper.serialize(entity)

        assert not hasattr(serialized, "a")
        assert serialized.b == entity["c"]
        assert isinstance(serialized.nested, DtoB)
        assert serialized.nested.c == "nested-c"
        assert not hasattr(serialized.nested, "secret")
        assert len(serialized.nested_many) == 1
        assert serialized.nested_many[0].c == "nested-many-c"
        assert not hasattr(serialized.nested_many[0], "secret")

    def test_serialize_admin(self, mapper, entity):
        assert mapper.serialize(entity, "admin").a == "a"

    def test_deserialize(self, mapper, dto_a):
        deserialized = mapper.deserialize(dto_a)

        assert "a" not in deserialized
        assert deserialized["c"] == "c"
        assert deserialized["nested"] == {"c": "nested-c"}
        assert deserialized["nested_many"] == [{"c": "nested-many-c"}]

    def test_deserialize_admin(self, mapper, dto_a):
        assert mapper.deserialize(dto_a, "admin")["a"] == "a"

    def test_null_nested(self, mapper):
        serialized = mapper.serialize({"c": "c", "nested": None, "nested_many": None})

        assert serialized.nested is None
        assert serialized.nested_many is None

    def test_nested_many_scenario(self):
        @dto
        class Holder:
            items = include(nested=lambda: DtoB, many=True)

        holder_mapper = build_mapper(Holder)
        serialized = holder_mapper.serialize({"items": [{"c": "n1"}, {"c": "n2"}]})

        assert [item.c for item in serialized.items] == ["n1", "n2"]

    def test_single_field_on_nested(self, mapper):
        value = mapper.serialize_field("nested", {"c": "x", "secret": "s"})

        assert isinstance(value, DtoB)
        assert vars(value) == {"c": "x"}

    def test_key_translation(self, mapper):
        assert mapper.map_key("b") == "c"
        assert mapper.unmap_key("c") == "b"
        assert mapper.map_key("a") is None
        assert mapper.map_key("a", "admin") == "a"


# ============================================================================
# TEST: inheritance
# ============================================================================


@dto
class Resource:
    id = include()
    meta = include()


@dto
class User(Resource):
    email = include()
    meta = include(map_to="tag")


class TestInheritance:
    """Subclass DTOs extend and override base declarations"""

    def test_serialize(self):
        user = {"id": "id", "email": "email", "tag": "tag"}

        serialized_resource = build_mapper(Resource).serialize(user)
        serialized_user = build_mapper(User).serialize(user)

        assert serialized_resource.id == "id"
        assert not hasattr(serialized_resource, "email")
        assert serialized_resource.meta is None

        assert serialized_user.id == "id"
        assert serialized_user.email == "email"
        assert serialized_user.meta == "tag"


class Audited:
    secret = include(scopes="admin")


@dto
class Document(Audited):
    name = include()


class TestUndecoratedBase:
    """Declarations on a base without @dto never reach converted objects"""

    def test_hidden_field_not_readable_on_dto(self):
        serialized = build_mapper(Document).serialize({"name": "x", "secret": "s"})

        assert serialized.name == "x"
        assert not hasattr(serialized, "secret")

    def test_round_trip_does_not_copy_declaration(self):
        mapper = build_mapper(Document)

        entity = mapper.deserialize(mapper.serialize({"name": "x", "secret": "s"}), "admin")

        assert entity == {"name": "x", "secret": None}

    def test_admin_round_trip(self):
        mapper = build_mapper(Document)
        entity = {"name": "x", "secret": "s"}

        assert mapper.deserialize(mapper.serialize(entity, "admin"), "admin") == entity

    def test_declaration_still_visible_on_class(self):
        assert Audited.secret.scopes == ("admin",)


# ============================================================================
# TEST: secrets and access modes
# ============================================================================


@dto
class Account:
    id = read_only()
    username = include()
    password = write_only(map_to="password_hash", transform="TRIM")
    created = read_only(map_to="created_at", transform="ISO_DATETIME")
    notes = include(scopes=["admin", "support"])


class TestAccount:
    """Typical API model"""

    @pytest.fixture
    def account_mapper(self):
        return build_mapper(Account)

    def test_secret_never_serialized(self, account_mapper):
        entity = {
            "id": 1,
            "username": "ada",
            "password_hash": "xxx",
            "created_at": datetime(2024, 1, 2, 3, 4, 5),
            "notes": "vip",
        }

        for scope in (None, "admin", "support"):
            assert not hasattr(account_mapper.serialize(entity, scope), "password")

        serialized = account_mapper.serialize(entity, "support")
        assert serialized.created == "2024-01-02T03:04:05"
        assert serialized.notes == "vip"

    def test_client_cannot_set_read_only(self, account_mapper):
        entity = account_mapper.deserialize({
            "id": 99,
            "username": "ada",
            "password": "  pw ",
            "created": "2024-01-02T03:04:05",
        })

        assert entity == {"username": "ada", "password_hash": "pw"}

    def test_single_field_gates(self, account_mapper):
        assert account_mapper.deserialize_field("id", 1) is MISSING
        assert account_mapper.serialize_field("password_hash", "x") is MISSING
        assert account_mapper.deserialize_and_map_field("password", " pw ") == ("password_hash", "pw")
        assert account_mapper.unmap_key("notes") is None
        assert account_mapper.unmap_key("notes", "admin") == "notes"
