"""
Declarations - marks classes as DTOs and describes their fields

Usage:
```python
@dto
class AddressDto:
    city = include()


@dto
class UserDto:
    id = include()
    name = include(map_to="full_name")
    email = include(scopes="admin")
    password = write_only()
    created = read_only(transform="ISO_DATETIME")
    address = include(nested=lambda: AddressDto)
    previous_addresses = include(nested=lambda: AddressDto, many=True)
```

Declarations are collected by @dto and removed from the class body, so an
instance only carries the attributes a mapper actually wrote on it.
Declarations inherited from an undecorated base read as absent on instances.
"""

from collections import abc
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from fieldmap.schema.models import Scope, Transformer

DTO_MARKER = "__fieldmap_dto__"
FIELDS_ATTRIBUTE = "__fieldmap_fields__"

TransformSpec = Union[Transformer, str]


class AccessMode(IntFlag):
    """Directions a field takes part in"""
    NONE = 0
    READ = 1  # serialize (entity -> DTO)
    WRITE = 2  # deserialize (DTO -> entity)
    ALL = READ | WRITE


@dataclass(frozen=True)
class NestedDeclaration:
    """Deferred reference to the DTO class of a nested field"""
    accessor: Callable[[], type]
    many: bool = False


@dataclass
class FieldDeclaration:
    """Describes one DTO field"""
    map_to: Optional[str] = None
    scopes: Optional[Tuple[Scope, ...]] = None
    transforms: Tuple[TransformSpec, ...] = ()
    nested: Optional[NestedDeclaration] = None
    access: AccessMode = AccessMode.ALL
    name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        # instances of a DTO never expose the declaration, even one inherited
        # from an undecorated base
        if instance is None:
            return self
        raise AttributeError(self.name)


def include(
    map_to: Optional[str] = None,
    scopes: Union[Scope, Iterable[Scope], None] = None,
    transform: Union[TransformSpec, Iterable[TransformSpec], None] = None,
    nested: Optional[Callable[[], type]] = None,
    many: bool = False,
    access: AccessMode = AccessMode.ALL,
) -> FieldDeclaration:
    """
    Declare a mapped DTO field

    Args:
        map_to: Name of the entity field, defaults to the DTO field name
        scopes: Scope token(s) required to see the field
        transform: Transformer(s) or registry name(s), applied in order when
            deserializing and in reverse order when serializing
        nested: Zero-argument callable returning the nested DTO class
        many: The nested field holds a sequence
        access: Directions the field takes part in

    Returns:
        FieldDeclaration to assign as a class attribute
    """
    return FieldDeclaration(
        map_to=map_to,
        scopes=_as_tuple(scopes),
        transforms=_as_tuple(transform) or (),
        nested=NestedDeclaration(nested, many) if nested is not None else None,
        access=access,
    )


def read_only(**options) -> FieldDeclaration:
    """Declare a field that is only serialized."""
    return include(access=AccessMode.READ, **options)


def write_only(**options) -> FieldDeclaration:
    """Declare a field that is only deserialized."""
    return include(access=AccessMode.WRITE, **options)


def _as_tuple(value: Any) -> Optional[Tuple[Any, ...]]:
    if value is None:
        return None
    if isinstance(value, (str, bytes, Transformer)) or not isinstance(value, abc.Iterable):
        return (value,)
    return tuple(value) or None


def dto(cls: Optional[type] = None):
    """
    Mark a class as a DTO so build_mapper accepts it

    The mark applies to the decorated class only and is not inherited.
    Usable as @dto or @dto().
    """
    def decorate(target: type) -> type:
        own: Dict[str, FieldDeclaration] = {}
        for name, value in list(vars(target).items()):
            if isinstance(value, FieldDeclaration):
                value.name = name
                own[name] = value
                delattr(target, name)

        setattr(target, FIELDS_ATTRIBUTE, own)
        setattr(target, DTO_MARKER, True)
        return target

    if cls is None:
        return decorate
    return decorate(cls)


def is_dto(cls: type) -> bool:
    """Check if the class itself was declared with @dto."""
    return vars(cls).get(DTO_MARKER) is True


def get_declarations(cls: type) -> Dict[str, FieldDeclaration]:
    """
    Collect field declarations along the class hierarchy

    Base class fields come first; a subclass redeclaring a field replaces
    the base declaration without changing its position.
    """
    declarations: Dict[str, FieldDeclaration] = {}

    for klass in reversed(cls.__mro__):
        own = vars(klass).get(FIELDS_ATTRIBUTE)
        if own is None:
            own = {
                name: value
                for name, value in vars(klass).items()
                if isinstance(value, FieldDeclaration)
            }
        declarations.update(own)

    return declarations
