"""Field table models."""
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, NamedTuple, Optional, Tuple

Scope = Hashable
TransformFunction = Callable[[Any, Optional[Scope]], Any]


def identity(value: Any, scope: Optional[Scope] = None) -> Any:
    """Return the value unchanged."""
    return value


class _Missing:
    """Sentinel for single-field operations that produce no result."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class Transformer:
    """Pair of functions converting one field value between DTO and entity."""

    to_dto: TransformFunction = identity
    from_dto: TransformFunction = identity


@dataclass(frozen=True)
class FieldRule:
    """Represents a mapping from a DTO key (source) to an entity key (target)."""

    source: str
    target: str
    scopes: Optional[frozenset] = None  # None = unrestricted
    disable_serialize: bool = False
    disable_deserialize: bool = False
    transformer: Optional[Transformer] = None

    def __post_init__(self):
        if self.scopes is None or isinstance(self.scopes, frozenset):
            return
        # a single token, not a collection of characters
        if isinstance(self.scopes, (str, bytes)) or not isinstance(self.scopes, abc.Iterable):
            object.__setattr__(self, "scopes", frozenset({self.scopes}))
        else:
            object.__setattr__(self, "scopes", frozenset(self.scopes))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "target": self.target,
            "scopes": sorted(str(s) for s in self.scopes) if self.scopes is not None else None,
            "disable_serialize": self.disable_serialize,
            "disable_deserialize": self.disable_deserialize,
            "transformer": self.transformer is not None,
        }


@dataclass(frozen=True)
class MapperConfig:
    """Ordered field table plus optional destination factories."""

    fields: Tuple[FieldRule, ...] = field(default_factory=tuple)
    dto_factory: Optional[Callable[[], Any]] = None
    entity_factory: Optional[Callable[[], Any]] = None

    def __post_init__(self):
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))


class ResolvedField(NamedTuple):
    """Key and converted value returned by the map/unmap field operations."""

    key: str
    value: Any
