"""Configuration errors raised while building a mapper."""
from typing import Any, Optional


class MapperConfigError(ValueError):
    """Base error for invalid mapping declarations."""

    def __init__(self, message: str, model: Optional[Any] = None, field: Optional[str] = None):
        self.message = message
        self.model = model
        self.field = field
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', field={self.field!r})"


class MissingDtoDeclarationError(MapperConfigError):
    """Raised when a class was never declared with @dto."""

    def __init__(self, model: Any):
        name = getattr(model, "__name__", repr(model))
        super().__init__(f"Missing @dto declaration on class {name}", model=model)


class ConflictingTransformError(MapperConfigError):
    """Raised when a field declares both a nested mapper and custom transforms."""

    def __init__(self, model: Any, field: str):
        name = getattr(model, "__name__", repr(model))
        super().__init__(
            f"Field {name}.{field} cannot declare both nested and transform",
            model=model,
            field=field,
        )


class DuplicateTargetError(MapperConfigError):
    """Raised when two rules map to the same target key and duplicates are forbidden."""

    def __init__(self, target: str, first: str, second: str):
        self.first = first
        self.second = second
        super().__init__(
            f"Fields '{first}' and '{second}' both map to target '{target}'",
            field=second,
        )
        self.target = target


class UnknownTransformerError(MapperConfigError):
    """Raised when a named transformer is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown transformer: {name}")
