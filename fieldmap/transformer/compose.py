"""Transformer composition."""
from typing import Any, Callable, Optional, Sequence

from fieldmap.schema.models import Scope, TransformFunction, Transformer, identity


def combine_transform_function(functions: Sequence[TransformFunction]) -> TransformFunction:
    """
    Compose transform functions left to right

    functions[0] is applied first, its output feeds functions[1], etc.
    No functions give the identity, a single function is returned as is.
    """
    if len(functions) == 0:
        return identity
    if len(functions) == 1:
        return functions[0]

    functions = tuple(functions)

    def combined(value: Any, scope: Optional[Scope] = None) -> Any:
        for func in functions:
            value = func(value, scope)
        return value

    return combined


def combine_transformers(transformers: Sequence[Transformer]) -> Transformer:
    """
    Build one transformer from a stack of transformers

    from_dto runs in declaration order and to_dto in reverse order, so
    [T1, T2] decodes with T1 then T2 and encodes with T2 then T1.
    """
    return Transformer(
        to_dto=combine_transform_function([t.to_dto for t in reversed(transformers)]),
        from_dto=combine_transform_function([t.from_dto for t in transformers]),
    )


def value_transformer(
    to_dto: Optional[Callable[[Any], Any]] = None,
    from_dto: Optional[Callable[[Any], Any]] = None,
) -> Transformer:
    """
    Build a transformer from one-argument functions that ignore the scope

    Example:
        value_transformer(to_dto=lambda d: d.isoformat(), from_dto=date.fromisoformat)
    """
    return Transformer(
        to_dto=_ignore_scope(to_dto) if to_dto is not None else identity,
        from_dto=_ignore_scope(from_dto) if from_dto is not None else identity,
    )


def _ignore_scope(func: Callable[[Any], Any]) -> TransformFunction:
    def wrapper(value: Any, scope: Optional[Scope] = None) -> Any:
        return func(value)

    return wrapper


def nested_transformer(mapper: Any, many: bool = False) -> Transformer:
    """
    Delegate a field to another mapper

    None values are passed through without calling the nested mapper.
    With many=True the nested mapper is applied to each element.
    """
    if many:
        def to_dto(value, scope=None):
            if value is None:
                return None
            return [mapper.serialize(item, scope) for item in value]

        def from_dto(value, scope=None):
            if value is None:
                return None
            return [mapper.deserialize(item, scope) for item in value]
    else:
        def to_dto(value, scope=None):
            if value is None:
                return None
            return mapper.serialize(value, scope)

        def from_dto(value, scope=None):
            if value is None:
                return None
            return mapper.deserialize(value, scope)

    return Transformer(to_dto=to_dto, from_dto=from_dto)
