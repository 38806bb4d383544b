"""
Field Builder - Turns @dto declarations into a mapper field table

Supports:
- Renamed fields (map_to)
- Scope restricted fields
- Read-only / write-only fields
- Stacked custom transformers (objects or registry names)
- Nested DTOs, single or many, resolved lazily
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from fieldmap.config import MapperSettings
from fieldmap.exceptions import ConflictingTransformError, MissingDtoDeclarationError
from fieldmap.mapper.mapping import Mapper
from fieldmap.schema.models import FieldRule, MapperConfig, Transformer
from fieldmap.transformer.compose import combine_transformers, nested_transformer
from fieldmap.transformer.registry import TransformerRegistry, default_registry

from .declarations import AccessMode, FieldDeclaration, get_declarations, is_dto

logger = logging.getLogger(__name__)


def build_fields(
    dto_class: type,
    ignore_nested: bool = False,
    registry: Optional[TransformerRegistry] = None,
    settings: Optional[MapperSettings] = None,
) -> Tuple[FieldRule, ...]:
    """
    Build the field table of a DTO class

    Args:
        dto_class: Class decorated with @dto
        ignore_nested: Leave nested fields untransformed (used one level down)
        registry: Registry used to resolve transformer names
        settings: Settings passed to nested mappers

    Returns:
        Field rules in declaration order

    Raises:
        MissingDtoDeclarationError: The class itself is not decorated with @dto
        ConflictingTransformError: A field declares both nested and transform
        UnknownTransformerError: A transformer name is not registered
    """
    if not is_dto(dto_class):
        raise MissingDtoDeclarationError(dto_class)

    registry = registry or default_registry
    fields: List[FieldRule] = []

    for name, declaration in get_declarations(dto_class).items():
        if declaration.transforms and declaration.nested is not None:
            raise ConflictingTransformError(dto_class, name)

        fields.append(FieldRule(
            source=name,
            target=declaration.map_to or name,
            scopes=frozenset(declaration.scopes) if declaration.scopes else None,
            disable_serialize=not declaration.access & AccessMode.READ,
            disable_deserialize=not declaration.access & AccessMode.WRITE,
            transformer=_build_transformer(
                declaration, ignore_nested, registry, settings
            ),
        ))

    logger.debug(f"Built {len(fields)} fields for {dto_class.__name__}")
    return tuple(fields)


def _build_transformer(
    declaration: FieldDeclaration,
    ignore_nested: bool,
    registry: TransformerRegistry,
    settings: Optional[MapperSettings],
) -> Optional[Transformer]:
    """Resolve the single transformer of a field, if any"""
    if declaration.transforms:
        transformers = [
            registry.get(t) if isinstance(t, str) else t
            for t in declaration.transforms
        ]
        return combine_transformers(transformers)

    if declaration.nested is not None and not ignore_nested:
        nested_class = declaration.nested.accessor()
        nested_mapper = build_mapper(
            nested_class,
            ignore_nested=True,
            registry=registry,
            settings=settings,
        )
        return nested_transformer(nested_mapper, many=declaration.nested.many)

    return None


def build_mapper(
    dto_class: type,
    ignore_nested: bool = False,
    registry: Optional[TransformerRegistry] = None,
    entity_factory: Optional[Callable[[], Any]] = None,
    settings: Optional[MapperSettings] = None,
) -> Mapper:
    """
    Build a mapper for a DTO class

    Args:
        dto_class: Class decorated with @dto, also used as the DTO factory
        ignore_nested: Leave nested fields untransformed
        registry: Registry used to resolve transformer names
        entity_factory: Creates blank entities, dict when omitted
        settings: Mapper settings (duplicate target policy)

    Returns:
        Mapper converting between dto_class instances and entities
    """
    fields = build_fields(dto_class, ignore_nested, registry, settings)
    config = MapperConfig(
        fields=fields,
        dto_factory=dto_class,
        entity_factory=entity_factory,
    )
    return Mapper(config, settings)
