"""
Mapping engine - converts whole objects and single fields between DTO and entity

Supports:
- Whole-object serialize (entity -> DTO) and deserialize (DTO -> entity)
- Single-field conversion with or without key translation
- Key-only translation (map_key / unmap_key)
- Scope-restricted and direction-disabled fields
- Dict-like and attribute-based objects on both sides
"""

import logging
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Dict, Optional

from fieldmap.config import MapperSettings, settings as default_settings
from fieldmap.exceptions import DuplicateTargetError
from fieldmap.mapper.access import can_deserialize, can_serialize
from fieldmap.schema.models import (
    MISSING,
    FieldRule,
    MapperConfig,
    ResolvedField,
    Scope,
)

logger = logging.getLogger(__name__)


def get_value(obj: Any, key: str) -> Any:
    """Read a key from a mapping or an attribute from an object, None when absent."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def set_value(obj: Any, key: str, value: Any) -> None:
    """Write a key on a mutable mapping or an attribute on an object."""
    if isinstance(obj, MutableMapping):
        obj[key] = value
    else:
        setattr(obj, key, value)


class Mapper:
    """
    Bidirectional mapper driven by a field table

    Usage:
    ```python
    mapper = Mapper(MapperConfig(fields=[
        FieldRule("a", "b"),
        FieldRule("c", "d", scopes={"admin"}),
    ]))

    mapper.serialize({"b": 10, "d": "x"})            # {"a": 10}
    mapper.serialize({"b": 10, "d": "x"}, "admin")   # {"a": 10, "c": "x"}
    ```
    """

    def __init__(self, config: MapperConfig, settings: Optional[MapperSettings] = None):
        """
        Initialize Mapper

        Args:
            config: Field table and optional destination factories
            settings: Controls how duplicate target keys are handled

        Raises:
            DuplicateTargetError: Two rules share a target and the policy is "error"
        """
        self.config = config
        self.settings = settings or default_settings

        field_map: Dict[str, FieldRule] = {}
        reverse_field_map: Dict[str, FieldRule] = {}

        for rule in config.fields:
            field_map[rule.source] = rule

            previous = reverse_field_map.get(rule.target)
            if previous is not None:
                self._on_duplicate_target(previous, rule)
            reverse_field_map[rule.target] = rule

        self.field_map = MappingProxyType(field_map)
        self.reverse_field_map = MappingProxyType(reverse_field_map)

        logger.debug(
            f"Built mapper with {len(config.fields)} fields "
            f"({len(field_map)} sources, {len(reverse_field_map)} targets)"
        )

    def _on_duplicate_target(self, previous: FieldRule, rule: FieldRule) -> None:
        """Apply the duplicate target policy"""
        policy = self.settings.duplicate_targets

        if policy == "error":
            raise DuplicateTargetError(rule.target, previous.source, rule.source)

        if policy == "warn":
            logger.warning(
                f"Fields '{previous.source}' and '{rule.source}' both map to "
                f"'{rule.target}', reverse lookups use '{rule.source}'"
            )

    # ------------------------------------------------------------------
    # Field conversion
    # ------------------------------------------------------------------

    @staticmethod
    def _deserialize_value(rule: FieldRule, value: Any, scope: Optional[Scope]) -> Any:
        if rule.transformer is not None:
            return rule.transformer.from_dto(value, scope)
        return value

    @staticmethod
    def _serialize_value(rule: FieldRule, value: Any, scope: Optional[Scope]) -> Any:
        if rule.transformer is not None:
            return rule.transformer.to_dto(value, scope)
        return value

    # ------------------------------------------------------------------
    # Whole objects
    # ------------------------------------------------------------------

    def deserialize(self, dto: Any, scope: Optional[Scope] = None) -> Any:
        """
        Convert a DTO into an entity

        Args:
            dto: Source object (mapping or object), None is returned as is
            scope: Scope token of the caller

        Returns:
            New entity holding every field visible for this scope
        """
        if dto is None:
            return dto

        if self.config.entity_factory is not None:
            entity = self.config.entity_factory()
        else:
            entity = {}

        for rule in self.config.fields:
            if can_deserialize(rule, scope):
                value = get_value(dto, rule.source)
                set_value(entity, rule.target, self._deserialize_value(rule, value, scope))

        return entity

    def serialize(self, entity: Any, scope: Optional[Scope] = None) -> Any:
        """
        Convert an entity into a DTO

        Args:
            entity: Source object (mapping or object), None is returned as is
            scope: Scope token of the caller

        Returns:
            New DTO holding every field visible for this scope
        """
        if entity is None:
            return entity

        if self.config.dto_factory is not None:
            dto = self.config.dto_factory()
        else:
            dto = {}

        for rule in self.config.fields:
            if can_serialize(rule, scope):
                value = get_value(entity, rule.target)
                set_value(dto, rule.source, self._serialize_value(rule, value, scope))

        return dto

    # ------------------------------------------------------------------
    # Single fields
    # ------------------------------------------------------------------

    def deserialize_field(self, key: str, value: Any, scope: Optional[Scope] = None) -> Any:
        """Convert one DTO field value, MISSING when the field is not visible."""
        rule = self.field_map.get(key)
        if not can_deserialize(rule, scope):
            return MISSING
        return self._deserialize_value(rule, value, scope)

    def serialize_field(self, key: str, value: Any, scope: Optional[Scope] = None) -> Any:
        """Convert one entity field value, MISSING when the field is not visible."""
        rule = self.reverse_field_map.get(key)
        if not can_serialize(rule, scope):
            return MISSING
        return self._serialize_value(rule, value, scope)

    def deserialize_and_map_field(
        self, key: str, value: Any, scope: Optional[Scope] = None
    ) -> Optional[ResolvedField]:
        """
        Convert one DTO field and resolve the entity key it belongs to

        Returns:
            ResolvedField(target key, converted value) or None when not visible
        """
        rule = self.field_map.get(key)
        if not can_deserialize(rule, scope):
            return None
        return ResolvedField(rule.target, self._deserialize_value(rule, value, scope))

    def serialize_and_unmap_field(
        self, key: str, value: Any, scope: Optional[Scope] = None
    ) -> Optional[ResolvedField]:
        """
        Convert one entity field and resolve the DTO key it belongs to

        Returns:
            ResolvedField(source key, converted value) or None when not visible
        """
        rule = self.reverse_field_map.get(key)
        if not can_serialize(rule, scope):
            return None
        return ResolvedField(rule.source, self._serialize_value(rule, value, scope))

    def map_key(self, key: str, scope: Optional[Scope] = None) -> Optional[str]:
        """DTO key -> entity key"""
        rule = self.field_map.get(key)
        if not can_deserialize(rule, scope):
            return None
        return rule.target

    def unmap_key(self, key: str, scope: Optional[Scope] = None) -> Optional[str]:
        """Entity key -> DTO key"""
        rule = self.reverse_field_map.get(key)
        if not can_serialize(rule, scope):
            return None
        return rule.source
