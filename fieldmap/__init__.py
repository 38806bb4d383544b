"""
fieldmap - declarative DTO <-> entity mapping

Converts objects between a wire shape (DTO) and an internal shape (entity)
with a per-field table of renamings, scopes, access modes and transforms.
"""

from fieldmap.builder import (
    AccessMode,
    build_fields,
    build_mapper,
    dto,
    include,
    read_only,
    write_only,
)
from fieldmap.config import MapperSettings
from fieldmap.exceptions import (
    ConflictingTransformError,
    DuplicateTargetError,
    MapperConfigError,
    MissingDtoDeclarationError,
    UnknownTransformerError,
)
from fieldmap.mapper import Mapper, can_deserialize, can_serialize, has_scope
from fieldmap.schema.models import (
    MISSING,
    FieldRule,
    MapperConfig,
    ResolvedField,
    Transformer,
)
from fieldmap.transformer import (
    TransformerRegistry,
    combine_transform_function,
    combine_transformers,
    nested_transformer,
    value_transformer,
)

__version__ = "0.1.0"

__all__ = [
    "AccessMode",
    "build_fields",
    "build_mapper",
    "dto",
    "include",
    "read_only",
    "write_only",
    "MapperSettings",
    "ConflictingTransformError",
    "DuplicateTargetError",
    "MapperConfigError",
    "MissingDtoDeclarationError",
    "UnknownTransformerError",
    "Mapper",
    "can_deserialize",
    "can_serialize",
    "has_scope",
    "MISSING",
    "FieldRule",
    "MapperConfig",
    "ResolvedField",
    "Transformer",
    "TransformerRegistry",
    "combine_transform_function",
    "combine_transformers",
    "nested_transformer",
    "value_transformer",
]
