from .compose import (
    combine_transform_function,
    combine_transformers,
    nested_transformer,
    value_transformer,
)
from .registry import TransformerRegistry, default_registry

__all__ = [
    "combine_transform_function",
    "combine_transformers",
    "nested_transformer",
    "value_transformer",
    "TransformerRegistry",
    "default_registry",
]
