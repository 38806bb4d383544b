"""Transformer registry."""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from fieldmap.exceptions import UnknownTransformerError
from fieldmap.schema.models import Scope, Transformer
from fieldmap.transformer.compose import value_transformer


class TransformerRegistry:
    """Registry of named transformers usable in field declarations."""

    def __init__(self):
        """Initialize registry."""
        self.transformers: Dict[str, Transformer] = {
            "NONE": Transformer(),
            "ISO_DATE": value_transformer(
                to_dto=lambda x: x.isoformat() if x is not None else x,
                from_dto=lambda x: date.fromisoformat(x) if x else None,
            ),
            "ISO_DATETIME": value_transformer(
                to_dto=lambda x: x.isoformat() if x is not None else x,
                from_dto=lambda x: datetime.fromisoformat(x) if x else None,
            ),
            "DECIMAL": value_transformer(
                to_dto=lambda x: str(x) if x is not None else x,
                from_dto=lambda x: Decimal(str(x)) if x is not None else x,
            ),
            "UUID": value_transformer(
                to_dto=lambda x: str(x) if x is not None else x,
                from_dto=lambda x: UUID(str(x)) if x else None,
            ),
            "TRIM": value_transformer(
                from_dto=lambda x: x.strip() if isinstance(x, str) else x,
            ),
        }

    def get(self, name: str) -> Transformer:
        """Get transformer by name."""
        try:
            return self.transformers[name.upper()]
        except KeyError:
            raise UnknownTransformerError(name) from None

    def register(self, name: str, transformer: Transformer) -> None:
        """Register (or replace) a named transformer."""
        self.transformers[name.upper()] = transformer

    def names(self) -> List[str]:
        """List registered transformer names."""
        return sorted(self.transformers)

    def transform(
        self,
        value: Any,
        transformer_name: str,
        direction: str = "from_dto",
        scope: Optional[Scope] = None,
    ) -> Any:
        """Apply a named transformation in one direction ("to_dto" or "from_dto")."""
        transformer = self.get(transformer_name)
        if direction == "to_dto":
            return transformer.to_dto(value, scope)
        if direction == "from_dto":
            return transformer.from_dto(value, scope)
        raise ValueError(f"Unknown direction: {direction}")


default_registry = TransformerRegistry()
