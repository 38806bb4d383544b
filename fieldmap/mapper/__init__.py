from .access import can_deserialize, can_serialize, has_scope
from .mapping import Mapper

__all__ = ["Mapper", "can_deserialize", "can_serialize", "has_scope"]
