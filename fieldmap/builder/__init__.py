"""
Builder Module - Declarative DTO definitions

Builds mapper field tables from classes declared with:
- @dto: marks a class as mappable
- include / read_only / write_only: describe its fields
- nested DTOs resolved lazily, so models may reference each other
"""

from .declarations import (
    AccessMode,
    FieldDeclaration,
    NestedDeclaration,
    dto,
    get_declarations,
    include,
    is_dto,
    read_only,
    write_only,
)
from .field_builder import build_fields, build_mapper

__all__ = [
    "AccessMode",
    "FieldDeclaration",
    "NestedDeclaration",
    "dto",
    "get_declarations",
    "include",
    "is_dto",
    "read_only",
    "write_only",
    "build_fields",
    "build_mapper",
]
