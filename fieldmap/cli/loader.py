"""Helpers for the command line: locating DTO classes and printing results."""
import importlib
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID


def load_class(reference: str) -> type:
    """
    Import a class from a "package.module:ClassName" reference

    Raises:
        ValueError: Malformed reference or attribute is not a class
        ImportError: Module cannot be imported
    """
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Expected MODULE:CLASS, got: {reference}")

    module = importlib.import_module(module_name)
    target = module
    for part in class_name.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise ValueError(f"{class_name} not found in module {module_name}") from None

    if not isinstance(target, type):
        raise ValueError(f"{reference} is not a class")
    return target


def to_plain(value: Any) -> Any:
    """Convert mapped objects into JSON compatible data."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if hasattr(value, "__dict__"):
        return {k: to_plain(v) for k, v in vars(value).items() if not k.startswith("_")}
    return str(value)
