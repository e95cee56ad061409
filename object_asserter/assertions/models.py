"""
Value and failure models.

This module defines the tagged value model the engine navigates,
the failure record carried by every raised assertion, and the
configuration shared by a chain of scopes.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import ModuleType, SimpleNamespace
from typing import Any

from rich.console import Console


class ValueKind(str, Enum):
    """Shape of a value under inspection."""
    NULL = "null"
    SCALAR = "scalar"
    OBJECT = "object"  # named fields
    ARRAY = "array"  # keyed or indexed entries


def classify(value: Any) -> ValueKind:
    """
    Determine the shape of a decoded value.

    Mappings, lists and tuples are arrays; namespaces, dataclass
    instances and plain instances are objects. Everything else that
    is not None is a scalar leaf.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bytes, bytearray, int, float)):
        return ValueKind.SCALAR
    if isinstance(value, (Mapping, list, tuple)):
        return ValueKind.ARRAY
    if _is_object_like(value):
        return ValueKind.OBJECT
    return ValueKind.SCALAR


def _is_object_like(value: Any) -> bool:
    if isinstance(value, SimpleNamespace):
        return True
    if isinstance(value, (type, ModuleType)) or callable(value):
        return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def field_names(value: Any) -> list[str]:
    """Names of the fields of an object-like value, in insertion order."""
    if dataclasses.is_dataclass(value) and not hasattr(value, "__dict__"):
        return [f.name for f in dataclasses.fields(value)]
    return list(vars(value))


def field_value(value: Any, name: str) -> Any:
    """Value of a field, read from the same place field_names() looks."""
    if dataclasses.is_dataclass(value) and not hasattr(value, "__dict__"):
        return getattr(value, name)
    return vars(value)[name]


def has_identical_key(value: Mapping | list | tuple, key: Any) -> bool:
    """
    Check for an entry whose key equals `key` in both value and type.

    `0`, `False`, `0.0` and `"0"` are four different keys here, and
    negative numbers are never sequence keys.
    """
    if isinstance(value, Mapping):
        return any(type(k) is type(key) and k == key for k in value.keys())
    return type(key) is int and 0 <= key < len(value)


@dataclass(frozen=True)
class AsserterConfig:
    """
    Settings shared by a root scope and every scope descended from it.

    Attributes:
        max_value_length: Truncate rendered values in failure messages
        console: Console used by Scope.debug() (stderr when not given)
    """
    max_value_length: int = 100
    console: Console | None = None

    def get_console(self) -> Console:
        if self.console is not None:
            return self.console
        return Console(stderr=True)


@dataclass(frozen=True)
class Failure:
    """
    Details of a single failed check.

    Attributes:
        path: Path from the root to the value that was checked
        reason: What went wrong, e.g. "does not exist"
        expected: Description of the matcher that rejected the value
        actual: The value that was rejected
    """
    path: str
    reason: str
    expected: str
    actual: Any = None
    max_value_length: int = 100

    def __str__(self) -> str:
        return (
            f"{self.path} {self.reason}. "
            f"Expected: {self.expected}. "
            f"Got: {format_value(self.actual, self.max_value_length)}"
        )


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, str):
        formatted = repr(value)
    elif classify(value) in (ValueKind.ARRAY, ValueKind.OBJECT):
        try:
            formatted = json.dumps(value, ensure_ascii=False, default=_jsonable)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def _jsonable(value: Any) -> Any:
    if classify(value) is ValueKind.OBJECT:
        return {name: field_value(value, name) for name in field_names(value)}
    raise TypeError(f"{type(value).__name__} is not JSON serializable")
