"""Classification of and lookup in TOML values held as plain Python objects.

A TOML value is one of ``str``, ``int``, ``float``, ``bool``, a
``datetime.datetime``, ``datetime.date`` or ``datetime.time``, a ``list`` of
values (an array) or a ``dict`` mapping strings to values (a table).
"""

from __future__ import annotations

import datetime as _dt
import enum
from collections.abc import Mapping
from typing import Any

__all__ = ["ValueType", "value_type", "type_str", "same_type", "get"]


class ValueType(enum.Enum):
    """The kinds of value a TOML document can hold."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    ARRAY = "array"
    TABLE = "table"


_DATETIME_TYPES = (_dt.datetime, _dt.date, _dt.time)


def value_type(value: Any) -> ValueType:
    """Return the TOML kind of ``value``; raise TypeError if it has none."""
    # bool is a subclass of int, so it must be checked first.
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        return ValueType.INTEGER
    if isinstance(value, float):
        return ValueType.FLOAT
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, _DATETIME_TYPES):
        return ValueType.DATETIME
    if isinstance(value, list):
        return ValueType.ARRAY
    if isinstance(value, Mapping):
        return ValueType.TABLE
    raise TypeError(f"{type(value).__name__} is not a TOML value")


def type_str(value: Any) -> str:
    """Return a human-readable name for the TOML kind of ``value``."""
    return value_type(value).value


def same_type(a: Any, b: Any) -> bool:
    """Tell whether two values are of the same TOML kind."""
    return value_type(a) is value_type(b)


def get(value: Any, index: Any) -> Any | None:
    """Index into a table with a string or into an array with an integer.

    Returns None when the kind of ``value`` does not match the kind of
    ``index``, when the key is missing or when the position is out of range.
    """
    if isinstance(index, str):
        if isinstance(value, Mapping):
            return value.get(index)
        return None
    if isinstance(index, int) and not isinstance(index, bool):
        if isinstance(value, list) and 0 <= index < len(value):
            return value[index]
        return None
    raise TypeError(f"cannot index a TOML value with {type(index).__name__}")