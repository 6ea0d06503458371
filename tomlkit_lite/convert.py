"""Conversion of arbitrary Python objects into TOML values.

The result is made of the plain objects described in :mod:`tomlkit_lite.value`.
Tables come out with their keys in sorted order.
"""

from __future__ import annotations

import dataclasses
import datetime as _dt
import enum
from collections.abc import Iterator, Mapping, Set
from typing import Any

from .value import ValueType, value_type

__all__ = [
    "ConversionError",
    "UnsupportedType",
    "UnsupportedNone",
    "KeyNotString",
    "IntegerOutOfRange",
    "to_value",
    "ordered_items",
]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_DATETIME_TYPES = (_dt.datetime, _dt.date, _dt.time)


class ConversionError(Exception):
    """An object could not be represented as a TOML value."""


class UnsupportedType(ConversionError):
    """The object has a type that TOML cannot represent."""

    def __init__(self, obj: object = None) -> None:
        name = type(obj).__name__ if obj is not None else "value"
        super().__init__(f"unsupported type: {name}")


class UnsupportedNone(ConversionError):
    """None was found where a value is required."""

    def __init__(self) -> None:
        super().__init__("unsupported None value")


class KeyNotString(ConversionError):
    """A mapping key did not convert to a string."""

    def __init__(self) -> None:
        super().__init__("map key was not a string")


class IntegerOutOfRange(ConversionError):
    """An integer does not fit into a signed 64-bit value."""

    def __init__(self, value: int) -> None:
        super().__init__(f"integer value was too large: {value}")
        self.value = value


def to_value(obj: Any) -> Any:
    """Convert ``obj`` into a TOML value.

    Strings, booleans, integers, floats and date/time objects map to
    themselves; enum members become their names; bytes become arrays of
    integers; lists, tuples and sets become arrays; mappings and dataclass
    instances become tables. Table entries whose value is None are dropped,
    while None anywhere else raises :class:`UnsupportedNone`.
    """
    if obj is None:
        raise UnsupportedNone()
    if isinstance(obj, enum.Enum):
        return obj.name
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, int):
        if not _I64_MIN <= obj <= _I64_MAX:
            raise IntegerOutOfRange(obj)
        return int(obj)
    if isinstance(obj, float):
        return float(obj)
    if isinstance(obj, str):
        return str(obj)
    if isinstance(obj, _DATETIME_TYPES):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return list(bytes(obj))
    if isinstance(obj, Mapping):
        return _table(obj.items())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _table(
            (field.name, getattr(obj, field.name)) for field in dataclasses.fields(obj)
        )
    if isinstance(obj, (list, tuple, Set)):
        return [to_value(item) for item in obj]
    raise UnsupportedType(obj)


def _table(entries: Any) -> dict[str, Any]:
    table: dict[str, Any] = {}
    for key, item in entries:
        converted_key = to_value(key)
        if not isinstance(converted_key, str):
            raise KeyNotString()
        try:
            table[converted_key] = to_value(item)
        except UnsupportedNone:
            continue
    return {key: table[key] for key in sorted(table)}


def _has_table(value: Any) -> bool:
    return any(value_type(item) is ValueType.TABLE for item in value)


def ordered_items(table: Mapping[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield the entries of ``table`` in the order they must be written.

    Plain values and arrays holding no tables come first, then arrays that
    hold tables, then sub-tables; within each group the table's own order is
    kept.
    """
    kinds = [(key, item, value_type(item)) for key, item in table.items()]
    for key, item, kind in kinds:
        if kind is not ValueType.TABLE and not (
            kind is ValueType.ARRAY and _has_table(item)
        ):
            yield key, item
    for key, item, kind in kinds:
        if kind is ValueType.ARRAY and _has_table(item):
            yield key, item
    for key, item, kind in kinds:
        if kind is ValueType.TABLE:
            yield key, item