"""Decoding of RDS Data API ``Field`` cells.

Each cell of a record is an object with at most one populated value
key (``stringValue``, ``longValue`` ...) or the null marker
``isNull``.  Keys are looked up by name in a fixed order; key order in
the JSON text carries no meaning.

Every function here is pure.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_SCALAR_KEYS: tuple[str, ...] = (
    "stringValue",
    "longValue",
    "doubleValue",
    "booleanValue",
    "blobValue",
)

_ARRAY_KEYS: tuple[str, ...] = (
    "booleanValues",
    "longValues",
    "doubleValues",
    "stringValues",
)


def unwrap_field(cell: Any) -> Any:
    """Return the plain value carried by *cell*.

    * ``{"isNull": true}`` and ``{}`` give ``None``.
    * Known value keys win over anything else, in documented order.
    * ``arrayValue`` is decoded into a (possibly nested) list.
    * A single unknown key yields its value, so newer value types still
      display something.
    * Non-object cells are returned as-is.
    """
    if not isinstance(cell, Mapping):
        return cell
    if cell.get("isNull") is True:
        return None

    for key in _SCALAR_KEYS:
        if key in cell:
            return cell[key]
    if "arrayValue" in cell:
        return unwrap_array(cell["arrayValue"])

    remaining = [key for key in cell if key != "isNull"]
    if not remaining:
        return None
    return cell[remaining[0]]


def unwrap_array(array: Any) -> list[Any] | None:
    """Decode an ``ArrayValue`` object into a list."""
    if array is None:
        return None
    if not isinstance(array, Mapping):
        return list(array) if isinstance(array, list) else [array]

    for key in _ARRAY_KEYS:
        if key in array:
            return list(array[key] or [])
    if "arrayValues" in array:
        return [unwrap_array(item) for item in array["arrayValues"] or []]
    return []


def display_value(value: Any) -> str:
    """Render an unwrapped value as table text.

    ``None`` becomes the empty string, booleans and lists use their
    JSON spelling, and integral doubles drop the trailing ``.0``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
