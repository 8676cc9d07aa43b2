"""Deterministic canonicalization for jsondelta values.

Provides the canonical serialized form and content hash used to compare
JSON values by identity.

Guarantees:
- canon(v) is deterministic: same input always yields identical bytes
- Dict key order is irrelevant (sorted internally)
- Strings are kept verbatim (no normalization), so distinct strings
  never collapse into one identity
- bool and number are distinct kinds: canon(True) != canon(1)
- Numbers that compare equal serialize equally: an integral float is
  written as an int, so canon(1.0) == canon(1) and canon(-0.0) == canon(0)
"""
from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """Runtime kind of a JSON value."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


SCALAR_KINDS = frozenset(
    {JsonKind.NULL, JsonKind.BOOL, JsonKind.NUMBER, JsonKind.STRING}
)


def value_kind(value: Any) -> JsonKind:
    """Classify a value by its JSON kind.

    Raises:
        TypeError: If the value is not JSON-representable.
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int; check it first
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def _normalize_value(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, Mapping):
        return {k: _normalize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_value(v) for v in value]
    return value


def canon(value: Any) -> bytes:
    """Canonicalize a JSON value to bytes for identity comparison.

    Args:
        value: Any JSON-like value (dict, list, tuple, str, int, float,
               bool, None).

    Returns:
        Compact UTF-8 JSON with sorted keys and integral floats as ints.
    """
    return json.dumps(
        _normalize_value(value),
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Compute SHA-256 hex digest of bytes."""
    return hashlib.sha256(data).hexdigest()
