"""Closed variant for arbitrary field values.

Field values arrive as arbitrary Python objects. ``classify_value`` maps each
onto one of a fixed set of kinds and renders its text once, so the quoting
and rendering code only has to deal with ``FieldValue`` instances.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kinds a field value can take."""

    TEXT = "text"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    ERROR = "error"
    OTHER = "other"


@dataclass(frozen=True)
class FieldValue:
    """A classified field value with its rendered text.

    Attributes:
        kind: The :class:`ValueKind` the raw value was classified as.
        raw: The original value as supplied by the caller.
        text: Textual representation used for output.
    """

    kind: ValueKind
    raw: Any
    text: str


def _fallback_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__} object>"


def classify_value(value: Any) -> FieldValue:
    """Classify ``value`` and compute its textual rendering.

    Order matters: ``bool`` is checked before numbers since it subclasses
    ``int``.
    """
    if isinstance(value, FieldValue):
        return value
    if isinstance(value, str):
        # str.__str__ keeps the plain content of str subclasses such as str enums
        return FieldValue(ValueKind.TEXT, value, str.__str__(value))
    if isinstance(value, bool):
        return FieldValue(ValueKind.BOOLEAN, value, "true" if value else "false")
    if isinstance(value, numbers.Number):
        return FieldValue(ValueKind.NUMERIC, value, _fallback_text(value))
    if isinstance(value, BaseException):
        return FieldValue(ValueKind.ERROR, value, _fallback_text(value))
    return FieldValue(ValueKind.OTHER, value, _fallback_text(value))


__all__ = ["ValueKind", "FieldValue", "classify_value"]
