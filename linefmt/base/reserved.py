"""Reserved keys and their dedicated plain-mode renderers.

Each :class:`ReservedKey` is bound to exactly one renderer. The serialized
names of the time, level and message keys depend on the active
:class:`~linefmt.base.field_map.FieldMap`, so the name → renderer table is
built by :func:`resolve_renderers` once per field map rather than compared
against string literals at every call.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .constants import OS_KEY, PROCESS_ID_KEY, SOURCE_EXTENSIONS, SOURCE_FILE_KEY, THREAD_ID_KEY
from .field_map import FieldKey, FieldMap
from .field_values import classify_value
from .quoting import render_value

Renderer = Callable[[Any, bool], str]


class ReservedKey(str, Enum):
    """Keys that receive custom rendering in plain mode."""

    TIME = "time"
    LEVEL = "level"
    PROCESS_ID = "process_id"
    THREAD_ID = "thread_id"
    OS = "os"
    MSG = "msg"
    SOURCE_FILE = "source_file"


def _text(value: Any) -> str:
    return classify_value(value).text


def render_time(value: Any, quote_empty_fields: bool = False) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS...`` as ``YYYY-MM-DD HH:MM:SS``.

    Inputs that do not have a ``-`` separated date, a ``T`` separator and at
    least eight characters of time-of-day are rendered with the generic
    quoting policy instead.
    """
    text = _text(value)
    date_part, sep, time_part = text.partition("T")
    segments = date_part.split("-")
    if not sep or len(segments) < 2 or not all(segments) or len(time_part) < 8:
        return render_value(text, quote_empty_fields)
    return f"{'-'.join(segments)} {time_part[:8]}"


def render_level(value: Any, quote_empty_fields: bool = False) -> str:
    return f"[{_text(value)}]"


def render_process_id(value: Any, quote_empty_fields: bool = False) -> str:
    return f"[pid {_text(value)}]"


def render_thread_id(value: Any, quote_empty_fields: bool = False) -> str:
    return f"[tid {_text(value)}]"


def render_os(value: Any, quote_empty_fields: bool = False) -> str:
    return f"[{_text(value)}]"


def render_message(value: Any, quote_empty_fields: bool = False) -> str:
    return _text(value)


def strip_source_path(path: str) -> str:
    """Keep only the part of ``path`` after the last ``/`` or ``\\``."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def render_source_file(value: Any, quote_empty_fields: bool = False) -> str:
    """Render a source path as ``[basename]`` without source extensions."""
    name = strip_source_path(_text(value))
    for ext in SOURCE_EXTENSIONS:
        name = name.replace(ext, "")
    return f"[{name}]"


RENDERERS: Dict[ReservedKey, Renderer] = {
    ReservedKey.TIME: render_time,
    ReservedKey.LEVEL: render_level,
    ReservedKey.PROCESS_ID: render_process_id,
    ReservedKey.THREAD_ID: render_thread_id,
    ReservedKey.OS: render_os,
    ReservedKey.MSG: render_message,
    ReservedKey.SOURCE_FILE: render_source_file,
}


def serialized_names(field_map: FieldMap) -> Dict[ReservedKey, str]:
    """Return the serialized key for every reserved key under ``field_map``."""
    return {
        ReservedKey.TIME: field_map.resolve(FieldKey.TIME),
        ReservedKey.LEVEL: field_map.resolve(FieldKey.LEVEL),
        ReservedKey.PROCESS_ID: PROCESS_ID_KEY,
        ReservedKey.THREAD_ID: THREAD_ID_KEY,
        ReservedKey.OS: OS_KEY,
        ReservedKey.MSG: field_map.resolve(FieldKey.MSG),
        ReservedKey.SOURCE_FILE: SOURCE_FILE_KEY,
    }


@lru_cache(maxsize=32)
def resolve_renderers(field_map: FieldMap) -> Mapping[str, Renderer]:
    """Build the serialized-name → renderer table for ``field_map``.

    Cached per field map; the returned table is read-only and shared.
    """
    table = {name: RENDERERS[key] for key, name in serialized_names(field_map).items()}
    return MappingProxyType(table)


__all__ = [
    "ReservedKey",
    "Renderer",
    "RENDERERS",
    "render_time",
    "render_source_file",
    "strip_source_path",
    "serialized_names",
    "resolve_renderers",
]
