"""Typed configuration for the text formatter.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Notes
-----
The model is mutable on purpose: the owner may flip flags between calls.
The formatter reads the instance once at the start of each call and does not
synchronize against concurrent mutation.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..base.field_map import FieldMap


class FormatterConfig(BaseModel):
    """Rendering switches for :class:`~linefmt.text_formatter.TextFormatter`.

    Attributes
    ----------
    force_colors:
        Emit colored output even when the destination is not a terminal.
    disable_colors:
        Never emit colored output; wins over ``force_colors``.
    disable_timestamp:
        Leave the timestamp out entirely.
    full_timestamp:
        In colored mode, print the formatted timestamp instead of the
        seconds elapsed since the formatter was created.
    timestamp_format:
        ``strftime`` pattern; RFC 3339 when unset.
    disable_sorting:
        Keep field insertion order instead of sorting keys.
    disable_level_truncation:
        Print the full level name in colored mode.
    quote_empty_fields:
        Quote empty values as ``""``.
    field_map:
        Serialized names of the reserved keys.
    """

    force_colors: bool = False
    disable_colors: bool = False
    disable_timestamp: bool = False
    full_timestamp: bool = False
    timestamp_format: Optional[str] = None
    disable_sorting: bool = False
    disable_level_truncation: bool = False
    quote_empty_fields: bool = False
    field_map: FieldMap = Field(default_factory=FieldMap)


__all__ = ["FormatterConfig"]
