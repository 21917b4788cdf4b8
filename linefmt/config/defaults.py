"""Centralized formatter defaults.

Kept separate from the model so environment parsing and documentation can
refer to the same values.
"""
from __future__ import annotations

from typing import Any, Dict

# strftime pattern; ``None`` renders RFC 3339 via ``datetime.isoformat``
DEFAULT_TIMESTAMP_FORMAT = None

DEFAULTS: Dict[str, Any] = {
    "force_colors": False,
    "disable_colors": False,
    "disable_timestamp": False,
    "full_timestamp": False,
    "timestamp_format": DEFAULT_TIMESTAMP_FORMAT,
    "disable_sorting": False,
    "disable_level_truncation": False,
    "quote_empty_fields": False,
}

__all__ = ["DEFAULT_TIMESTAMP_FORMAT", "DEFAULTS"]
