"""linefmt.config.env
==================

Environment variable mapping for formatter settings.

Purpose
-------
- Single source of truth for the ``LINEFMT_*`` variable names.
- Small helpers that turn the process environment into a partial settings
  mapping that :func:`linefmt.config.load_formatter_config` merges.

Failure Modes
-------------
- Helpers never raise on unset or malformed values; an unparseable boolean
  is simply skipped so the lower-precedence value stays in effect.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

# Formatter setting → environment variable
ENV_MAP: Dict[str, str] = {
    "force_colors": "LINEFMT_FORCE_COLORS",
    "disable_colors": "LINEFMT_DISABLE_COLORS",
    "disable_timestamp": "LINEFMT_DISABLE_TIMESTAMP",
    "full_timestamp": "LINEFMT_FULL_TIMESTAMP",
    "timestamp_format": "LINEFMT_TIMESTAMP_FORMAT",
    "disable_sorting": "LINEFMT_DISABLE_SORTING",
    "disable_level_truncation": "LINEFMT_DISABLE_LEVEL_TRUNCATION",
    "quote_empty_fields": "LINEFMT_QUOTE_EMPTY_FIELDS",
}

# FieldMap attribute → environment variable
FIELD_MAP_ENV: Dict[str, str] = {
    "time": "LINEFMT_FIELD_TIME",
    "level": "LINEFMT_FIELD_LEVEL",
    "msg": "LINEFMT_FIELD_MSG",
}

STRING_SETTINGS = frozenset({"timestamp_format"})

CONFIG_FILE_ENV = "LINEFMT_CONFIG_FILE"
LOG_LEVEL_ENV = "LINEFMT_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_env_bool(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish environment value.

    Returns ``None`` for unset, empty or unrecognized values.
    """
    if value is None:
        return None
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def read_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect formatter settings present in the environment.

    Parameters
    ----------
    environ: Optional[Mapping[str, str]]
        Mapping to read from; defaults to ``os.environ``.

    Returns
    -------
    Dict[str, Any]
        Only the settings that are set and valid. A ``field_map`` entry is
        included when any of the field name variables is set.
    """
    env = os.environ if environ is None else environ
    result: Dict[str, Any] = {}
    for setting, var in ENV_MAP.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if setting in STRING_SETTINGS:
            result[setting] = raw
            continue
        parsed = parse_env_bool(raw)
        if parsed is not None:
            result[setting] = parsed
    if env.get(NO_COLOR_ENV):
        result["disable_colors"] = True
    field_map = {attr: env[var] for attr, var in FIELD_MAP_ENV.items() if env.get(var)}
    if field_map:
        result["field_map"] = field_map
    return result


__all__ = [
    "ENV_MAP",
    "FIELD_MAP_ENV",
    "CONFIG_FILE_ENV",
    "LOG_LEVEL_ENV",
    "NO_COLOR_ENV",
    "parse_env_bool",
    "read_env_overrides",
]
