"""Unified configuration layer for the text formatter.

Goals
-----
* Centralize defaults (see :mod:`linefmt.config.defaults`).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Environment variables (``LINEFMT_*``, ``NO_COLOR``)
    3. Optional config file (JSON or YAML) pointed to by ``LINEFMT_CONFIG_FILE``
    4. In-code overrides passed to the helper
* Provide a single call site: ``load_formatter_config(overrides)``.

Config File
-----------
Same keys as :class:`FormatterConfig`; example:

```
full_timestamp: true
timestamp_format: "%Y-%m-%dT%H:%M:%S"
field_map:
  time: "@timestamp"
```
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..base.errors import ConfigurationError
from .defaults import DEFAULTS
from .env import CONFIG_FILE_ENV, read_env_overrides
from .formatter_config import FormatterConfig

logger = logging.getLogger(__name__)


def load_config_file(path: str | os.PathLike[str]) -> Dict[str, Any]:
    """Load a JSON or YAML settings file into a mapping.

    JSON is attempted first; on failure the text is parsed as YAML.

    Raises
    ------
    ConfigurationError
        When the file is missing, unparseable, or not a mapping.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError("cannot read config file", source=str(p), raw=exc) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigurationError("config file is neither JSON nor YAML", source=str(p), raw=exc) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("config file must contain a mapping", source=str(p))
    logger.debug("loaded formatter config file", extra={"path": str(p), "keys": sorted(data)})
    return data


def _merge(base: Dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        if key == "field_map" and isinstance(value, Mapping):
            merged = dict(base.get("field_map") or {})
            merged.update(value)
            base["field_map"] = merged
        else:
            base[key] = value


def load_formatter_config(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> FormatterConfig:
    """Build a :class:`FormatterConfig` from all configuration sources.

    Parameters
    ----------
    overrides: Optional[Mapping[str, Any]]
        Highest-precedence settings supplied in code.
    environ: Optional[Mapping[str, str]]
        Environment mapping; defaults to ``os.environ``.

    Raises
    ------
    ConfigurationError
        When the config file cannot be loaded or the merged settings fail
        validation.
    """
    env = os.environ if environ is None else environ
    settings: Dict[str, Any] = dict(DEFAULTS)
    _merge(settings, read_env_overrides(env))
    path = env.get(CONFIG_FILE_ENV)
    if path:
        _merge(settings, load_config_file(path))
    if overrides:
        _merge(settings, overrides)
    try:
        return FormatterConfig.model_validate(settings)
    except ValidationError as exc:
        raise ConfigurationError("invalid formatter settings", source=path or None, raw=exc) from exc


__all__ = ["FormatterConfig", "load_config_file", "load_formatter_config"]
