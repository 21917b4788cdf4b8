"""Shared stdlib logger setup using the text formatter.

Rationale:
- Central place to attach :class:`TextLogFormatter` to a console handler.
- Avoid sprinkling ad-hoc handler setup across applications.

The ``linefmt`` logger owns a single managed stderr handler. Child loggers
propagate to it instead of getting handlers of their own, so nothing is
emitted twice.
"""
from __future__ import annotations

import contextlib
import logging
import os
import sys
from typing import Optional

from ..config import load_formatter_config
from ..config.env import LOG_LEVEL_ENV
from ..config.formatter_config import FormatterConfig
from .levels import parse_level
from .log_support import TextLogFormatter

BASE_LOGGER_NAME = "linefmt"

_BASE_LOGGER_ATTR = "_linefmt_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_linefmt_console_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name into a stdlib logging level number.

    Accepts the stdlib names plus the formatter's own level names
    (``warn``, ``fatal``, ``panic``) case-insensitively. Falls back to
    ``default`` on unknown values.
    """
    if not value:
        return default
    name = value.strip().upper()
    stdlib = logging.getLevelName(name)
    if isinstance(stdlib, int):
        return stdlib
    level = parse_level(value)
    return int(level) if level is not None else default


def _console_handler(config: FormatterConfig, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(TextLogFormatter(config, stream=sys.stderr))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(config: Optional[FormatterConfig], level: int) -> logging.Logger:
    """Initialize and return the shared ``linefmt`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False) and config is None:
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                formatter = existing.formatter
                cfg = formatter.text_formatter.config if isinstance(formatter, TextLogFormatter) else None
                logger.addHandler(_console_handler(cfg or load_formatter_config(), desired_level))
                continue
            existing.setLevel(desired_level)
        return logger

    cfg = config if config is not None else load_formatter_config()
    logger.setLevel(desired_level)
    managed = [h for h in logger.handlers if getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    for h in managed:
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()
    logger.addHandler(_console_handler(cfg, desired_level))
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME,
    level: int = logging.INFO,
    config: Optional[FormatterConfig] = None,
) -> logging.Logger:
    """Return a logger whose records are rendered by the text formatter.

    The ``linefmt`` base logger is configured on first use (or whenever an
    explicit ``config`` is passed). Other names should live under the
    ``linefmt.`` hierarchy; they are returned with no handlers of their own
    and propagate to the base logger.
    """
    base_logger = _ensure_base_logger(config, level)
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    # Drop previously managed console handlers to avoid duplicate emissions.
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    config: Optional[FormatterConfig] = None,
    logger_name: str = BASE_LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure a logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    config: Optional[FormatterConfig]
        When provided, the managed handlers switch to a formatter built from
        this configuration.
    logger_name: str
        Name of the logger to configure. Defaults to the shared "linefmt" logger.

    Returns
    -------
    logging.Logger
        The configured logger instance.

    Notes
    -----
    Handlers not tagged as managed by this module are left untouched.
    """
    logger = logging.getLogger(logger_name)
    if logger_name == BASE_LOGGER_NAME and not getattr(logger, _BASE_LOGGER_ATTR, False):
        logger = get_logger(logger_name, config=config)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    if config is not None:
        for h in logger.handlers:
            if getattr(h, _CONSOLE_HANDLER_ATTR, False):
                h.setFormatter(TextLogFormatter(config, stream=getattr(h, "stream", None)))

    return logger


__all__ = ["BASE_LOGGER_NAME", "get_logger", "configure_logger"]
