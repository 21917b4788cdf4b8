"""
Severity levels for log entries.

Defines the ordered `Level` enumeration (``DEBUG < INFO < WARN < ERROR <
FATAL < PANIC``). Numeric values line up with the standard library
``logging`` constants so records coming through a ``logging.Handler`` map
onto a level without a lookup table.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from .constants import BLUE, GRAY, RED, YELLOW


class Level(IntEnum):
    """Ordered severity of a log entry."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL
    PANIC = logging.CRITICAL + 10

    @property
    def text(self) -> str:
        """Lowercase level name as it appears in rendered output."""
        return _LEVEL_TEXT[self]

    @property
    def color(self) -> int:
        """ANSI color code used for this level in colored mode."""
        if self is Level.DEBUG:
            return GRAY
        if self is Level.WARN:
            return YELLOW
        if self in (Level.ERROR, Level.FATAL, Level.PANIC):
            return RED
        return BLUE

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.text

    @classmethod
    def from_levelno(cls, levelno: int) -> "Level":
        """Map a stdlib ``logging`` level number onto the closest level.

        Picks the highest level whose value does not exceed ``levelno``;
        anything below DEBUG (e.g. ``NOTSET``) maps to DEBUG.
        """
        result = cls.DEBUG
        for level in cls:
            if level <= levelno:
                result = level
        return result


_LEVEL_TEXT = {
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "fatal",
    Level.PANIC: "panic",
}


def parse_level(value: Optional[str], default: Optional[Level] = None) -> Optional[Level]:
    """Parse a level name case-insensitively.

    Accepts the rendered names plus ``warn`` and ``critical`` as aliases.
    Returns ``default`` for empty or unknown values.
    """
    if not value:
        return default
    name = value.strip().lower()
    for level, text in _LEVEL_TEXT.items():
        if name == text:
            return level
    aliases = {"warn": Level.WARN, "critical": Level.FATAL}
    return aliases.get(name, default)


__all__ = ["Level", "parse_level"]
