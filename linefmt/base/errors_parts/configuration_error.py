"""
Configuration failure raised while loading formatter settings.
"""
from __future__ import annotations

from typing import Optional

from .line_format_error import LineFormatError


class ConfigurationError(LineFormatError):
    """Raised when a formatter configuration source cannot be used.

    Attributes:
        source: Path or name of the offending configuration source.
        raw: Optional original exception for diagnostics.
    """

    def __init__(self, message: str, *, source: Optional[str] = None, raw: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.raw = raw

    def __str__(self) -> str:  # pragma: no cover - trivial
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


__all__ = ["ConfigurationError"]
