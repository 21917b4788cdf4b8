"""
Root exception type for the package.

Formatting itself never raises on unexpected input; this base exists so
callers can catch every package-specific failure with one ``except`` clause.
"""
from __future__ import annotations


class LineFormatError(Exception):
    """Base exception for all package-specific failures."""


__all__ = ["LineFormatError"]
