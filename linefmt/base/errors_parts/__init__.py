"""Errors parts package public surface.

Re-exports individual error types for optional direct imports.
Prefer importing from `linefmt.base.errors` for the stable surface.
"""

from .line_format_error import LineFormatError
from .configuration_error import ConfigurationError

__all__ = ["LineFormatError", "ConfigurationError"]
