"""Package error types public surface.

This module re-exports the one-class-per-file implementations under
``linefmt.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.line_format_error import LineFormatError
from .errors_parts.configuration_error import ConfigurationError

__all__ = ["LineFormatError", "ConfigurationError"]
