"""linefmt package

Deterministic single-line rendering of structured log entries for terminals
(ANSI colored) and redirected streams (plain, quoted ``key=value``).

Public API (re-exported):
    - Version: ``__version__``
    - Formatter: :class:`TextFormatter`
    - Data model: :class:`LogEntry`, :class:`Level`, :class:`FieldMap`,
      :class:`FieldKey`
    - Configuration: :class:`FormatterConfig`, :func:`load_formatter_config`
    - Errors: :class:`LineFormatError`, :class:`ConfigurationError`
    - stdlib logging: :class:`TextLogFormatter`, :func:`get_logger`,
      :func:`configure_logger`
"""

from .text_formatter import TextFormatter
from .base.entry import LogEntry
from .base.errors import ConfigurationError, LineFormatError
from .base.field_map import FieldKey, FieldMap
from .base.levels import Level, parse_level
from .base.quoting import needs_quoting
from .config import FormatterConfig, load_formatter_config
from .base.log_support import TextLogFormatter
from .base.logging import configure_logger, get_logger

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Formatter
    "TextFormatter",
    "needs_quoting",
    # Data model
    "LogEntry",
    "Level",
    "parse_level",
    "FieldMap",
    "FieldKey",
    # Configuration
    "FormatterConfig",
    "load_formatter_config",
    # Exceptions
    "LineFormatError",
    "ConfigurationError",
    # stdlib logging
    "TextLogFormatter",
    "get_logger",
    "configure_logger",
]
