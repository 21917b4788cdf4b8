"""stdlib ``logging`` adapter around :class:`~linefmt.text_formatter.TextFormatter`.

This module defines :class:`TextLogFormatter`, a ``logging.Formatter`` that
turns a ``LogRecord`` into a :class:`~linefmt.base.entry.LogEntry` and renders
it with the text formatter. Non-internal extra attributes of the record
become entry fields; the record's source path is exposed as ``source_file``.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

from ..constants import SOURCE_FILE_KEY
from ..entry import LogEntry
from ..levels import Level
from ...config.formatter_config import FormatterConfig
from ...text_formatter import TextFormatter

# LogRecord attributes that are logging internals, not user fields
RECORD_INTERNALS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)

ERROR_FIELD = "error"


class TextLogFormatter(logging.Formatter):
    """Render log records as single text lines.

    Parameters
    ----------
    config:
        Formatter configuration; defaults to :class:`FormatterConfig()`.
    stream:
        Destination stream the handler writes to, used for terminal detection.
    include_source:
        Add the record's ``pathname`` as the ``source_file`` field.
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        *,
        stream: Optional[IO[Any]] = None,
        include_source: bool = True,
    ) -> None:
        super().__init__()
        self.text_formatter = TextFormatter(config)
        self.stream = stream
        self.include_source = include_source

    def record_to_entry(self, record: logging.LogRecord) -> LogEntry:
        """Build a :class:`LogEntry` from ``record``."""
        fields: Dict[str, Any] = {}
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in RECORD_INTERNALS:
                continue
            fields[k] = v
        if self.include_source and record.pathname:
            fields.setdefault(SOURCE_FILE_KEY, record.pathname)
        if record.exc_info and record.exc_info[1] is not None:
            fields.setdefault(ERROR_FIELD, record.exc_info[1])
        return LogEntry(
            time=datetime.fromtimestamp(record.created, tz=timezone.utc),
            level=Level.from_levelno(record.levelno),
            message=record.getMessage(),
            fields=fields,
        )

    def format(self, record: logging.LogRecord) -> str:
        line = self.text_formatter.format(self.record_to_entry(record), self.stream)
        # StreamHandler appends its own terminator
        return line.decode("utf-8")[:-1]


__all__ = ["TextLogFormatter", "RECORD_INTERNALS"]
