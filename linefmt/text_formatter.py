"""Single-line text rendering of structured log entries.

Two modes are selected per call:

Plain
    ``key=value`` pairs for redirected output: timestamp, level, process and
    thread ids, OS code, the entry's fields (sorted by default) and finally
    the message. Reserved keys get dedicated renderers
    (:mod:`linefmt.base.reserved`); every other value follows the quoting
    policy (:mod:`linefmt.base.quoting`).

Colored
    ANSI-colored level tag, compact timestamp, message padded to a fixed
    column, then colored ``key=value`` pairs. Used when the destination is a
    terminal (or colors are forced) and colors are not disabled.

Concurrency
-----------
``format`` holds no lock except the one-time terminal probe guard. The
configuration object is read once per call; callers that mutate it between
calls are not synchronized against concurrent formatting.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import IO, Any, Dict, List, Optional

from .base.constants import (
    ANSI_RESET,
    LEVEL_TRUNCATE_LENGTH,
    MESSAGE_COLUMN_WIDTH,
    OS_KEY,
    PROCESS_ID_KEY,
    THREAD_ID_KEY,
)
from .base.entry import LogEntry
from .base.field_map import FieldKey, prefix_field_clashes
from .base.quoting import render_value
from .base.reserved import Renderer, resolve_renderers
from .base.runtime_ids import detect_os, get_current_thread_id, get_process_id
from .base.terminal import TerminalProbe
from .config.formatter_config import FormatterConfig


def format_timestamp(when: datetime, timestamp_format: Optional[str]) -> str:
    """Format ``when`` with a ``strftime`` pattern, RFC 3339 when unset."""
    if not timestamp_format:
        return when.isoformat(timespec="seconds")
    return when.strftime(timestamp_format)


def _as_aware(when: datetime) -> datetime:
    # naive datetimes are taken as local time
    return when.astimezone() if when.tzinfo is None else when


class TextFormatter:
    """Render :class:`LogEntry` objects as one line of bytes.

    Parameters
    ----------
    config:
        Rendering switches; defaults to :class:`FormatterConfig()`.
    terminal_probe:
        Terminal detection cache. A fresh probe is created per formatter.
    base_timestamp:
        Reference instant for the elapsed-seconds display; defaults to the
        formatter's creation time.
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        *,
        terminal_probe: Optional[TerminalProbe] = None,
        base_timestamp: Optional[datetime] = None,
    ) -> None:
        self.config = config if config is not None else FormatterConfig()
        self._terminal = terminal_probe if terminal_probe is not None else TerminalProbe()
        self._base_timestamp = _as_aware(base_timestamp or datetime.now(timezone.utc))

    @property
    def base_timestamp(self) -> datetime:
        return self._base_timestamp

    def format(self, entry: LogEntry, out: Optional[IO[Any]] = None) -> bytes:
        """Render ``entry`` as one newline-terminated line.

        ``out`` is the destination stream; it is only consulted by the
        terminal probe on the first call. When ``entry.buffer`` is set, the
        line is appended to it and the buffer's full contents are returned.
        """
        cfg = self.config
        data = prefix_field_clashes(entry.fields, cfg.field_map)
        keys = list(data)
        if not cfg.disable_sorting:
            keys.sort(key=str)

        is_terminal = self._terminal.is_terminal(out)
        is_colored = (cfg.force_colors or is_terminal) and not cfg.disable_colors

        if is_colored:
            line = self._colored_line(entry, data, keys, cfg)
        else:
            line = self._plain_line(entry, data, keys, cfg)

        buf = entry.buffer if entry.buffer is not None else bytearray()
        buf += line.encode("utf-8", errors="backslashreplace")
        buf += b"\n"
        return bytes(buf)

    def _plain_line(self, entry: LogEntry, data: Dict[str, Any], keys: List[str], cfg: FormatterConfig) -> str:
        renderers = resolve_renderers(cfg.field_map)
        parts: List[str] = []

        def append(key: str, value: Any) -> None:
            renderer: Optional[Renderer] = renderers.get(key)
            if renderer is not None:
                text = renderer(value, cfg.quote_empty_fields)
            else:
                text = render_value(value, cfg.quote_empty_fields)
            parts.append(f"{key}={text} ")

        if not cfg.disable_timestamp:
            append(cfg.field_map.resolve(FieldKey.TIME), format_timestamp(entry.time, cfg.timestamp_format))
        append(cfg.field_map.resolve(FieldKey.LEVEL), entry.level.text.upper())
        append(PROCESS_ID_KEY, get_process_id())
        append(THREAD_ID_KEY, get_current_thread_id())
        append(OS_KEY, detect_os())

        for key in keys:
            append(key, data[key])

        if entry.message:
            append(cfg.field_map.resolve(FieldKey.MSG), entry.message)
        return "".join(parts)

    def _colored_line(self, entry: LogEntry, data: Dict[str, Any], keys: List[str], cfg: FormatterConfig) -> str:
        color = entry.level.color
        level_text = entry.level.text.upper()
        if not cfg.disable_level_truncation:
            level_text = level_text[:LEVEL_TRUNCATE_LENGTH]

        if cfg.disable_timestamp:
            stamp = ""
        elif not cfg.full_timestamp:
            stamp = f"[{self._elapsed_seconds(entry.time):04d}]"
        else:
            stamp = f"[{format_timestamp(entry.time, cfg.timestamp_format)}]"

        parts = [f"\x1b[{color}m{level_text}{ANSI_RESET}{stamp} {entry.message:<{MESSAGE_COLUMN_WIDTH}} "]
        for key in keys:
            value = render_value(data[key], cfg.quote_empty_fields)
            parts.append(f" \x1b[{color}m{key}{ANSI_RESET}={value}")
        return "".join(parts)

    def _elapsed_seconds(self, when: datetime) -> int:
        return int((_as_aware(when) - self._base_timestamp).total_seconds())


__all__ = ["TextFormatter", "format_timestamp"]
