"""Terminal capability probe.

Decides whether an output stream is attached to an interactive terminal.

Key Components
--------------
check_if_terminal(stream)
    Platform-specific introspection of the stream's file descriptor. POSIX
    systems query the terminal attributes (``tcgetattr``, the terminal-mode
    ioctl); Windows asks the console for its mode. Streams without a real
    descriptor (``io.StringIO``, closed files, ``None``) are never terminals.

TerminalProbe
    Per-formatter cache. The first caller runs the probe while holding a lock;
    every later caller reads the cached answer without locking.
"""
from __future__ import annotations

import logging
import sys
from threading import Lock
from typing import IO, Any, Callable, Optional

logger = logging.getLogger(__name__)


def _stream_fileno(stream: Any) -> Optional[int]:
    if stream is None or getattr(stream, "closed", False):
        return None
    fileno = getattr(stream, "fileno", None)
    if fileno is None:
        return None
    try:
        return fileno()
    except (OSError, ValueError, AttributeError):
        # io.UnsupportedOperation subclasses both OSError and ValueError
        return None


def _posix_is_terminal(fd: int) -> bool:
    import termios

    try:
        termios.tcgetattr(fd)
    except (termios.error, OSError):
        return False
    return True


def _windows_is_terminal(fd: int) -> bool:
    import ctypes
    import msvcrt
    from ctypes import wintypes

    try:
        handle = msvcrt.get_osfhandle(fd)
    except OSError:
        return False
    mode = wintypes.DWORD()
    return bool(ctypes.windll.kernel32.GetConsoleMode(handle, ctypes.byref(mode)))  # type: ignore[attr-defined]


def check_if_terminal(stream: Optional[IO[Any]]) -> bool:
    """Return True when ``stream`` writes to an interactive terminal."""
    fd = _stream_fileno(stream)
    if fd is None:
        return False
    if sys.platform.startswith("win"):
        return _windows_is_terminal(fd)
    return _posix_is_terminal(fd)


class TerminalProbe:
    """One-time, thread-safe terminal detection for a single formatter.

    The probe function is injectable so tests can count invocations.
    """

    def __init__(self, probe: Callable[[Optional[IO[Any]]], bool] = check_if_terminal) -> None:
        self._probe = probe
        self._lock = Lock()
        self._done = False
        self._is_terminal = False

    @property
    def resolved(self) -> bool:
        """Whether the probe has already run."""
        return self._done

    def is_terminal(self, stream: Optional[IO[Any]] = None) -> bool:
        """Return the cached answer, probing ``stream`` on the first call only."""
        if self._done:
            return self._is_terminal
        with self._lock:
            if not self._done:
                try:
                    self._is_terminal = bool(self._probe(stream))
                finally:
                    self._done = True
                logger.debug("terminal probe resolved", extra={"is_terminal": self._is_terminal})
        return self._is_terminal


__all__ = ["check_if_terminal", "TerminalProbe"]
