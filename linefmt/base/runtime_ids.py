"""Best-effort process, thread and platform identifiers.

Failure Modes
-------------
Helpers never raise: when an identifier cannot be obtained they return ``0``
so a log line is still produced.
"""
from __future__ import annotations

import logging
import os
import sys
import threading

logger = logging.getLogger(__name__)


def get_process_id() -> int:
    """Return the current process id, or ``0`` if unavailable."""
    try:
        return os.getpid()
    except OSError:  # pragma: no cover - platform specific
        return 0


def get_current_thread_id() -> int:
    """Return the OS-level id of the calling thread.

    Prefers the native thread id; falls back to the interpreter's thread
    identifier, then to ``0``.
    """
    try:
        return threading.get_native_id()
    except (AttributeError, OSError):
        pass
    try:
        return threading.get_ident()
    except Exception:
        logger.debug("thread id unavailable; reporting 0")
        return 0


def detect_os(platform: str | None = None) -> str:
    """Return a one-letter platform code: ``W`` Windows, ``M`` macOS, ``L`` otherwise."""
    name = platform if platform is not None else sys.platform
    if name.startswith(("win", "cygwin", "msys")):
        return "W"
    if name == "darwin":
        return "M"
    return "L"


__all__ = ["get_process_id", "get_current_thread_id", "detect_os"]
