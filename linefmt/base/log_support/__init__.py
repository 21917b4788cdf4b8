"""Auxiliary logging helpers (stdlib formatter adapter) used by base.logging."""

from .text_log_formatter import TextLogFormatter, RECORD_INTERNALS

__all__ = ["TextLogFormatter", "RECORD_INTERNALS"]
