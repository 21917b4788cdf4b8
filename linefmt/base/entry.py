"""Immutable view of a single log event handed to the formatter."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .levels import Level


@dataclass(frozen=True)
class LogEntry:
    """One log event.

    Attributes:
        time: Instant the event happened.
        level: Severity of the event.
        message: Free-text message; may be empty.
        fields: Structured context. Iteration order carries no meaning.
        buffer: Optional caller-owned output buffer the formatter appends to.
    """

    time: datetime
    level: Level
    message: str = ""
    fields: Mapping[str, Any] = field(default_factory=dict)
    buffer: Optional[bytearray] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


__all__ = ["LogEntry"]
