"""Base shared constants for the text formatter.

Central location to avoid scattering ANSI codes, column widths and reserved
field names across the rendering code.
"""
from __future__ import annotations

# ANSI SGR color codes used by the colored rendering branch
RED = 31
YELLOW = 33
BLUE = 36
GRAY = 37

ANSI_RESET = "\x1b[0m"

# Minimum width the message is padded to in colored mode
MESSAGE_COLUMN_WIDTH = 44

# Level tag length in colored mode unless truncation is disabled
LEVEL_TRUNCATE_LENGTH = 4

# Prefix applied to user fields whose names collide with a reserved key
CLASH_PREFIX = "fields."

# Fixed serialized names of the runtime-context pairs (plain mode)
PROCESS_ID_KEY = "process ID"
THREAD_ID_KEY = "thread ID"
OS_KEY = "OS"
SOURCE_FILE_KEY = "source_file"

# Source extensions stripped from ``source_file`` values (longest first)
SOURCE_EXTENSIONS = (".pyc", ".py", ".go")

__all__ = [
    "RED",
    "YELLOW",
    "BLUE",
    "GRAY",
    "ANSI_RESET",
    "MESSAGE_COLUMN_WIDTH",
    "LEVEL_TRUNCATE_LENGTH",
    "CLASH_PREFIX",
    "PROCESS_ID_KEY",
    "THREAD_ID_KEY",
    "OS_KEY",
    "SOURCE_FILE_KEY",
    "SOURCE_EXTENSIONS",
]
