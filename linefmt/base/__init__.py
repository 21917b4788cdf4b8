"""Building blocks of the text formatter: entries, levels, field handling,
quoting, terminal detection and runtime identifiers.

The stdlib logging adapter lives in ``linefmt.base.log_support`` and is not
imported here, since it depends on :mod:`linefmt.text_formatter`.
"""

from .entry import LogEntry
from .field_map import FieldKey, FieldMap, prefix_field_clashes
from .levels import Level, parse_level

__all__ = ["LogEntry", "FieldKey", "FieldMap", "prefix_field_clashes", "Level", "parse_level"]
