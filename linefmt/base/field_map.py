"""Reserved field names and their serialized key overrides.

``FieldMap`` lets callers rename the three reserved keys (time, level,
message) without colliding with user fields. ``prefix_field_clashes`` moves
user fields that would shadow a reserved key out of the way.

Example
-------
```
FieldMap(time="@timestamp", level="@level", msg="@message")
```
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .constants import CLASH_PREFIX, OS_KEY, PROCESS_ID_KEY, SOURCE_FILE_KEY, THREAD_ID_KEY

# Serialized names owned by fixed renderers; a FieldMap may not reuse them
FIXED_RESERVED_NAMES = frozenset({PROCESS_ID_KEY, THREAD_ID_KEY, OS_KEY, SOURCE_FILE_KEY})


class FieldKey(str, Enum):
    """Logical reserved keys; the value is the default serialized name."""

    TIME = "time"
    LEVEL = "level"
    MSG = "msg"


class FieldMap(BaseModel):
    """Serialized names for the reserved keys.

    Attributes
    ----------
    time, level, msg:
        Override for the corresponding :class:`FieldKey`. ``None`` or an empty
        string keeps the default name.
    """

    model_config = ConfigDict(frozen=True)

    time: Optional[str] = None
    level: Optional[str] = None
    msg: Optional[str] = None

    @model_validator(mode="after")
    def _check_distinct_names(self) -> "FieldMap":
        """Reject names owned by fixed renderers or shared by two keys."""
        names = [self.resolve(key) for key in FieldKey]
        taken = sorted(set(names) & FIXED_RESERVED_NAMES)
        if taken:
            raise ValueError(f"reserved field names cannot be reused: {taken}")
        if len(set(names)) != len(names):
            raise ValueError(f"reserved field names must be distinct: {names}")
        return self

    def resolve(self, key: FieldKey) -> str:
        """Return the serialized name for ``key``."""
        override = getattr(self, key.name.lower())
        return override or key.value


def prefix_field_clashes(data: Mapping[str, Any], field_map: FieldMap) -> Dict[str, Any]:
    """Return a copy of ``data`` with reserved-name clashes renamed.

    A user field named like a resolved reserved key is moved to
    ``fields.<name>``. The input mapping is left untouched.
    """
    result = dict(data)
    for key in FieldKey:
        name = field_map.resolve(key)
        if name in result:
            result[CLASH_PREFIX + name] = result.pop(name)
    return result


__all__ = ["FieldKey", "FieldMap", "FIXED_RESERVED_NAMES", "prefix_field_clashes"]
