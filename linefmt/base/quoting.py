"""Field quoting policy.

A value is written raw when it only contains characters from a small safe
set; anything else is written as a double-quoted, backslash-escaped literal.
"""
from __future__ import annotations

from typing import Any

from .field_values import classify_value

_SAFE_PUNCTUATION = frozenset("-._/@^+")

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _is_safe_char(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9") or ch in _SAFE_PUNCTUATION


def needs_quoting(text: str, quote_empty_fields: bool = False) -> bool:
    """Return True when ``text`` must be quoted.

    Empty text needs quoting only when ``quote_empty_fields`` is set.
    """
    if quote_empty_fields and not text:
        return True
    return not all(_is_safe_char(ch) for ch in text)


def quote_text(text: str) -> str:
    """Return ``text`` as a double-quoted literal.

    Quotes, backslashes and control characters are escaped; printable
    non-ASCII characters are kept as is.
    """
    out = ['"']
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                out.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def render_value(value: Any, quote_empty_fields: bool = False) -> str:
    """Render an arbitrary field value, quoting it when the policy says so."""
    text = classify_value(value).text
    if needs_quoting(text, quote_empty_fields):
        return quote_text(text)
    return text


__all__ = ["needs_quoting", "quote_text", "render_value"]
