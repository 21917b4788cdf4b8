"""Plain-mode rendering of the text formatter.

Covers reserved-key rendering, field ordering, quoting, clash handling,
field name overrides and buffer reuse.
"""
from __future__ import annotations

import io

from linefmt.base.field_map import FieldMap
from linefmt.base.levels import Level


def test_info_scenario_renders_reserved_then_fields_then_message(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"a": "1"}))
    assert out == b"level=[INFO] process ID=[pid 123] thread ID=[tid 456] OS=[L] a=1 msg=hello \n"


def test_timestamp_is_rendered_as_date_and_time_of_day(make_formatter, make_entry):
    fmt = make_formatter()
    out = fmt.format(make_entry(message=""))
    assert out.startswith(b"time=2024-01-02 03:04:05 level=[INFO] ")


def test_custom_timestamp_format_without_time_part_falls_back_to_quoting(make_formatter, make_entry):
    fmt = make_formatter(timestamp_format="%d/%m/%Y")
    assert fmt.format(make_entry()).startswith(b"time=02/01/2024 level=")

    fmt = make_formatter(timestamp_format="%H:%M")
    assert fmt.format(make_entry()).startswith(b'time="03:04" level=')


def test_fields_are_sorted_regardless_of_insertion_order(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"zeta": 1, "alpha": 2, "mid": 3})).decode()
    positions = [out.index(f"{k}=") for k in ("alpha", "mid", "zeta")]
    assert positions == sorted(positions)
    assert out.index("zeta=") < out.index("msg=hello")


def test_disable_sorting_keeps_insertion_order(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True, disable_sorting=True)
    out = fmt.format(make_entry(fields={"zeta": 1, "alpha": 2})).decode()
    assert out.index("zeta=1") < out.index("alpha=2")


def test_source_file_is_path_stripped_and_bracketed(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"source_file": "/x/y/main.go"}))
    assert b" source_file=[main] " in out

    out = fmt.format(make_entry(fields={"source_file": "C:\\src\\app\\handler.py"}))
    assert b" source_file=[handler] " in out


def test_value_with_space_is_quoted(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"greeting": "hello world"}))
    assert b' greeting="hello world" ' in out


def test_empty_message_suppresses_msg_pair(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(message="", fields={"a": "1"}))
    assert b"msg=" not in out
    assert out.endswith(b"a=1 \n")


def test_message_is_written_raw(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(message="two words"))
    assert out.endswith(b"msg=two words \n")


def test_quote_empty_fields_flag(make_formatter, make_entry):
    plain = make_formatter(disable_timestamp=True).format(make_entry(fields={"empty": ""}))
    quoted = make_formatter(disable_timestamp=True, quote_empty_fields=True).format(make_entry(fields={"empty": ""}))
    assert b" empty= " in plain
    assert b' empty="" ' in quoted


def test_non_string_values_use_textual_fallback(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    fields = {"n": 42, "ratio": 0.5, "ok": True, "err": ValueError("bad thing"), "items": [1, 2]}
    out = fmt.format(make_entry(fields=fields))
    assert b" n=42 " in out
    assert b" ratio=0.5 " in out
    assert b" ok=true " in out
    assert b' err="bad thing" ' in out
    assert b' items="[1, 2]" ' in out


def test_reserved_name_clash_is_prefixed(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    entry = make_entry(fields={"level": "x", "msg": "shadow", "time": "t"})
    out = fmt.format(entry)
    assert out.count(b"level=[INFO]") == 1
    assert b" fields.level=x " in out
    assert b" fields.msg=shadow " in out
    assert b" fields.time=t " in out
    assert out.endswith(b"msg=hello \n")
    # caller's mapping untouched
    assert set(entry.fields) == {"level", "msg", "time"}


def test_field_map_renames_reserved_keys(make_formatter, make_entry):
    fmt = make_formatter(field_map=FieldMap(time="@timestamp", level="@level", msg="@message"))
    out = fmt.format(make_entry(fields={"msg": "user"}))
    assert out.startswith(b"@timestamp=2024-01-02 03:04:05 @level=[INFO] ")
    assert b" msg=user " in out
    assert out.endswith(b"@message=hello \n")


def test_warn_level_uses_full_level_name(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    assert fmt.format(make_entry(level=Level.WARN)).startswith(b"level=[WARNING] ")


def test_formatting_is_deterministic(make_formatter, make_entry):
    fmt = make_formatter()
    entry = make_entry(fields={"b": "two words", "a": 1, "c": None})
    assert fmt.format(entry) == fmt.format(entry)


def test_supplied_buffer_is_reused(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    buf = bytearray()
    out = fmt.format(make_entry(buffer=buf))
    assert out == bytes(buf)
    assert out.endswith(b"msg=hello \n")
    assert out.count(b"\n") == 1


def test_non_terminal_stream_gives_plain_output(make_entry):
    from linefmt.config.formatter_config import FormatterConfig
    from linefmt.text_formatter import TextFormatter

    fmt = TextFormatter(FormatterConfig(disable_timestamp=True))
    out = fmt.format(make_entry(), io.StringIO())
    assert out.startswith(b"level=[INFO] ")
    assert b"\x1b[" not in out


def test_non_string_field_names_are_sorted_by_text(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"b": 2, 1: "a"}))
    assert b" 1=a b=2 msg=hello \n" in out


def test_config_changes_apply_to_the_next_call(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    entry = make_entry()
    assert fmt.format(entry).startswith(b"level=[INFO] ")
    fmt.config.force_colors = True
    assert fmt.format(entry).startswith(b"\x1b[36mINFO")
