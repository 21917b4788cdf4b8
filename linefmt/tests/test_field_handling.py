"""Field values, field name map and reserved-key renderers."""
from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from linefmt.base.field_map import FieldKey, FieldMap, prefix_field_clashes
from linefmt.base.field_values import FieldValue, ValueKind, classify_value
from linefmt.base.reserved import (
    RENDERERS,
    ReservedKey,
    render_source_file,
    render_time,
    resolve_renderers,
    strip_source_path,
)


@pytest.mark.parametrize(
    ("value", "kind", "text"),
    [
        ("abc", ValueKind.TEXT, "abc"),
        (7, ValueKind.NUMERIC, "7"),
        (Decimal("1.25"), ValueKind.NUMERIC, "1.25"),
        (True, ValueKind.BOOLEAN, "true"),
        (KeyError("missing"), ValueKind.ERROR, "'missing'"),
        (None, ValueKind.OTHER, "None"),
        ((1, 2), ValueKind.OTHER, "(1, 2)"),
    ],
)
def test_classify_value(value, kind, text):
    classified = classify_value(value)
    assert classified.kind is kind
    assert classified.text == text
    assert classified.raw is value


def test_classify_value_passes_field_values_through():
    fv = FieldValue(ValueKind.TEXT, "x", "x")
    assert classify_value(fv) is fv


class Unprintable:
    def __str__(self):
        raise RuntimeError("no str")

    def __repr__(self):
        raise RuntimeError("no repr")


def test_classify_value_survives_failing_str_and_repr():
    classified = classify_value(Unprintable())
    assert classified.kind is ValueKind.OTHER
    assert classified.text == "<Unprintable object>"


def test_unprintable_field_value_is_still_formatted(make_formatter, make_entry):
    fmt = make_formatter(disable_timestamp=True)
    out = fmt.format(make_entry(fields={"h": Unprintable()}))
    assert b' h="<Unprintable object>" ' in out


def test_field_map_defaults_and_overrides():
    assert FieldMap().resolve(FieldKey.TIME) == "time"
    assert FieldMap().resolve(FieldKey.LEVEL) == "level"
    assert FieldMap().resolve(FieldKey.MSG) == "msg"
    fm = FieldMap(time="@timestamp", msg="")
    assert fm.resolve(FieldKey.TIME) == "@timestamp"
    assert fm.resolve(FieldKey.MSG) == "msg"


@pytest.mark.parametrize(
    "overrides",
    [
        {"msg": "source_file"},
        {"time": "OS"},
        {"level": "process ID"},
        {"msg": "thread ID"},
        {"time": "x", "level": "x"},
        {"level": "msg"},
    ],
)
def test_field_map_rejects_reused_names(overrides):
    with pytest.raises(ValidationError):
        FieldMap(**overrides)


def test_prefix_field_clashes_uses_resolved_names():
    data = {"time": 1, "@level": 2, "other": 3}
    result = prefix_field_clashes(data, FieldMap(level="@level"))
    assert result == {"fields.time": 1, "fields.@level": 2, "other": 3}
    assert data == {"time": 1, "@level": 2, "other": 3}


def test_every_reserved_key_has_a_renderer():
    assert set(RENDERERS) == set(ReservedKey)


def test_resolve_renderers_follows_field_map():
    table = resolve_renderers(FieldMap(time="ts"))
    assert table["ts"] is RENDERERS[ReservedKey.TIME]
    assert "time" not in table
    assert table["process ID"]("9", False) == "[pid 9]"
    assert table["thread ID"](10, False) == "[tid 10]"
    assert table["OS"]("M", False) == "[M]"
    assert table["level"]("INFO", False) == "[INFO]"
    assert table["msg"]("a b", False) == "a b"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-01-02T03:04:05+00:00", "2024-01-02 03:04:05"),
        ("2024-01-02T03:04:05.123456Z", "2024-01-02 03:04:05"),
        ("2024-01-02T03:04", '"2024-01-02T03:04"'),
        ("yesterday", "yesterday"),
        ("12:00:00", '"12:00:00"'),
    ],
)
def test_render_time(value, expected):
    assert render_time(value) == expected


def test_source_file_rendering():
    assert strip_source_path("/x/y/main.go") == "main.go"
    assert strip_source_path("main.go") == "main.go"
    assert render_source_file("/x/y/main.go") == "[main]"
    assert render_source_file("/srv/app/handlers.py") == "[handlers]"
    assert render_source_file("/srv/app/__pycache__/mod.pyc") == "[mod]"


def test_resolve_renderers_is_cached_per_field_map():
    table = resolve_renderers(FieldMap(msg="message"))
    assert resolve_renderers(FieldMap(msg="message")) is table
    assert resolve_renderers(FieldMap()) is not table
    with pytest.raises(TypeError):
        table["message"] = RENDERERS[ReservedKey.LEVEL]
