import io

import pytest

from atriblog.formatting import (
    Palette,
    format_cell_value,
    prioritize_fields,
    split_camel_case,
    truncate,
)


class _Tty(io.StringIO):
    def isatty(self):
        return True


def test_palette_disabled_passes_text_through():
    palette = Palette(enabled=False)
    for style in (palette.bold, palette.green, palette.red, palette.yellow):
        assert style("hello") == "hello"


def test_palette_enabled_wraps_in_ansi_codes():
    palette = Palette(enabled=True)
    assert palette.bold("x") == "\033[1m" + "x" + "\033[0m"
    assert palette.green("x") == "\033[32m" + "x" + "\033[0m"
    assert palette.red("x") == "\033[31m" + "x" + "\033[0m"
    assert palette.yellow("x") == "\033[33m" + "x" + "\033[0m"


def test_palette_detect_requires_human_friendly_terminal():
    tty = _Tty()
    assert Palette.detect(tty, human_friendly=True, environ={}).enabled is True
    assert Palette.detect(tty, human_friendly=False, environ={}).enabled is False
    assert Palette.detect(tty, human_friendly=True, no_color=True, environ={}).enabled is False
    assert Palette.detect(tty, human_friendly=True, environ={"NO_COLOR": "1"}).enabled is False
    assert Palette.detect(tty, human_friendly=True, environ={"TERM": "dumb"}).enabled is False
    assert Palette.detect(io.StringIO(), human_friendly=True, environ={}).enabled is False


def test_truncate_keeps_short_text():
    assert truncate("short", 10) == "short"


def test_truncate_cuts_with_ellipsis():
    text = "abcdefghijklmnop"
    out = truncate(text, 8)
    assert len(out) == 8
    assert out.endswith("...")
    assert out[:5] == text[:5]


def test_truncate_tiny_limit_has_no_ellipsis():
    assert truncate("abcdef", 3) == "abc"


def test_format_cell_value_scalars():
    assert format_cell_value(None) == ""
    assert format_cell_value(True) == "true"
    assert format_cell_value(7.0) == str(7)
    assert format_cell_value(42) == str(42)
    assert format_cell_value(2.5) == "2.50"


def test_format_cell_value_iso_date_keeps_date_part():
    stamp = "2024-01-02T03:04:05Z"
    assert format_cell_value(stamp) == stamp[:10]


def test_format_cell_value_long_string_truncated():
    out = format_cell_value("x" * 100)
    assert len(out) == 60
    assert out.endswith("...")


def test_format_cell_value_lists():
    assert format_cell_value([]) == ""
    assert format_cell_value(["a", "b", "c"]) == ", ".join(["a", "b", "c"])


def test_format_cell_value_object_array_is_multiline():
    out = format_cell_value([{"name": "first"}, {"name": "second"}])
    assert out.startswith("\n")
    lines = out.strip("\n").split("\n")
    assert len(lines) == 2
    assert lines[0].strip() == "first"


def test_format_cell_value_object_uses_name_then_id():
    assert format_cell_value({"Name": "widget", "id": "x1"}) == "widget"
    assert format_cell_value({"id": "x1"}) == "x1"
    assert format_cell_value({"other": 1}) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("OrderDate", ["order", "date"]),
        ("statusCode", ["status", "code"]),
        ("page_size", ["page", "size"]),
    ],
)
def test_split_camel_case(text, expected):
    assert split_camel_case(text) == expected


def test_prioritize_fields_orders_by_tier():
    item = {"flag": True, "zeta": 1, "status": "z", "created": "y", "name": "x"}
    assert prioritize_fields(item, False) == ["name", "created", "status", "zeta", "flag"]


def test_prioritize_fields_demotes_compound_suffix():
    item = {"created_date": "d", "user_id": "u", "id": 1}
    assert prioritize_fields(item, False) == ["id", "user_id", "created_date"]


def test_prioritize_fields_complex_handling():
    item = {"id": 1, "tags": ["a"], "meta": {"name": "m"}, "empty": None}
    assert prioritize_fields(item, False) == ["id", "empty"]
    with_complex = prioritize_fields(item, True)
    assert set(with_complex) == {"id", "tags", "meta"}
    assert with_complex[0] == "id"