from __future__ import annotations

import pytest

from compound_backend.core.formatting import (
    axis_tick_label,
    format_currency,
    format_live_input,
    format_number,
    parse_formatted_number,
    parse_leading_int,
)


@pytest.mark.parametrize(
    "raw, cursor, expected",
    [
        # cursor between '2' and '3' stays there once the comma appears
        ("1234", 2, ("1,234", 3)),
        # digit typed at the end regroups and keeps the cursor at the end
        ("1,2345", 6, ("12,345", 6)),
        # digit typed in the middle
        ("12,3945", 5, ("123,945", 5)),
        # digit typed just before a separator
        ("10,234", 2, ("10,234", 2)),
        # deleting a digit drops the separator
        ("1,34", 1, ("134", 1)),
        ("0007", 4, ("7", 1)),
        ("1234", 0, ("1,234", 0)),
    ],
)
def test_live_input_regroups_and_keeps_cursor_on_digit(raw, cursor, expected):
    assert format_live_input(raw, cursor) == expected


def test_live_input_is_idempotent_on_formatted_text():
    text = "1,234,567"

    assert format_live_input(text, len(text)) == (text, len(text))


@pytest.mark.parametrize("raw", ["abc", "", ",,,", "0", "000", "-"])
def test_live_input_without_value_clears_field(raw):
    assert format_live_input(raw, len(raw)) == ("", 0)


def test_live_input_ignores_decimals_and_signs():
    assert format_live_input("-1234.5", 7) == ("12,345", 6)


def test_live_input_clamps_out_of_range_cursor():
    assert format_live_input("12", 99) == ("12", 2)
    assert format_live_input("1234", -3) == ("1,234", 0)


def test_live_input_handles_very_long_input():
    raw = "9" * 5000

    text, cursor = format_live_input(raw, len(raw))

    assert text.replace(",", "") == raw
    assert cursor == len(text)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(-42) == "-$42.00"


def test_format_number():
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(0) == "0"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1,500.25", 1500.25),
        (" 3.5", 3.5),
        ("12abc", 12.0),
        ("-20", -20.0),
        (".5", 0.5),
        ("", 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (True, 0.0),
        (float("inf"), 0.0),
        (7, 7.0),
    ],
)
def test_parse_formatted_number(raw, expected):
    assert parse_formatted_number(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("12.7", 12), ("  30 years", 30), ("x", 0), (7.9, 7), (None, 0), (15, 15)],
)
def test_parse_leading_int(raw, expected):
    assert parse_leading_int(raw) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(2_500_000, "$2.5M"), (5_000, "$5K"), (250, "$250"), (0, "$0")],
)
def test_axis_tick_label(value, expected):
    assert axis_tick_label(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(2_500, "$3K"), (3_500, "$4K"), (1_250_000, "$1.3M"), (999.5, "$999.5")],
)
def test_axis_tick_label_rounds_halves_away_from_zero(value, expected):
    assert axis_tick_label(value) == expected


def test_currency_rounds_half_cents_up():
    assert format_currency(0.125) == "$0.13"
    assert format_currency(-0.125) == "-$0.13"
    assert format_currency(1234567.891) == "$1,234,567.89"


def test_format_number_keeps_three_rounded_decimals():
    assert format_number(0.0005) == "0.001"
    assert format_number(-1234.5678) == "-1,234.568"
    assert format_number(1000.0001) == "1,000"


def test_display_helpers_accept_non_finite_values():
    assert format_currency(float("inf")) == "$∞"
    assert format_currency(float("-inf")) == "-$∞"
    assert format_number(float("nan")) == "NaN"
    assert axis_tick_label(float("inf")) == "$∞"
