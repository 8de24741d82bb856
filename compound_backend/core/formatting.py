"""Display formatting and lenient parsing for calculator fields.

Money fields are shown with thousands separators while the user types;
``format_live_input`` regroups the digits and moves the cursor so it stays
next to the digit being edited. The parsers never raise: anything they
cannot read becomes 0.

``format_number`` and ``axis_tick_label`` are not used by the API itself;
they are exported for hosts that render the inputs and the chart's value
axis. Every display helper rounds halves away from zero (``2,500`` ticks
as ``$3K``), the way browser number formatting does.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Tuple

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_NON_DIGIT = re.compile(r"[^0-9]")
_DIGITS = frozenset("0123456789")

# wide enough to hold any finite float at fixed point
_ROUNDING = Context(prec=400, rounding=ROUND_HALF_UP)

GROUP_SEPARATOR = ","


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def _group_digits(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return GROUP_SEPARATOR.join(groups)


def _round_half_up(value: float, places: int) -> Decimal:
    """Round the shortest decimal form of ``value``; ties go away from zero."""
    return Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-places), context=_ROUNDING)


def _grouped(amount: Decimal, places: int) -> str:
    """Fixed-point text of a non-negative amount with grouped thousands."""
    whole, _, fraction = f"{amount:.{places}f}".partition(".")
    grouped = _group_digits(whole)
    return f"{grouped}.{fraction}" if fraction else grouped


def _non_finite_text(value: float) -> str:
    return "NaN" if math.isnan(value) else "∞"


def parse_formatted_number(value: Any) -> float:
    """Read a possibly grouped number such as ``"1,500.25"``; 0 when unreadable."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, float):
        return _finite_or_zero(value)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    if not isinstance(value, str):
        return 0.0

    match = _LEADING_NUMBER.match(value.replace(GROUP_SEPARATOR, ""))
    return _finite_or_zero(float(match.group(1))) if match else 0.0


def parse_leading_int(value: Any) -> int:
    """Read the leading integer of ``value`` (``"12.7"`` gives 12); 0 when unreadable."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0

    match = _LEADING_INT.match(value)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return 0


def format_number(value: float) -> str:
    """Group thousands without a currency symbol, e.g. ``1234567 -> "1,234,567"``.

    Up to three decimals are kept, trailing zeros dropped.
    """
    sign = "-" if value < 0 else ""
    if not math.isfinite(value):
        return sign + _non_finite_text(value)
    text = _grouped(_round_half_up(abs(value), 3), 3)
    return sign + text.rstrip("0").rstrip(".")


def format_currency(value: float) -> str:
    """Render ``value`` as en-US dollars with two decimals."""
    sign = "-" if value < 0 else ""
    if not math.isfinite(value):
        return f"{sign}${_non_finite_text(value)}"
    return f"{sign}${_grouped(_round_half_up(abs(value), 2), 2)}"


def axis_tick_label(value: float) -> str:
    """Compact label for the value axis: ``$1.2M``, ``$5K`` or ``$250``."""
    if not math.isfinite(value):
        return f"${_non_finite_text(value)}"
    if value >= 1_000_000:
        return f"${_round_half_up(value / 1_000_000, 1)}M"
    if value >= 1_000:
        return f"${_round_half_up(value / 1_000, 0)}K"
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value!r}"


def format_live_input(raw_text: str, cursor_position: int) -> Tuple[str, int]:
    """Regroup a money field as it is typed and remap the cursor.

    The cursor is anchored on the number of digits to its left rather than
    on its character offset, since separators appear and disappear as the
    value grows or shrinks.

    >>> format_live_input("1234", 2)
    ('1,234', 3)
    >>> format_live_input("abc", 3)
    ('', 0)
    """
    cursor_position = max(0, min(cursor_position, len(raw_text)))
    digits_before_cursor = sum(char in _DIGITS for char in raw_text[:cursor_position])

    # grouped as text so arbitrarily long input never hits int() limits
    digits = _NON_DIGIT.sub("", raw_text).lstrip("0")
    formatted = _group_digits(digits) if digits else ""

    new_cursor = 0
    digit_count = 0
    for index, char in enumerate(formatted):
        if digit_count >= digits_before_cursor:
            break
        new_cursor = index + 1
        if char != GROUP_SEPARATOR:
            digit_count += 1

    return formatted, new_cursor


__all__ = [
    "GROUP_SEPARATOR",
    "axis_tick_label",
    "format_currency",
    "format_live_input",
    "format_number",
    "parse_formatted_number",
    "parse_leading_int",
]
