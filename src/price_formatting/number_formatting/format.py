"""Locale-aware fixed-decimal number rendering.

All rendering goes through ``Decimal`` built from the shortest repr of the
input, so values such as ``1.005`` round the way they read rather than the way
their binary float approximation would.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ..models.locale import NUMBER_PLACEHOLDER, NumberFormatting

Number = int | float | str | Decimal


def to_decimal(value: Number) -> Decimal:
    """Convert a number or numeric text to ``Decimal``.

    Raises ValueError for text that is not a plain number and for bools.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}") from None
    raise ValueError(f"Not a number: {value!r}")


def get_actual_decimals(value: Number) -> int:
    """Return the number of meaningful fractional digits of *value*.

    ``1.5 -> 1``, ``1.50 -> 1``, ``100 -> 0``, ``1e-7 -> 7``.
    """
    number = to_decimal(value)
    if not number.is_finite():
        return 0
    exponent = abs(number).normalize().as_tuple().exponent
    return max(0, -exponent)


def _group_digits(digits: str, separator: str, sizes: list[int]) -> str:
    """Insert *separator* between digit groups counted from the right.

    The last entry of *sizes* repeats; a size of 0 stops grouping.
    """
    if not separator or not sizes or sizes[0] <= 0:
        return digits

    groups: list[str] = []
    end = len(digits)
    index = 0
    while end > 0:
        size = sizes[min(index, len(sizes) - 1)]
        if size <= 0:
            groups.append(digits[:end])
            break
        groups.append(digits[max(0, end - size):end])
        end -= size
        index += 1
    return separator.join(reversed(groups))


def format_number(value: Number, decimals: int | None, number_formatting: NumberFormatting) -> str:
    """Render *value* with exactly *decimals* fractional digits.

    Rounds half away from zero. ``decimals=None`` keeps the actual decimals
    of the value. Negative values that do not round to zero are wrapped in
    the locale's negative pattern.
    """
    number = to_decimal(value)
    if not number.is_finite():
        raise ValueError(f"Cannot format non-finite number: {value!r}")
    if decimals is None:
        decimals = get_actual_decimals(number)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        rounded = abs(number).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    integer_digits, _, fraction_digits = f"{rounded:f}".partition(".")
    text = _group_digits(integer_digits, number_formatting.group_separator, number_formatting.group_sizes)
    if fraction_digits:
        text += number_formatting.decimal_separator + fraction_digits

    if number < 0 and rounded != 0:
        text = number_formatting.negative_pattern.replace(NUMBER_PLACEHOLDER, text)
    return text


def format_number_no_rounding(
    value: Number,
    number_formatting: NumberFormatting,
    min_decimals: int = 0,
    max_decimals: int | None = None,
) -> str:
    """Render *value* with its own decimals, clamped to the given band."""
    decimals = max(min_decimals, get_actual_decimals(value))
    if max_decimals is not None:
        decimals = min(decimals, max_decimals)
    return format_number(value, decimals, number_formatting)
