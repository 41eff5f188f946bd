"""Fractional price rendering for bond and futures style quotes.

Prices are shown as an integer plus a power-of-two fraction:

- legacy fractions: ``101 16/32`` with optional column alignment
- modern fractions: ``101'16`` with a zero padded numerator
"""
from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

import structlog

from ..models.locale import NumberFormatting
from ..models.options import FormatFlags, PriceFormatOption
from ..models.parts import PriceParts
from ..number_formatting.format import format_number, get_actual_decimals
from ..utils.strings import multiply, pad_left
from .decimals import NO_BREAK_SPACE

logger = structlog.get_logger(__name__)

# Inclusive decimals band per quoting style; decimals map to a 2**n denominator.
FRACTION_DECIMALS_RANGE = (0, 8)
MODERN_FRACTION_DECIMALS_RANGE = (5, 7)
MAX_DENOMINATOR_POWER = 8


def get_modern_fractions_separator(number_formatting: NumberFormatting) -> str:
    """Glyph placed between the integer and the numerator of a modern fraction."""
    return number_formatting.modern_fractions_separator or "'"


def get_modern_fraction_pad_size(numerator_decimals: int) -> int:
    """Width of a modern fraction numerator: two digits, plus separator and decimals."""
    if numerator_decimals == 0:
        return 2
    return numerator_decimals + 3


def format_fraction_parts(
    value: Decimal,
    decimals: int,
    flags: FormatFlags,
    number_formatting: NumberFormatting,
    numerator_decimals: int | None = None,
) -> PriceParts:
    """Render a non-negative *value* as an integer plus a ``2**decimals`` fraction.

    Without NoRounding the numerator is rounded half up to a resolution of
    ``2**numerator_decimals``. A numerator that rounds up to the denominator
    carries into the integer part.
    """
    modern = bool(flags.get(PriceFormatOption.MODERN_FRACTIONS))
    min_decimals, max_decimals = MODERN_FRACTION_DECIMALS_RANGE if modern else FRACTION_DECIMALS_RANGE
    decimals = max(min_decimals, min(max_decimals, decimals))
    denominator = 1 << min(MAX_DENOMINATOR_POWER, decimals)

    integer_part = int(value.to_integral_value(rounding=ROUND_FLOOR))
    numerator = (value - integer_part) * denominator

    numerator_decimals = numerator_decimals or 0
    if flags.get(PriceFormatOption.NO_ROUNDING):
        numerator_decimals = max(get_actual_decimals(numerator), numerator_decimals)
    else:
        resolution = 1 << numerator_decimals
        numerator = (numerator * resolution).to_integral_value(rounding=ROUND_HALF_UP) / resolution

    if numerator >= denominator:
        logger.debug("fraction_carry", integer_part=integer_part, denominator=denominator)
        numerator = Decimal(0)
        integer_part += 1

    numerator_text = format_number(numerator, numerator_decimals, number_formatting)
    denominator_text = format_number(denominator, 0, number_formatting)
    first = format_number(integer_part, 0, number_formatting)

    if modern:
        separator = get_modern_fractions_separator(number_formatting)
        pad_size = get_modern_fraction_pad_size(numerator_decimals)
        fraction_text = separator + pad_left(numerator_text, pad_size, "0")
    elif numerator == 0 and not flags.get(PriceFormatOption.INCLUDE_ZERO_FRACTIONS):
        fraction_text = ""
        if flags.get(PriceFormatOption.ADJUST_FRACTIONS):
            # space + numerator width + slash + denominator width
            fraction_text = multiply(NO_BREAK_SPACE, 1 + 2 * len(denominator_text) + 1)
    else:
        if flags.get(PriceFormatOption.ADJUST_FRACTIONS):
            numerator_text = pad_left(numerator_text, len(denominator_text), NO_BREAK_SPACE)
        fraction_text = NO_BREAK_SPACE + numerator_text + "/" + denominator_text

    return PriceParts(first=first, pips=fraction_text, deci_pips="")
