"""Price formatting entry point: validate, normalise options, dispatch, apply sign."""
from __future__ import annotations

from decimal import Decimal

import structlog

from ..errors import InvalidArgumentError
from ..models.locale import NumberFormatting
from ..models.options import FormatOptions, PriceFormatOption, to_format_flags
from ..models.parts import PriceParts
from ..number_formatting.format import Number, to_decimal
from .decimals import HALF_GLYPH, format_decimal_parts
from .fractions import format_fraction_parts

logger = structlog.get_logger(__name__)


def _check_count(name: str, count: int | float) -> int:
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        logger.warning("price_format_rejected", reason=f"{name}_not_a_number", value=repr(count))
        raise InvalidArgumentError(f"{name} must be a whole number, got {count!r}")
    if isinstance(count, float):
        if not count.is_integer():
            logger.warning("price_format_rejected", reason=f"{name}_not_integral", value=count)
            raise InvalidArgumentError(f"{name} must be a whole number, got {count!r}")
        count = int(count)
    return count


def _to_number(value: Number | None) -> Decimal | None:
    """Return *value* as a finite ``Decimal``, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = to_decimal(value)
    except ValueError:
        return None
    if not number.is_finite():
        return None
    return number


def _renders_zero(parts: PriceParts) -> bool:
    """True when the rendered price reads as zero, so a sign would show "-0"."""
    if parts.first == "0" and not parts.pips and not parts.deci_pips:
        return True
    rendered = parts.first + parts.pips + parts.deci_pips
    digits = [ch for ch in rendered if ch.isdigit()]
    return bool(digits) and all(ch == "0" for ch in digits) and HALF_GLYPH not in rendered


def format_price(
    number_formatting: NumberFormatting,
    value: Number | None,
    decimals: int,
    format_options: FormatOptions = None,
    numerator_decimals: int | None = None,
) -> PriceParts:
    """Format a price into independently styled parts.

    Args:
        number_formatting: Separators and sign tokens of the target locale.
        value: The price. ``None``, empty text, non-numeric text, NaN and
            infinities give empty parts rather than an error.
        decimals: Display precision. For Fractions/ModernFractions this is
            the power of two of the denominator (5 -> 32nds).
        format_options: A single option name, a comma separated string, an
            iterable of names, or a mapping of name to bool.
        numerator_decimals: Decimals of the numerator for fractional quotes.

    Returns:
        PriceParts with every slot populated (possibly with "").

    Raises:
        InvalidArgumentError: decimals missing, non-integral or negative;
            unknown option names; negative numerator_decimals.
        UnsupportedCombinationError: Percentage combined with NoRounding.
    """
    flags = to_format_flags(format_options)

    if decimals is None:
        logger.warning("price_format_rejected", reason="decimals_missing")
        raise InvalidArgumentError("Decimals are required in price formatting functions")
    decimals = _check_count("decimals", decimals)
    if decimals < 0:
        logger.warning("price_format_rejected", reason="negative_decimals", decimals=decimals)
        raise InvalidArgumentError(
            "Negative decimals are not supported; fractional prices use positive decimals "
            "with the Fractions or ModernFractions option"
        )

    if numerator_decimals is not None:
        numerator_decimals = _check_count("numerator_decimals", numerator_decimals)
        if numerator_decimals < 0:
            logger.warning("price_format_rejected", reason="negative_numerator_decimals",
                           numerator_decimals=numerator_decimals)
            raise InvalidArgumentError(f"numerator_decimals must not be negative, got {numerator_decimals}")

    number = _to_number(value)
    if number is None:
        return PriceParts()

    is_negative = number < 0
    number = abs(number)

    if flags.get(PriceFormatOption.MODERN_FRACTIONS) or flags.get(PriceFormatOption.FRACTIONS):
        parts = format_fraction_parts(number, decimals, flags, number_formatting, numerator_decimals)
    else:
        parts = format_decimal_parts(number, decimals, flags, number_formatting)

    # A negative value that rounds to zero is shown unsigned.
    if is_negative and not _renders_zero(parts):
        parts = parts.model_copy(update={
            "pre": number_formatting.negative_pre,
            "post": number_formatting.negative_post,
        })
    return parts
