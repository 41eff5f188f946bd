"""Decimal price rendering: plain, percentage, pips and deci-pips."""
from __future__ import annotations

from decimal import Decimal

import structlog

from ..errors import UnsupportedCombinationError
from ..models.locale import NumberFormatting
from ..models.options import FormatFlags, PriceFormatOption
from ..models.parts import PriceParts
from ..number_formatting.format import format_number, get_actual_decimals
from ..number_formatting.parse import parse_number
from .splitter import get_first_and_pips_parts

logger = structlog.get_logger(__name__)

NO_BREAK_SPACE = "\u00a0"
HALF_GLYPH = "\u00bd"
MAX_EXTENDED_DECIMALS = 8


def get_flag_pip_decimals(flags: FormatFlags) -> int:
    """Number of digits shown after the pips, as requested by the flags alone."""
    if flags.get(PriceFormatOption.ALLOW_TWO_DECIMAL_PIPS):
        return 2
    if flags.get(PriceFormatOption.ALLOW_DECIMAL_PIPS) or flags.get(PriceFormatOption.DECI_PIPS_FRACTION):
        return 1
    return 0


def get_effective_pip_decimals(flags: FormatFlags, decimals: int, actual_decimals: int) -> int:
    """Pip decimals, widened to the value's own decimals under UseExtendedDecimals."""
    flag_pip_decimals = get_flag_pip_decimals(flags)
    if flags.get(PriceFormatOption.USE_EXTENDED_DECIMALS) and flag_pip_decimals > 0:
        return max(flag_pip_decimals, actual_decimals - decimals)
    return flag_pip_decimals


def _split_decimal_pips(
    flags: FormatFlags, base_part: str, deci_pips_part: str, number_formatting: NumberFormatting
) -> tuple[str, str]:
    separator = number_formatting.decimal_separator

    # A separator left dangling on the base always travels with the deci-pips.
    if base_part.endswith(separator):
        return base_part[:-1], separator + deci_pips_part
    if flags.get(PriceFormatOption.DECI_PIPS_DECIMAL_SEPARATOR):
        return base_part, separator + deci_pips_part
    if flags.get(PriceFormatOption.DECI_PIPS_SPACE_SEPARATOR):
        return base_part, NO_BREAK_SPACE + deci_pips_part
    return base_part, deci_pips_part


def _split_half_pips(
    flags: FormatFlags, base_part: str, deci_pips_part: str, number_formatting: NumberFormatting
) -> tuple[str, str]:
    separator = number_formatting.decimal_separator
    is_fractional_part = False

    if base_part.endswith(separator):
        base_part = base_part[:-1]
        is_fractional_part = True

    # "5" is checked before the zero placeholder.
    if deci_pips_part == "5":
        deci_pips_part = HALF_GLYPH
        is_fractional_part = False
    elif flags.get(PriceFormatOption.DECI_PIPS_SPACE_FOR_ZERO) and deci_pips_part == "0":
        deci_pips_part = NO_BREAK_SPACE
        is_fractional_part = False

    if flags.get(PriceFormatOption.DECI_PIPS_SPACE_SEPARATOR):
        deci_pips_part = NO_BREAK_SPACE + deci_pips_part
    elif is_fractional_part:
        deci_pips_part = separator + deci_pips_part

    return base_part, deci_pips_part


def _format_as_pips(
    base_part: str, deci_pips_part: str, decimals: int, number_formatting: NumberFormatting
) -> PriceParts:
    """Re-express the base price as a whole number of pips."""
    pips = parse_number(base_part, number_formatting) * (Decimal(10) ** decimals)
    return PriceParts(
        first="",
        pips=format_number(pips, 0, number_formatting),
        deci_pips=number_formatting.decimal_separator + deci_pips_part if deci_pips_part else "",
    )


def format_decimal_parts(
    value: Decimal,
    decimals: int,
    flags: FormatFlags,
    number_formatting: NumberFormatting,
) -> PriceParts:
    """Render a non-negative *value* in one of the decimal display modes.

    Modes, in order of precedence:
    1. Percentage: value x 100 with a "%" suffix
    2. Plain: NoRounding, or neither pip decimals nor FormatAsPips
    3. FormatAsPips: the whole price as a pip count
    4. AllowDecimalPips / AllowTwoDecimalPips: trailing deci-pip digits
    5. Otherwise (DeciPipsFraction): half-pip glyph or a single deci-pip digit
    """
    if flags.get(PriceFormatOption.PERCENTAGE) and flags.get(PriceFormatOption.NO_ROUNDING):
        logger.warning("price_format_rejected", reason="percentage_with_no_rounding")
        raise UnsupportedCombinationError(PriceFormatOption.PERCENTAGE, PriceFormatOption.NO_ROUNDING)

    actual_decimals = get_actual_decimals(value)

    if flags.get(PriceFormatOption.USE_EXTENDED_DECIMALS) and get_flag_pip_decimals(flags) == 0:
        decimals = min(MAX_EXTENDED_DECIMALS, max(decimals, actual_decimals))

    no_rounding = bool(flags.get(PriceFormatOption.NO_ROUNDING))
    if no_rounding and actual_decimals <= decimals:
        logger.debug("no_rounding_dropped", decimals=decimals, actual_decimals=actual_decimals)
        no_rounding = False

    pip_decimals = get_effective_pip_decimals(flags, decimals, actual_decimals)

    if flags.get(PriceFormatOption.PERCENTAGE):
        return PriceParts(first=format_number(value * 100, decimals, number_formatting) + "%")

    if no_rounding or (not pip_decimals and not flags.get(PriceFormatOption.FORMAT_AS_PIPS)):
        price = format_number(value, actual_decimals if no_rounding else decimals, number_formatting)
        first, pips = get_first_and_pips_parts(price, number_formatting)
        return PriceParts(first=first, pips=pips)

    full_price = format_number(value, decimals + pip_decimals, number_formatting)
    # base_part may end with a decimal separator that the splitters below relocate
    split_at = len(full_price) - pip_decimals
    base_part, deci_pips_part = full_price[:split_at], full_price[split_at:]

    if flags.get(PriceFormatOption.FORMAT_AS_PIPS):
        return _format_as_pips(base_part, deci_pips_part, decimals, number_formatting)

    if flags.get(PriceFormatOption.ALLOW_DECIMAL_PIPS) or flags.get(PriceFormatOption.ALLOW_TWO_DECIMAL_PIPS):
        base_part, deci_pips_part = _split_decimal_pips(flags, base_part, deci_pips_part, number_formatting)
    else:
        base_part, deci_pips_part = _split_half_pips(flags, base_part, deci_pips_part, number_formatting)

    first, pips = get_first_and_pips_parts(base_part, number_formatting)
    return PriceParts(first=first, pips=pips, deci_pips=deci_pips_part)
