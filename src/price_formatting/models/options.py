"""Price format options and their normalisation into a flag record.

A caller may name options as a single string, a comma separated string, an
iterable of names, or a mapping of name to bool. ``to_format_flags`` turns
all of these into a fresh ``FormatFlags`` dict keyed by ``PriceFormatOption``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Union

from price_formatting.errors import InvalidArgumentError


class PriceFormatOption(StrEnum):
    NORMAL = "Normal"
    PERCENTAGE = "Percentage"
    FRACTIONS = "Fractions"
    MODERN_FRACTIONS = "ModernFractions"
    ALLOW_DECIMAL_PIPS = "AllowDecimalPips"
    ALLOW_TWO_DECIMAL_PIPS = "AllowTwoDecimalPips"
    DECI_PIPS_SPACE_FOR_ZERO = "DeciPipsSpaceForZero"
    DECI_PIPS_SPACE_SEPARATOR = "DeciPipsSpaceSeparator"
    DECI_PIPS_DECIMAL_SEPARATOR = "DeciPipsDecimalSeparator"
    DECI_PIPS_FRACTION = "DeciPipsFraction"
    FORMAT_AS_PIPS = "FormatAsPips"
    INCLUDE_ZERO_FRACTIONS = "IncludeZeroFractions"
    ADJUST_FRACTIONS = "AdjustFractions"
    NO_ROUNDING = "NoRounding"
    USE_EXTENDED_DECIMALS = "UseExtendedDecimals"


FormatFlags = dict[PriceFormatOption, bool]

FormatOptions = Union[
    str,
    PriceFormatOption,
    Iterable[Union[str, PriceFormatOption]],
    Mapping[Union[str, PriceFormatOption], bool],
    None,
]


def _to_option(name: str | PriceFormatOption) -> PriceFormatOption:
    if isinstance(name, PriceFormatOption):
        return name
    try:
        return PriceFormatOption(str(name).strip())
    except ValueError:
        raise InvalidArgumentError(f"Unknown price format option: {name!r}") from None


def to_format_flags(options: FormatOptions = None) -> FormatFlags:
    """Normalise caller supplied options into a new flag record.

    Absent or empty options give ``{Normal: True}``. Mapping entries with a
    falsy value are dropped, so the result only ever holds ``True`` values.
    """
    if not options:
        return {PriceFormatOption.NORMAL: True}

    if isinstance(options, Mapping):
        return {_to_option(name): True for name, enabled in options.items() if enabled}

    if isinstance(options, str):
        names: Iterable = [part for part in options.split(",") if part.strip()]
    else:
        names = options

    return {_to_option(name): True for name in names}
