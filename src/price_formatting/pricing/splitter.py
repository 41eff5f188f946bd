"""Split formatted price text into the big "First" block and the trailing pips."""
from __future__ import annotations

from ..models.locale import NumberFormatting

PIPS_SIZE = 2


def get_first_and_pips_parts(price: str, number_formatting: NumberFormatting) -> tuple[str, str]:
    """Return ``(first, pips)`` for already formatted price text.

    The last two characters become the pips unless the text is too short to
    split; a decimal separator caught in those two characters pulls in one
    more so it stays with a digit.

        "1.2345" -> ("1.23", "45")
        "1.2"    -> ("1.2", "")
        "123"    -> ("1", "23")
        "12.3"   -> ("1", "2.3")
    """
    separator = number_formatting.decimal_separator
    min_size = 3 if separator in price else 2

    if len(price) <= min_size:
        return price, ""

    size = PIPS_SIZE
    if separator in price[len(price) - size:]:
        size += 1
    return price[:len(price) - size], price[len(price) - size:]
