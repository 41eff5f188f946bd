"""Parse plain locale-formatted decimal text back to a number."""
from __future__ import annotations

import re
from decimal import Decimal

from ..models.locale import NumberFormatting

_PLAIN_NUMBER = re.compile(r"\d*\.?\d*")


def parse_number(text: str, number_formatting: NumberFormatting) -> Decimal:
    """Parse text produced by ``format_number`` into a ``Decimal``.

    Handles:
    - group separators and whitespace: "1,234.56" -> 1234.56
    - locale decimal separator: "1234,56" with "," -> 1234.56
    - a dangling decimal separator: "1." -> 1
    - the locale negative pattern, or a leading "-"
    """
    if text is None or not text.strip():
        raise ValueError("Empty number string")

    cleaned = text.strip()

    negative = False
    pre = number_formatting.negative_pre.strip()
    post = number_formatting.negative_post.strip()
    if (pre or post) and cleaned.startswith(pre) and cleaned.endswith(post) \
            and len(cleaned) > len(pre) + len(post):
        negative = True
        cleaned = cleaned[len(pre):len(cleaned) - len(post)].strip()
    elif cleaned.startswith("-"):
        negative = True
        cleaned = cleaned[1:].strip()

    if number_formatting.group_separator:
        cleaned = cleaned.replace(number_formatting.group_separator, "")
    cleaned = re.sub(r"\s", "", cleaned)
    cleaned = cleaned.replace(number_formatting.decimal_separator, ".")

    if not _PLAIN_NUMBER.fullmatch(cleaned) or not any(ch.isdigit() for ch in cleaned):
        raise ValueError(f"No numeric content in: {text}")

    result = Decimal(cleaned)
    return -result if negative else result
