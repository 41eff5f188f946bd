"""Price formatter bound to one locale's number conventions."""
from __future__ import annotations

import re

from .config import Settings
from .errors import InvalidArgumentError
from .models.locale import NumberFormatting
from .models.options import FormatOptions
from .models.parts import PriceParts
from .number_formatting.format import Number
from .pricing.format import format_price

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class PriceFormatter:
    """Formats prices with a fixed ``NumberFormatting``.

    ``format_parts`` returns the structured parts, ``format`` the joined text,
    and ``format_templated`` fills a markup template with the parts, e.g.
    ``"{Pre}{First}<b>{Pips}</b>{DeciPips}{Post}"``.
    """

    def __init__(self, number_formatting: NumberFormatting | None = None, settings: Settings | None = None):
        self._settings = settings or Settings()
        self._number_formatting = number_formatting or NumberFormatting.from_settings(self._settings)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> PriceFormatter:
        settings = settings or Settings()
        return cls(NumberFormatting.from_settings(settings), settings)

    @property
    def number_formatting(self) -> NumberFormatting:
        return self._number_formatting

    def format_parts(
        self,
        value: Number | None,
        decimals: int,
        options: FormatOptions = None,
        numerator_decimals: int | None = None,
    ) -> PriceParts:
        return format_price(self._number_formatting, value, decimals, options, numerator_decimals)

    def format(
        self,
        value: Number | None,
        decimals: int,
        options: FormatOptions = None,
        numerator_decimals: int | None = None,
    ) -> str:
        """Return the price as a single string."""
        return self.format_parts(value, decimals, options, numerator_decimals).text

    def format_templated(
        self,
        value: Number | None,
        decimals: int,
        options: FormatOptions = None,
        numerator_decimals: int | None = None,
        template: str | None = None,
    ) -> str:
        """Substitute ``{Pre}``, ``{First}``, ``{Pips}``, ``{DeciPips}`` and ``{Post}`` in *template*.

        Other text in the template, braces included, is left untouched.
        """
        template = template if template is not None else self._settings.default_template
        parts = self.format_parts(value, decimals, options, numerator_decimals).model_dump(by_alias=True)

        def _replace(match: re.Match) -> str:
            key = match.group(1)
            if key not in parts:
                raise InvalidArgumentError(f"Unknown price template placeholder: {{{key}}}")
            return parts[key]

        return _PLACEHOLDER.sub(_replace, template)
