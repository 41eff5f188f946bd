"""Locale-aware number formatting conventions.

Provides the ``NumberFormatting`` value that the price formatter receives on
every call. It only carries data; the rendering and parsing functions live in
``price_formatting.number_formatting``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from price_formatting.config import Settings

NUMBER_PLACEHOLDER = "{0}"


class NumberFormatting(BaseModel):
    """Separators and sign decoration used to render numbers for one locale."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = ","
    group_sizes: list[int] = Field(default_factory=lambda: [3])
    negative_pattern: str = "-{0}"
    modern_fractions_separator: str = "'"

    @field_validator("negative_pattern")
    @classmethod
    def _check_negative_pattern(cls, value: str) -> str:
        if NUMBER_PLACEHOLDER not in value:
            raise ValueError(f"negative_pattern must contain {NUMBER_PLACEHOLDER!r}, got {value!r}")
        return value

    @property
    def negative_pre(self) -> str:
        """Text placed before a negative number."""
        return self.negative_pattern.split(NUMBER_PLACEHOLDER, 1)[0]

    @property
    def negative_post(self) -> str:
        """Text placed after a negative number."""
        return self.negative_pattern.split(NUMBER_PLACEHOLDER, 1)[1]

    @classmethod
    def from_settings(cls, settings: Settings) -> NumberFormatting:
        return cls(
            decimal_separator=settings.decimal_separator,
            group_separator=settings.group_separator,
            negative_pattern=settings.negative_pattern,
            modern_fractions_separator=settings.modern_fractions_separator,
        )
