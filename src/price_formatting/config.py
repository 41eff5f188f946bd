"""Application configuration via environment variables with PRICE_FORMAT_ prefix."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE = "{Pre}{First}{Pips}<small>{DeciPips}</small>{Post}"


class Settings(BaseSettings):
    """Price formatting configuration.

    All settings are read from environment variables prefixed with
    ``PRICE_FORMAT_``. The number settings seed the default
    ``NumberFormatting`` used when a caller does not inject one.
    """

    model_config = SettingsConfigDict(env_prefix="PRICE_FORMAT_")

    # ── Number conventions ─────────────────────────────────────────────────
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = ","
    negative_pattern: str = "-{0}"
    modern_fractions_separator: str = "'"

    # ── Output ─────────────────────────────────────────────────────────────
    default_template: str = DEFAULT_TEMPLATE

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator("negative_pattern")
    @classmethod
    def _check_negative_pattern(cls, value: str) -> str:
        if "{0}" not in value:
            raise ValueError(f"negative_pattern must contain '{{0}}', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        return value.upper()
