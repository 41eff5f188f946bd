"""Shared test fixtures."""
import pytest
from price_formatting.config import Settings
from price_formatting.formatter import PriceFormatter
from price_formatting.models.locale import NumberFormatting


@pytest.fixture
def number_formatting():
    """US style conventions: "1,234.56" and "-1.5"."""
    return NumberFormatting()


@pytest.fixture
def eu_number_formatting():
    """Continental conventions with a trailing sign: "1.234,56" and "1,5-"."""
    return NumberFormatting(decimal_separator=",", group_separator=".", negative_pattern="{0}-")


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def price_formatter(number_formatting, settings):
    return PriceFormatter(number_formatting, settings)
