"""Test parsing of locale formatted decimal text."""
import pytest
from decimal import Decimal
from price_formatting.models.locale import NumberFormatting
from price_formatting.number_formatting.parse import parse_number


class TestParseNumber:
    def test_grouped(self, number_formatting):
        assert parse_number("1,234.56", number_formatting) == Decimal("1234.56")

    def test_dangling_separator(self, number_formatting):
        assert parse_number("1.", number_formatting) == Decimal(1)

    def test_leading_minus(self, number_formatting):
        assert parse_number("-12.5", number_formatting) == Decimal("-12.5")

    def test_eu_format(self, eu_number_formatting):
        assert parse_number("1.234,56", eu_number_formatting) == Decimal("1234.56")

    def test_eu_trailing_sign(self, eu_number_formatting):
        assert parse_number("1,5-", eu_number_formatting) == Decimal("-1.5")

    def test_parenthesised_negative(self):
        nf = NumberFormatting(negative_pattern="({0})")
        assert parse_number("(12.5)", nf) == Decimal("-12.5")

    def test_empty_raises(self, number_formatting):
        with pytest.raises(ValueError):
            parse_number("", number_formatting)

    def test_no_numeric_raises(self, number_formatting):
        with pytest.raises(ValueError):
            parse_number("abc", number_formatting)

    def test_separator_only_raises(self, number_formatting):
        with pytest.raises(ValueError):
            parse_number(".", number_formatting)
