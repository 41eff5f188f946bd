"""Test NumberFormatting conventions."""
import pytest
from price_formatting.config import Settings
from price_formatting.models.locale import NumberFormatting


class TestNumberFormatting:
    def test_defaults(self):
        nf = NumberFormatting()
        assert nf.decimal_separator == "."
        assert nf.group_separator == ","
        assert nf.negative_pre == "-"
        assert nf.negative_post == ""

    def test_trailing_sign(self):
        nf = NumberFormatting(negative_pattern="{0}-")
        assert nf.negative_pre == ""
        assert nf.negative_post == "-"

    def test_parenthesised_sign(self):
        nf = NumberFormatting(negative_pattern="({0})")
        assert (nf.negative_pre, nf.negative_post) == ("(", ")")

    def test_pattern_without_placeholder_rejected(self):
        with pytest.raises(ValueError):
            NumberFormatting(negative_pattern="-")

    def test_multi_char_decimal_separator_rejected(self):
        with pytest.raises(ValueError):
            NumberFormatting(decimal_separator="..")

    def test_frozen(self):
        nf = NumberFormatting()
        with pytest.raises(Exception):
            nf.decimal_separator = ","

    def test_from_settings(self):
        settings = Settings(decimal_separator=",", group_separator=".", negative_pattern="{0}-",
                            modern_fractions_separator="-")
        nf = NumberFormatting.from_settings(settings)
        assert nf.decimal_separator == ","
        assert nf.group_separator == "."
        assert nf.negative_post == "-"
        assert nf.modern_fractions_separator == "-"
