"""Test normalisation of price format options into flags."""
import pytest
from price_formatting.errors import InvalidArgumentError
from price_formatting.models.options import PriceFormatOption, to_format_flags


class TestToFormatFlags:
    def test_none_is_normal(self):
        assert to_format_flags(None) == {PriceFormatOption.NORMAL: True}

    def test_empty_is_normal(self):
        assert to_format_flags("") == {PriceFormatOption.NORMAL: True}
        assert to_format_flags([]) == {PriceFormatOption.NORMAL: True}

    def test_single_name(self):
        assert to_format_flags("AllowDecimalPips") == {PriceFormatOption.ALLOW_DECIMAL_PIPS: True}

    def test_single_member(self):
        assert to_format_flags(PriceFormatOption.FRACTIONS) == {PriceFormatOption.FRACTIONS: True}

    def test_comma_separated(self):
        flags = to_format_flags("AllowDecimalPips, DeciPipsSpaceSeparator")
        assert flags == {
            PriceFormatOption.ALLOW_DECIMAL_PIPS: True,
            PriceFormatOption.DECI_PIPS_SPACE_SEPARATOR: True,
        }

    def test_list_of_names_and_members(self):
        flags = to_format_flags(["Fractions", PriceFormatOption.ADJUST_FRACTIONS])
        assert set(flags) == {PriceFormatOption.FRACTIONS, PriceFormatOption.ADJUST_FRACTIONS}

    def test_mapping_drops_false_entries(self):
        flags = to_format_flags({"NoRounding": True, "Percentage": False})
        assert flags == {PriceFormatOption.NO_ROUNDING: True}

    def test_lookup_by_plain_name(self):
        flags = to_format_flags("Fractions")
        assert flags.get("Fractions") is True

    def test_returns_new_dict(self):
        options = {PriceFormatOption.NO_ROUNDING: True}
        flags = to_format_flags(options)
        flags[PriceFormatOption.NO_ROUNDING] = False
        assert options[PriceFormatOption.NO_ROUNDING] is True

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidArgumentError):
            to_format_flags("Bogus")

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            to_format_flags(["Fractions", "Bogus"])
