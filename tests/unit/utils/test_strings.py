"""Test fixed-width string helpers."""
from price_formatting.utils.strings import multiply, pad_left


class TestPadLeft:
    def test_pads(self):
        assert pad_left("1", 3, "0") == "001"

    def test_already_wide(self):
        assert pad_left("1234", 3, "0") == "1234"


class TestMultiply:
    def test_repeat(self):
        assert multiply("ab", 3) == "ababab"

    def test_non_positive(self):
        assert multiply("x", 0) == ""
        assert multiply("x", -2) == ""
