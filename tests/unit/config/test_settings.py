"""Test environment driven configuration."""
import pytest
from price_formatting.config import DEFAULT_TEMPLATE, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PRICE_FORMAT_DECIMAL_SEPARATOR", raising=False)
        settings = Settings()
        assert settings.decimal_separator == "."
        assert settings.default_template == DEFAULT_TEMPLATE
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PRICE_FORMAT_DECIMAL_SEPARATOR", ",")
        monkeypatch.setenv("PRICE_FORMAT_GROUP_SEPARATOR", ".")
        settings = Settings()
        assert settings.decimal_separator == ","
        assert settings.group_separator == "."

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_negative_pattern_requires_placeholder(self):
        with pytest.raises(ValueError):
            Settings(negative_pattern="minus")
