"""End-to-end check of the format_price command line script."""
import importlib.util
import json
from pathlib import Path

import pytest
import structlog

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "format_price.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("format_price_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module
    # main() configures structlog against the captured stdout
    structlog.reset_defaults()


class TestFormatPriceScript:
    def test_prints_text_and_parts(self, script, capsys):
        assert script.main(["1.2345", "4"]) == 0
        out = capsys.readouterr().out
        text, _, payload = out.partition("\n")
        assert text == "1.2345"
        assert json.loads(payload)["Pips"] == "45"

    def test_options_and_numerator_decimals(self, script, capsys):
        assert script.main(["101.5", "5", "ModernFractions", "0"]) == 0
        assert capsys.readouterr().out.startswith("101'16\n")

    def test_usage(self, script, capsys):
        assert script.main(["1.5"]) == 1
        assert "Usage" in capsys.readouterr().out

    def test_invalid_decimals(self, script, capsys):
        assert script.main(["1.5", "-1"]) == 1
        assert "Error:" in capsys.readouterr().out
