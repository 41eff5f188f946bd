#!/usr/bin/env python3
"""Format a single price from the command line and print its parts."""
import json
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from price_formatting.config import Settings
from price_formatting.formatter import PriceFormatter
from price_formatting.utils.logging import setup_logging

USAGE = "Usage: python scripts/format_price.py <value> <decimals> [options] [numerator_decimals]"


def main(argv: list[str]) -> int:
    """Format ``argv[0]`` with ``argv[1]`` decimals; options are comma separated."""
    if len(argv) < 2:
        print(USAGE)
        return 1

    settings = Settings()
    setup_logging(settings.log_level)
    formatter = PriceFormatter.from_settings(settings)

    try:
        decimals = int(argv[1])
        options = argv[2] if len(argv) > 2 else None
        numerator_decimals = int(argv[3]) if len(argv) > 3 else None
        parts = formatter.format_parts(argv[0], decimals, options, numerator_decimals)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(parts.text)
    print(json.dumps(parts.model_dump(by_alias=True), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
