"""Exception types raised by the price formatter.

Both subclass ``ValueError`` so callers that already guard against bad input
with ``except ValueError`` keep working.
"""

__all__ = [
    "InvalidArgumentError",
    "UnsupportedCombinationError",
]


class InvalidArgumentError(ValueError):
    """Raised when an argument is missing, of the wrong kind, or out of range."""
    pass


class UnsupportedCombinationError(ValueError):
    """Raised when two format options cannot be honoured together."""

    def __init__(self, *options: str):
        super().__init__(f"Format options cannot be combined: {', '.join(options)}")
        self.options = options
