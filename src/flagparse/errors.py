"""
errors – Exceptions raised by flagparse.

The extractor is total over text input; the only failure it reports is a
caller handing it something that is not a ``str``.
"""


class FlagParseError(Exception):
    """Base class for flagparse errors."""


class FlagInputError(FlagParseError, TypeError):
    """Raised when the raw input is not a ``str``."""

    def __init__(self, value: object) -> None:
        self.received_type = type(value).__name__
        super().__init__(f"expected str input, got {self.received_type}")
