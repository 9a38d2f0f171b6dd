"""RFML errors."""


class RFMLError(Exception):
    """Base exception for RFML errors."""


class ParseError(RFMLError):
    """Raised when an RFML document cannot be parsed.

    Attributes:
        line: 1-based number of the offending line.
        reason: Short human-readable reason.
    """

    def __init__(self, line: int, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"RFML parsing error in line {line}: {reason}")


class ReaderStateError(RFMLError):
    """Raised when a reader is used for more than one parse."""
