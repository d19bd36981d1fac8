"""
Error classes cho frequency counting pipeline.

- FrequencyError: Base error
- InvalidThreadCount: thread count < 1 hoac khong phai int
- UnsupportedCaseFold: lowercase cua 1 ky tu ra nhieu ky tu (INSENSITIVE + REJECT)
"""

from typing import Any


class FrequencyError(Exception):
    """Base error cho frequency operations."""

    pass


class InvalidThreadCount(FrequencyError, ValueError):
    """Thread count khong hop le (phai la int >= 1)."""

    def __init__(self, threads: Any):
        self.threads = threads
        super().__init__(f"Thread count must be a positive integer, got {threads!r}")


class UnsupportedCaseFold(FrequencyError):
    """
    Full Unicode lowercase cua mot ky tu khong phai la mot ky tu duy nhat.

    Attributes:
        char: Ky tu goc
        lowered: Ket qua str.lower() (nhieu hon 1 ky tu)
    """

    def __init__(self, char: str, lowered: str):
        self.char = char
        self.lowered = lowered
        super().__init__(
            f"Lowercase of {char!r} (U+{ord(char):04X}) expands to "
            f"{len(lowered)} characters: {lowered!r}"
        )
