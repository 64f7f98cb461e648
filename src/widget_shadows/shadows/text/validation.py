"""Range checks shared by the text state machine."""

from __future__ import annotations


class InvalidRangeError(IndexError):
    """Raised when offsets fall outside ``[0, length]`` or run backwards."""

    def __init__(self, message: str, *, start: int, end: int, length: int) -> None:
        super().__init__(f"{message}: ({start}, {end}) for length {length}")
        self.start = start
        self.end = end
        self.length = length


class UnsupportedArgumentError(ValueError):
    """Raised for argument values a shadow deliberately does not model."""


def ensure_range(start: int, end: int, length: int, *, what: str = "range") -> None:
    if start < 0 or end > length:
        raise InvalidRangeError(f"{what} out of bounds", start=start, end=end, length=length)
    if start > end:
        raise InvalidRangeError(f"{what} runs backwards", start=start, end=end, length=length)


__all__ = ["InvalidRangeError", "UnsupportedArgumentError", "ensure_range"]
