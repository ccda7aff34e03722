"""Exception raised when a bounded game value is built out of range."""

from __future__ import annotations


class RangeError(ValueError):
    """A position, die value or grid coordinate outside its legal range."""

    def __init__(self, what: str, value: int, low: int, high: int):
        self.what = what
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{what} must be in [{low}, {high}], got {value!r}")
