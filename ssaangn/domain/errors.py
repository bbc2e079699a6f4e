from __future__ import annotations

from typing import Optional


class OutOfRangeError(ValueError):
    """Raised when a scalar or component index falls outside its valid range.

    Attributes:
        value: the offending input (scalar, index or symbol).
        bounds: the half-open ``(low, high)`` range the value had to fall in, if numeric.
    """

    def __init__(self, message: str, value: object = None, bounds: Optional[tuple[int, int]] = None) -> None:
        super().__init__(message)
        self.value = value
        self.bounds = bounds
