"""
pwforge.errors
Errors raised by the password engine. All of them are ValueErrors, so callers
that only care about "bad input" can catch that.
"""

from typing import Optional


class PasswordEngineError(ValueError):
    """Base class for recoverable engine errors."""


class EmptySelectionError(PasswordEngineError):
    def __init__(self, message: str = "Please select at least one character set."):
        super().__init__(message)


class InvalidLengthError(PasswordEngineError):
    """
    Requested length is outside the accepted range.

    `bound` is "minimum" or "maximum" for an out-of-range integer, None when
    the value was not an integer at all.
    """

    def __init__(self, length, minimum: int, maximum: int, bound: Optional[str] = None):
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
        self.bound = bound
        if bound == "minimum":
            detail = f"below the minimum of {minimum}"
        elif bound == "maximum":
            detail = f"above the maximum of {maximum}"
        else:
            detail = "not an integer"
        super().__init__(
            f"Invalid length {length!r}: {detail} (enter a length between {minimum} and {maximum})"
        )
