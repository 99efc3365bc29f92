"""Exceptions raised while generating Hann windows."""
from __future__ import annotations

from hannwin.types import ErrorKind


class HannWindowError(Exception):
    """Base class for window generation failures."""

    kind: ErrorKind

    def __init__(self, message: str, *, length: int | None = None) -> None:
        super().__init__(message)
        self.length = length


class InvalidLength(HannWindowError, ValueError):
    """Window length is at most 1, so N - 1 is not a usable denominator."""

    kind = ErrorKind.INVALID_LENGTH


class LengthTooLarge(HannWindowError, ValueError):
    """Window length exceeds MAX_WINDOW_LENGTH."""

    kind = ErrorKind.LENGTH_TOO_LARGE


class AllocationFailure(HannWindowError, MemoryError):
    """Memory for the window could not be allocated."""

    kind = ErrorKind.ALLOCATION_FAILURE
