"""Direct (uncached) Hann window computations."""
from __future__ import annotations

import numbers

import numpy as np

from hannwin.config import ACCUMULATOR_DTYPE, MAX_WINDOW_LENGTH, WINDOW_DTYPE
from hannwin.errors import AllocationFailure, InvalidLength, LengthTooLarge


def validate_window_length(length) -> int:
    """Check a requested window length and return it as a plain int."""
    if isinstance(length, bool) or not isinstance(length, numbers.Integral):
        raise TypeError(
            f"Window length must be an integer, got {type(length).__name__}."
        )
    n = int(length)
    if n <= 1:
        raise InvalidLength("Window length must be greater than 1.", length=n)
    if n > MAX_WINDOW_LENGTH:
        raise LengthTooLarge(
            f"Window length {n} exceeds the maximum of {MAX_WINDOW_LENGTH}.",
            length=n,
        )
    return n


def _allocate(length: int) -> np.ndarray:
    return np.empty(length, dtype=WINDOW_DTYPE)


def calculate_hann_window(length: int) -> np.ndarray:
    """
    Compute a symmetric Hann window without consulting the cache.

    w[n] = 0.5 - 0.5 * cos(2*pi*n / (N - 1))

    The cosine argument is evaluated in float64 and rounded to float32 on
    store. Only the first half is evaluated; the second half is its mirror.

    Args:
        length: Window length N (2 <= N <= MAX_WINDOW_LENGTH)

    Returns:
        float32 array of N window values

    Raises:
        InvalidLength: N <= 1
        LengthTooLarge: N > MAX_WINDOW_LENGTH
        AllocationFailure: the output array could not be allocated
    """
    n = validate_window_length(length)
    half = (n + n % 2) // 2
    scale = 2.0 * np.pi / (n - 1)
    try:
        window = _allocate(n)
        idx = np.arange(half, dtype=np.float64)
        window[:half] = 0.5 - 0.5 * np.cos(idx * scale)
        window[n - half:] = window[:half][::-1]
    except MemoryError as exc:
        raise AllocationFailure(
            f"Could not allocate memory for a window of length {n}.", length=n
        ) from exc
    return window


def sum_of_squares(window) -> float:
    """Sum of squared window values, accumulated in float64."""
    w = np.asarray(window, dtype=ACCUMULATOR_DTYPE)
    if w.ndim != 1:
        raise ValueError("sum_of_squares expects a 1D window.")
    if w.size == 0:
        return 0.0
    return float(np.dot(w, w))
