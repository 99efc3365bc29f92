"""Hann window and sum-of-squares lookups backed by the precomputed table."""
from __future__ import annotations

import numpy as np

from hannwin.config import ACCUMULATOR_DTYPE
from hannwin.dsp.table import PrecomputedTable, default_table
from hannwin.dsp.windowing import (
    calculate_hann_window,
    sum_of_squares,
    validate_window_length,
)


def get_hann_window(
    length: int,
    *,
    table: PrecomputedTable | None = None
) -> np.ndarray:
    """
    Return an N-point symmetric Hann window as a float32 array.

    Precomputed lengths are copied out of the table, so the caller may modify
    the result freely. Other lengths are computed with calculate_hann_window.

    Args:
        length: Window length N (2 <= N <= MAX_WINDOW_LENGTH)
        table: Table to consult (the process default when None)

    Returns:
        float32 array of N window values

    Raises:
        TypeError: length is not an integer
        InvalidLength: N <= 1
        LengthTooLarge: N > MAX_WINDOW_LENGTH
        AllocationFailure: the output array could not be allocated
    """
    n = validate_window_length(length)
    tbl = table if table is not None else default_table()
    cached = tbl.window(n)
    if cached is None:
        return calculate_hann_window(n)
    return cached.copy()


def get_hann_window_sum_squares(
    window,
    *,
    table: PrecomputedTable | None = None,
    verify: bool = False
) -> float:
    """
    Return the sum of squared window values.

    When len(window) is a precomputed length the cached value is returned
    without looking at the window contents. That is only correct for the
    reference Hann window of that length; pass verify=True to compare the
    contents first and sum directly on a mismatch.

    Args:
        window: 1D sequence of window values (an empty window gives 0.0)
        table: Table to consult (the process default when None)
        verify: Check the contents against the cached window

    Returns:
        Sum of squares as a float

    Raises:
        ValueError: window is not one-dimensional
    """
    if isinstance(window, np.ndarray):
        w = window
    else:
        w = np.asarray(window, dtype=ACCUMULATOR_DTYPE)
    if w.ndim != 1:
        raise ValueError("get_hann_window_sum_squares expects a 1D window.")
    tbl = table if table is not None else default_table()
    entry = tbl.get(w.shape[0])
    if entry is None:
        return sum_of_squares(w)
    if verify and not np.array_equal(w, entry.window):
        return sum_of_squares(w)
    return entry.sum_of_squares
