"""
hannwin - Hann window coefficients with a precomputed cache

Symmetric Hann windows and their sum of squares for windowing before FFT
analysis. Common lengths are served from a lazily built table.
"""
import logging

from hannwin.version import __version__
from hannwin.config import MAX_WINDOW_LENGTH, PRECOMPUTED_LENGTHS
from hannwin.types import ErrorKind, PrecomputedEntry
from hannwin.errors import (
    AllocationFailure,
    HannWindowError,
    InvalidLength,
    LengthTooLarge,
)
from hannwin.dsp import (
    PrecomputedTable,
    default_table,
    get_hann_window,
    get_hann_window_sum_squares,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "MAX_WINDOW_LENGTH",
    "PRECOMPUTED_LENGTHS",
    "ErrorKind",
    "PrecomputedEntry",
    "AllocationFailure",
    "HannWindowError",
    "InvalidLength",
    "LengthTooLarge",
    "PrecomputedTable",
    "default_table",
    "get_hann_window",
    "get_hann_window_sum_squares",
]
