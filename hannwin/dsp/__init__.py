"""DSP modules for hannwin."""

from hannwin.dsp.hann import get_hann_window, get_hann_window_sum_squares
from hannwin.dsp.table import PrecomputedTable, default_table
from hannwin.dsp.windowing import calculate_hann_window, sum_of_squares

__all__ = [
    "get_hann_window",
    "get_hann_window_sum_squares",
    "PrecomputedTable",
    "default_table",
    "calculate_hann_window",
    "sum_of_squares",
]
