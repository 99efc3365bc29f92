from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hannwin.dsp.table import PrecomputedTable  # noqa: E402


def reference_hann(n: int) -> np.ndarray:
    """Plain float64 formula, rounded to float32 like the library output."""
    i = np.arange(n, dtype=np.float64)
    return (0.5 - 0.5 * np.cos(2.0 * np.pi * i / (n - 1))).astype(np.float32)


@pytest.fixture
def fresh_table() -> PrecomputedTable:
    return PrecomputedTable()


@pytest.fixture
def small_table() -> PrecomputedTable:
    return PrecomputedTable(lengths=(8, 16))
