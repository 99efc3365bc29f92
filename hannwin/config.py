"""Fixed parameters for Hann window generation and caching."""
from __future__ import annotations

import numpy as np


# Lengths served from the precomputed table
PRECOMPUTED_LENGTHS: tuple[int, ...] = (256, 512, 1024, 2048, 4096)

# Largest window that will be generated (16 Mi samples, 64 MiB as float32)
MAX_WINDOW_LENGTH = 1 << 24

WINDOW_DTYPE = np.float32
ACCUMULATOR_DTYPE = np.float64
