from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import numpy as np

class ErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    LENGTH_TOO_LARGE = "length_too_large"
    ALLOCATION_FAILURE = "allocation_failure"

@dataclass(frozen=True)
class PrecomputedEntry:
    length: int
    window: np.ndarray
    sum_of_squares: float
