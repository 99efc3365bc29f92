"""Lazily built table of precomputed Hann windows."""
from __future__ import annotations

import threading
from typing import Iterable

import numpy as np

from hannwin.config import PRECOMPUTED_LENGTHS
from hannwin.dsp.windowing import (
    calculate_hann_window,
    sum_of_squares,
    validate_window_length,
)
from hannwin.logging_config import get_logger
from hannwin.types import PrecomputedEntry

logger = get_logger(__name__)


class PrecomputedTable:
    """
    Read-only mapping from window length to (window, sum of squares).

    Nothing is computed at construction. The first lookup of a member length
    builds every entry exactly once, even when several threads race on it;
    later lookups read the published mapping without locking.
    """

    def __init__(self, lengths: Iterable[int] = PRECOMPUTED_LENGTHS) -> None:
        checked = {validate_window_length(length) for length in lengths}
        self._lengths = tuple(sorted(checked))
        self._members = frozenset(self._lengths)
        self._lock = threading.Lock()
        self._entries: dict[int, PrecomputedEntry] | None = None
        self._build_count = 0

    @property
    def lengths(self) -> tuple[int, ...]:
        return self._lengths

    @property
    def is_initialized(self) -> bool:
        return self._entries is not None

    @property
    def build_count(self) -> int:
        """Number of times the entries were computed (0 or 1)."""
        return self._build_count

    def __contains__(self, length) -> bool:
        return length in self._members

    def __len__(self) -> int:
        return len(self._lengths)

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized else "pending"
        return f"PrecomputedTable(lengths={self._lengths!r}, {state})"

    def initialize(self) -> PrecomputedTable:
        """Build the entries now instead of on first lookup."""
        self._ensure_entries()
        return self

    def get(self, length: int) -> PrecomputedEntry | None:
        """Entry for length, or None when length is not precomputed."""
        if length not in self._members:
            return None
        return self._ensure_entries()[int(length)]

    def window(self, length: int) -> np.ndarray | None:
        """Read-only cached window for length (not a copy)."""
        entry = self.get(length)
        return None if entry is None else entry.window

    def sum_of_squares(self, length: int) -> float | None:
        entry = self.get(length)
        return None if entry is None else entry.sum_of_squares

    def _ensure_entries(self) -> dict[int, PrecomputedEntry]:
        entries = self._entries
        if entries is not None:
            return entries
        with self._lock:
            if self._entries is None:
                self._entries = self._build()
                self._build_count += 1
            return self._entries

    def _build(self) -> dict[int, PrecomputedEntry]:
        logger.debug("Precomputing Hann windows for lengths %s", self._lengths)
        entries = {}
        for length in self._lengths:
            window = calculate_hann_window(length)
            window.flags.writeable = False
            entries[length] = PrecomputedEntry(
                length=length,
                window=window,
                sum_of_squares=sum_of_squares(window),
            )
        logger.debug("Precomputed %d Hann windows", len(entries))
        return entries


_DEFAULT_TABLE = PrecomputedTable()


def default_table() -> PrecomputedTable:
    """Process-wide table used when callers do not pass their own."""
    return _DEFAULT_TABLE
