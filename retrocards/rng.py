"""Small 16-bit linear congruential generator used for all game randomness."""

from __future__ import annotations

import time
from typing import MutableSequence, Optional, TypeVar

T = TypeVar("T")

_FALLBACK_SEED = 12345
_MULTIPLIER = 75
_INCREMENT = 74


class Lcg:
    """Linear congruential generator with a 16-bit state.

    The state advances as ``state = state * 75 + 74 (mod 65536)`` and each
    draw yields the high byte of the new state.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.perf_counter_ns()
        self.state = seed & 0xFFFF
        if self.state == 0:
            self.state = _FALLBACK_SEED

    def next_byte(self) -> int:
        """Advance the generator and return a value in 0..255."""
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & 0xFFFF
        return self.state >> 8

    def range(self, low: int, high: int) -> int:
        """Return a value in ``[low, high)``; ``low`` when the range is empty."""
        if low >= high:
            return low
        return (low + self.next_byte() % (high - low)) & 0xFF

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place with Fisher-Yates."""
        for i in range(len(items) - 1, 0, -1):
            j = self.range(0, i + 1)
            items[i], items[j] = items[j], items[i]