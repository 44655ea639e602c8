"""Seeded random source — reproducible pseudo-random stream per search."""

import time
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MODULUS = 233280
_MULTIPLIER = 9301
_INCREMENT = 49297


def seed_from_search_id(search_id: str) -> int:
    """Non-cryptographic 32-bit string hash (h * 31 + char), made non-negative."""
    h = 0
    for ch in search_id:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class SeededRandom:
    """
    Linear-congruential random source.

    The same search id and the same sequence of calls always yield the same
    values. Without a search id the stream is seeded from the wall clock.
    """

    def __init__(self, search_id: str | None = None):
        if search_id:
            self.seed = seed_from_search_id(search_id)
        else:
            self.seed = int(time.time() * 1000)

    def random(self) -> float:
        """Next float in [0, 1)."""
        self.seed = (self.seed * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self.seed / _MODULUS

    def randint(self, low: int, high: int) -> int:
        """Integer in the inclusive range [low, high], one draw."""
        return low + int(self.random() * (high - low + 1))

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[int(self.random() * len(items))]
