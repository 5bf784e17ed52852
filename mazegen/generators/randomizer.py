"""
Sources of randomness for maze generation.

Every generator takes a ``Randomizer`` explicitly. ``LFSR`` is the
reproducible choice: the same seed yields the same maze on every platform.
"""

import math
import random
from abc import ABC, abstractmethod
from typing import Optional

MASK_64 = (1 << 64) - 1


class Randomizer(ABC):
    """Provides random integers in a range and random floats in [0, 1)."""

    @abstractmethod
    def range(self, a: int, b: int) -> int:
        """
        A random integer in [min(a, b), max(a, b)).

        Returns ``a`` when ``a == b``.
        """

    @abstractmethod
    def random(self) -> float:
        """A random float in [0, 1)."""


class PythonRandomizer(Randomizer):
    """Adapts a ``random.Random`` instance."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def range(self, a: int, b: int) -> int:
        low, high = (a, b) if a < b else (b, a)
        if low == high:
            return low
        return self.rng.randrange(low, high)

    def random(self) -> float:
        return self.rng.random()


class SystemRandomizer(PythonRandomizer):
    """Draws from the operating system entropy source."""

    def __init__(self):
        super().__init__(random.SystemRandom())


class LFSR(Randomizer):
    """
    A 64 bit linear feedback shift register.

    Each step shifts the register right by one and feeds the XOR of bits 0,
    2, 3 and 5 into bit 63. A random value is the register state after 64
    steps.
    """

    def __init__(self, seed: int):
        self.state = seed & MASK_64

    def next_bit(self) -> bool:
        x = self.state
        bit = (x ^ (x >> 2) ^ (x >> 3) ^ (x >> 5)) & 1
        self.state = (x >> 1) | (bit << 63)
        return bit != 0

    def advance(self) -> int:
        for _ in range(64):
            self.next_bit()
        return self.state

    def range(self, a: int, b: int) -> int:
        value = self.advance()
        low, high = (a, b) if a < b else (b, a)
        if low == high:
            return low
        return low + value % (high - low)

    def random(self) -> float:
        value = self.advance() / MASK_64
        # A register close to all ones rounds up to 1.0
        return value if value < 1.0 else math.nextafter(1.0, 0.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LFSR):
            return NotImplemented
        return self.state == other.state

    def __repr__(self) -> str:
        return f"LFSR({self.state:#018x})"
