"""
Seedable pseudo-random sources used by the generators.

Each generator owns one of these objects outright, so independent
generators in the same process never share a stream.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

from scalefree.config import SEED_MIN, RandomBackend
from scalefree.errors import InvalidConfiguration

_MULTIPLIER = 0x5DEECE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer generator with an explicit, resettable seed."""

    def set_seed(self, seed: int) -> None:
        ...

    def next_int(self, bound: int) -> int:
        """Return an integer uniformly distributed in ``[0, bound)``."""
        ...

    def next_bool(self) -> bool:
        ...


class JavaRandom:
    """
    48-bit linear congruential generator.

    Uses the constants and bounded-draw rejection scheme of
    ``java.util.Random``, so a given seed yields the same integer stream on
    every platform.  Only integer arithmetic is involved.
    """

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self._state = (seed ^ _MULTIPLIER) & _MASK

    def _next(self, bits: int) -> int:
        self._state = (self._state * _MULTIPLIER + _ADDEND) & _MASK
        return self._state >> (48 - bits)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        # Power of two: take the high-order bits directly
        if bound & -bound == bound:
            return (bound * self._next(31)) >> 31

        while True:
            bits = self._next(31)
            value = bits % bound
            # Reject draws from the final partial interval (int32 overflow in Java)
            if bits - value + (bound - 1) < 2**31:
                return value

    def next_bool(self) -> bool:
        return self._next(1) != 0

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} state={self._state:#014x}>"


class PythonRandom:
    """Adapter exposing :class:`random.Random` (Mersenne Twister) as a RandomSource."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int) -> None:
        self._rng.seed(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def next_bool(self) -> bool:
        return self._rng.getrandbits(1) == 1

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


_BACKENDS: dict[RandomBackend, type] = {
    RandomBackend.JAVA: JavaRandom,
    RandomBackend.PYTHON: PythonRandom,
}


def make_random_source(backend: RandomBackend | str = RandomBackend.JAVA) -> RandomSource:
    """Instantiate a fresh random source for the named backend."""
    try:
        key = RandomBackend(backend)
    except ValueError:
        available = ", ".join(b.value for b in RandomBackend)
        raise InvalidConfiguration(
            f"Unknown random source '{backend}'. Available: {available}"
        ) from None
    return _BACKENDS[key]()


def draw_seed() -> int:
    """Draw a fresh signed 64-bit seed from an unseeded source."""
    return random.Random().getrandbits(64) + SEED_MIN
