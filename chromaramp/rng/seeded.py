from __future__ import annotations
import math
from typing import Optional

from .hashing import MASK_32, UINT32_RANGE, Seed, coerce_seed

MULBERRY_INCREMENT = 0x6D2B79F5


class SeededRNG:
    """
    Reproducible uniform and normal draws from a 32-bit seed (mulberry32).

    The generator owns a single unsigned 32-bit counter that advances by a
    fixed increment on every draw. All intermediate products wrap at 32 bits;
    the stream depends on that wrap-around and must not be computed with
    wider arithmetic.

    An instance is not safe to share between concurrent ramp generations:
    interleaved draws silently desynchronize the stream.

    Args:
        seed: ``int``, ``float`` or ``str`` seed. ``None`` uses fresh entropy;
              read :attr:`seed` afterwards to reproduce the stream.
    """
    __slots__ = ('_seed', '_state')

    def __init__(self, seed: Optional[Seed] = None) -> None:
        self._seed = coerce_seed(seed)
        self._state = self._seed

    @property
    def seed(self) -> int:
        """The resolved initial seed (unaffected by draws)."""
        return self._seed

    @property
    def state(self) -> int:
        """The current counter value."""
        return self._state

    def next(self) -> float:
        """Return a uniform float in ``[0, 1)`` and advance the state."""
        self._state = (self._state + MULBERRY_INCREMENT) & MASK_32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK_32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & MASK_32)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / UINT32_RANGE

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a float in ``[low, high)``; consumes one draw."""
        return low + (high - low) * self.next()

    def gaussian(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        """
        Return a normally distributed float (Box-Muller); consumes two draws.

        ``u = 1 - next()`` lies in ``(0, 1]`` so the logarithm is always finite.
        """
        u = 1.0 - self.next()
        v = self.next()
        z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
        return z * std_dev + mean

    def fork(self) -> SeededRNG:
        """Return an independent generator positioned at the current state."""
        clone = SeededRNG(self._seed)
        clone._state = self._state
        return clone

    def reset(self) -> None:
        """Rewind the stream to the resolved seed."""
        self._state = self._seed

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed}, state={self._state})"
