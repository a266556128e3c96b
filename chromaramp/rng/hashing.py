"""Seed coercion for :class:`~chromaramp.rng.seeded.SeededRNG`."""

import math
import secrets
from typing import Optional, Union

MASK_32 = 0xFFFFFFFF
UINT32_RANGE = 2 ** 32

Seed = Union[int, float, str]


def _utf16_units(text: str):
    """Yield UTF-16 code units; astral characters become surrogate pairs."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_seed(text: str) -> int:
    """
    Hash a string to an unsigned 32-bit integer.

    Rolling multiplier-31 hash over UTF-16 code units:
    ``hash = (hash * 31 + unit) mod 2**32``, starting from 0.
    """
    h = 0
    for unit in _utf16_units(text):
        h = ((h << 5) - h + unit) & MASK_32
    return h


def coerce_seed(seed: Optional[Seed] = None) -> int:
    """
    Resolve a seed to its unsigned 32-bit form.

    Strings are hashed with :func:`hash_seed`. Numbers are truncated toward
    zero and reduced modulo 2**32 (so ``-1`` becomes ``4294967295``); NaN and
    infinities map to 0. ``None`` draws 32 bits of fresh entropy.
    """
    if seed is None:
        return secrets.randbits(32)
    if isinstance(seed, bool):
        raise TypeError("seed must be an int, float or str, not bool")
    if isinstance(seed, str):
        return hash_seed(seed)
    if isinstance(seed, int):
        return seed & MASK_32
    if isinstance(seed, float):
        if not math.isfinite(seed):
            return 0
        return math.trunc(seed) & MASK_32
    # numpy scalars and other numbers
    try:
        value = float(seed)
    except (TypeError, ValueError):
        raise TypeError(f"seed must be an int, float or str, got {type(seed).__name__}") from None
    return coerce_seed(value)
