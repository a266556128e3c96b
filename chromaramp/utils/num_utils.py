import math
from typing import Union

import numpy as np

from ..errors import InvalidConfiguration

_FULL_TURN = 360.0


def js_round(value: float) -> int:
    """Round half up (toward +inf), the way Math.round does.

    Python's round() uses banker's rounding, which moves exact .5 positions
    and would resolve roles and formatted values differently.
    """
    return int(math.floor(value + 0.5))


def wrap_degrees(h: Union[float, np.ndarray], offset: float = 720.0) -> Union[float, np.ndarray]:
    """Fold hue angles into [0, 360).

    ``offset`` is added before the modulo so the dividend is non-negative for
    every hue the generator can produce. A tiny negative dividend can still
    make a float modulo return exactly 360.0, which is folded back to 0.
    """
    if isinstance(h, np.ndarray):
        wrapped = np.mod(h + offset, _FULL_TURN)
        return np.where(wrapped >= _FULL_TURN, wrapped - _FULL_TURN, wrapped)
    wrapped = (h + offset) % _FULL_TURN
    if wrapped >= _FULL_TURN:
        wrapped -= _FULL_TURN
    return wrapped


def require_finite(value: float, name: str) -> float:
    """Coerce ``value`` to float, rejecting NaN, infinities and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidConfiguration(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidConfiguration(f"{name} must be finite, got {value!r}")
    return value


def unit_positions(steps: int) -> np.ndarray:
    """
    Normalized positions ``i / (steps - 1)`` for ``i in range(steps)``.

    A single step sits at ``t = 0`` (the start anchor) instead of dividing
    by zero.
    """
    if steps == 1:
        return np.zeros(1, dtype=np.float64)
    return np.arange(steps, dtype=np.float64) / (steps - 1)
