"""
Named shaping curves.

Every curve maps a normalized position ``t`` in ``[0, 1]`` and an accent
``k`` to a shaped value. The functions accept Python floats and numpy
arrays alike. Values are not guaranteed to stay inside ``[0, 1]``:
``bounce`` and ``wave`` over/undershoot and ``midSurge`` never quite reaches
the endpoints, so callers clamp after interpolating.
"""
from typing import Callable, Dict, Union

import numpy as np
from numpy import ndarray

Unit = Union[float, ndarray]
CurveFunction = Callable[..., Unit]


def linear(t: Unit, k: float = 1.0) -> Unit:
    return t


def ease_in(t: Unit, k: float = 2.5) -> Unit:
    return t ** k


def ease_out(t: Unit, k: float = 2.5) -> Unit:
    return 1 - (1 - t) ** k


def ease_in_out(t: Unit, k: float = 1.0) -> Unit:
    """Cubic in-out; ``k`` is ignored."""
    return np.where(t < 0.5, 4 * t ** 3, 1 - (-2 * t + 2) ** 3 / 2)


def soft_start(t: Unit, k: float = 0.58) -> Unit:
    """Blend of a quarter-circle arc (weight ``k``) and a straight line."""
    return np.sqrt(1 - (1 - t) ** 2) * k + t * (1 - k)


def soft_end(t: Unit, k: float = 0.58) -> Unit:
    return 1 - np.sqrt(1 - t ** 2) * k - t * (1 - k)


def peak_early(t: Unit, k: float = 2.5) -> Unit:
    """Power curve centred on 0.5; flat in the middle for ``k > 1``."""
    u = (t - 0.5) * 2
    return 0.5 + 0.5 * np.sign(u) * np.abs(u) ** k


def valley_early(t: Unit, k: float = 2.5) -> Unit:
    return 1 - peak_early(1 - t, k)


def mid_surge(t: Unit, k: float = 12.0) -> Unit:
    """Logistic step around 0.5; only approaches 0 and 1 asymptotically."""
    return 1 / (1 + np.exp(-k * (t - 0.5)))


def bounce(t: Unit, k: float = 1.2) -> Unit:
    return t + 0.1 * k * np.sin(t * np.pi * 4) * np.exp(-t * 6)


def wave(t: Unit, k: float = 1.0) -> Unit:
    """Full cosine period: 0 at both ends, 1 at the middle; ``k`` is ignored."""
    return 0.5 + 0.5 * np.sin(2 * np.pi * (t - 0.25))


def material(t: Unit, k: float = 1.0) -> Unit:
    return ease_in_out(t, k)


PRESETS: Dict[str, CurveFunction] = {
    "linear": linear,
    "easeIn": ease_in,
    "easeOut": ease_out,
    "easeInOut": ease_in_out,
    "softStart": soft_start,
    "softEnd": soft_end,
    "peakEarly": peak_early,
    "valleyEarly": valley_early,
    "midSurge": mid_surge,
    "bounce": bounce,
    "wave": wave,
    "material": material,
}
