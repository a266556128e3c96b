"""
Secondary curve names.

These are the shaping functions an interactive front-end reaches for when
it exposes a single "accent" slider: ``k`` is used directly as exponent,
steepness or blend weight.
"""
from typing import Dict

import numpy as np

from .presets import CurveFunction, Unit


def power(t: Unit, k: float = 1.0) -> Unit:
    return t ** k


def power_inverse(t: Unit, k: float = 1.0) -> Unit:
    return 1 - (1 - t) ** k


def sigmoid(t: Unit, k: float = 1.0) -> Unit:
    """Logistic curve with steepness ``10 * k``."""
    steepness = k * 10
    return 1 / (1 + np.exp(-steepness * (t - 0.5)))


def lame(t: Unit, k: float = 1.0) -> Unit:
    """
    Superellipse-style ease on a quarter sine.

    ``k = 0`` gives the plain ``0.5 + 0.5 * sin(t * pi / 2)``; larger ``k``
    flattens the exponent toward 0 and pushes the curve to a step at 1.
    """
    exponent = 2 / (2 + 20 * k)
    st = np.sin(t * np.pi / 2)
    return 0.5 + 0.5 * np.sign(st) * np.abs(st) ** exponent


def arc(t: Unit, k: float = 1.0) -> Unit:
    """Quarter-circle arc blended with a line; ``k = 1`` is the pure arc."""
    return np.sqrt(1 - (1 - t) ** 2) * k + t * (1 - k)


ALIASES: Dict[str, CurveFunction] = {
    "pow": power,
    "powInv": power_inverse,
    "sigmoid": sigmoid,
    "lame": lame,
    "lamé": lame,
    "arc": arc,
}
