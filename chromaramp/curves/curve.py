from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Union

import numpy as np

from .aliases import ALIASES
from .presets import PRESETS, CurveFunction, Unit, linear
from ..errors import UnknownCurveError
from ..utils.num_utils import unit_positions


class CurveName(str, Enum):
    LINEAR = "linear"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"
    SOFT_START = "softStart"
    SOFT_END = "softEnd"
    PEAK_EARLY = "peakEarly"
    VALLEY_EARLY = "valleyEarly"
    MID_SURGE = "midSurge"
    BOUNCE = "bounce"
    WAVE = "wave"
    MATERIAL = "material"
    # aliases
    POW = "pow"
    POW_INV = "powInv"
    SIGMOID = "sigmoid"
    LAME = "lame"
    ARC = "arc"


# snake_case spellings of the camelCase names
_SNAKE_NAMES: Dict[str, str] = {
    "ease_in": "easeIn",
    "ease_out": "easeOut",
    "ease_in_out": "easeInOut",
    "soft_start": "softStart",
    "soft_end": "softEnd",
    "peak_early": "peakEarly",
    "valley_early": "valleyEarly",
    "mid_surge": "midSurge",
    "pow_inv": "powInv",
}


class Curve(ABC):
    """A shaping curve with its accent already bound."""

    accent: float

    @abstractmethod
    def evaluate(self, t: Unit) -> Unit:
        """Evaluate the curve on a float or an array of positions."""

    def __call__(self, t: Unit) -> Unit:
        if isinstance(t, np.ndarray):
            return np.asarray(self.evaluate(t), dtype=np.float64)
        return float(self.evaluate(t))

    def sample(self, steps: int) -> np.ndarray:
        """Evaluate at ``steps`` evenly spaced positions ``i / (steps - 1)``."""
        return self(unit_positions(steps))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(accent={self.accent!r})"


class PresetCurve(Curve):
    """A catalog or alias curve addressed by name."""

    def __init__(self, name: str, accent: float = 1.0) -> None:
        self.name = name
        self.accent = float(accent)
        self._func = get_curve(name)

    def evaluate(self, t: Unit) -> Unit:
        t = np.asarray(t, dtype=np.float64) if isinstance(t, np.ndarray) else t
        result = self._func(t, self.accent)
        if isinstance(t, np.ndarray):
            # linear and friends may hand back scalars for array input
            return np.broadcast_to(result, t.shape)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PresetCurve):
            return NotImplemented
        return self._func is other._func and self.accent == other.accent

    def __hash__(self) -> int:
        return hash((self._func, self.accent))

    def __repr__(self) -> str:
        return f"PresetCurve(name={self.name!r}, accent={self.accent!r})"


class FunctionCurve(Curve):
    """A caller-supplied ``(t, accent) -> value`` function, used verbatim."""

    def __init__(self, func: Callable[[float, float], float], accent: float = 1.0) -> None:
        if not callable(func):
            raise TypeError(f"Curve function must be callable, got {type(func).__name__}")
        self.func = func
        self.accent = float(accent)

    def evaluate(self, t: Unit) -> Unit:
        if isinstance(t, np.ndarray):
            return np.vectorize(lambda x: float(self.func(x, self.accent)), otypes=[np.float64])(t)
        return self.func(t, self.accent)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", "lambda")
        return f"FunctionCurve(func={name}, accent={self.accent!r})"


CurveSpec = Union[str, CurveName, Curve, Callable[[float, float], float]]


def canonical_name(name: str) -> str:
    """Map a snake_case spelling to its catalog name; other names pass through."""
    if isinstance(name, Enum):
        name = name.value
    return _SNAKE_NAMES.get(name, name)


def get_curve(name: Union[str, CurveName]) -> CurveFunction:
    """
    Look up the raw ``f(t, k)`` function for a catalog or alias name.

    Raises:
        UnknownCurveError: If ``name`` is in neither set.
    """
    key = canonical_name(name)
    if key in PRESETS:
        return PRESETS[key]
    if key in ALIASES:
        return ALIASES[key]
    raise UnknownCurveError(str(key))


def is_known_curve(name: Union[str, CurveName]) -> bool:
    key = canonical_name(name)
    return key in PRESETS or key in ALIASES


def available_curves() -> List[str]:
    """Catalog names followed by alias names."""
    return list(PRESETS) + list(ALIASES)


def resolve_curve(
    spec: CurveSpec = "linear",
    accent: float = 1.0,
    *,
    strict: bool = False,
) -> Curve:
    """
    Turn a curve specification into a callable curve with ``accent`` bound.

    Args:
        spec: A catalog name, an alias name, a :class:`Curve` (returned
              unchanged), or a callable taking ``(t, accent)``.
        accent: Strength/exponent substituted for the curve parameter.
        strict: Raise on unknown names instead of falling back.

    Returns:
        The resolved :class:`Curve`. Unknown names resolve to ``linear``
        unless ``strict`` is set.

    Raises:
        UnknownCurveError: With ``strict=True`` and an unrecognized name.
    """
    if isinstance(spec, Curve):
        return spec
    if isinstance(spec, str):
        if is_known_curve(spec):
            return PresetCurve(canonical_name(spec), accent)
        if strict:
            raise UnknownCurveError(str(canonical_name(spec)))
        return PresetCurve(linear.__name__, accent)
    if callable(spec):
        return FunctionCurve(spec, accent)
    raise TypeError(f"Curve spec must be a name or a callable, got {type(spec).__name__}")
