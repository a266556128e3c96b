"""
Curve registry and resolver.

>>> from chromaramp.curves import resolve_curve
>>> ease = resolve_curve("easeOut", accent=2.0)
>>> ease(0.5)
0.75
>>> resolve_curve("noSuchCurve")(0.3) == resolve_curve("linear")(0.3)
True
"""
from .presets import PRESETS
from .aliases import ALIASES
from .curve import (
    Curve,
    CurveName,
    CurveSpec,
    FunctionCurve,
    PresetCurve,
    available_curves,
    canonical_name,
    get_curve,
    is_known_curve,
    resolve_curve,
)

__all__ = [
    "PRESETS",
    "ALIASES",
    "Curve",
    "CurveName",
    "CurveSpec",
    "FunctionCurve",
    "PresetCurve",
    "available_curves",
    "canonical_name",
    "get_curve",
    "is_known_curve",
    "resolve_curve",
]
