"""
chromaramp: deterministic color ramp generation.

A ramp is an ordered walk through OKLCH space built from a seed, a step count
and three tracks (hue, chroma, lightness), each with a start, an end and a
named shaping curve. Identical inputs always give identical ramps; omitted hue
anchors are drawn from a seeded mulberry32 stream.

Quick Start
-----------
>>> from chromaramp import ColorEngine
>>>
>>> result = ColorEngine("brand-blue").generate(
...     steps=9,
...     hue={"start": 250, "end": 290, "curve": "softStart"},
...     lightness={"curve": "easeOut", "accent": 1.6},
... )
>>> result.css()[0]          # doctest: +SKIP
'oklch(98% 0.040 248)'
>>> result.roles["primary"]  # doctest: +SKIP

Modules
-------
- rng: seeded uniform/normal random source
- curves: named curve catalog, aliases and resolver
- engine: ramp options and the generator
- transforms: color-space post-processing (identity, rybittern)
- roles: semantic role names to ramp entries
- formatting: CSS ``oklch()`` strings
"""

from .errors import InvalidConfiguration, UnknownCurveError
from .types import OKLCH, Ramp, ColorSpace
from .rng import SeededRNG, hash_seed, coerce_seed
from .curves import Curve, CurveName, PresetCurve, FunctionCurve, resolve_curve, get_curve, available_curves
from .transforms import apply_transform, register_transform, rybittern_hue
from .roles import DEFAULT_ROLES, resolve_roles, role_index
from .formatting import format_css, format_ramp, contrast_ratio
from .result import RampResult
from .engine import ColorEngine, RampOptions, Track, HueTrack, generate_ramp, hue_delta

__version__ = "1.0.0"

__all__ = [
    # errors
    "InvalidConfiguration",
    "UnknownCurveError",
    # types
    "OKLCH",
    "Ramp",
    "ColorSpace",
    # random source
    "SeededRNG",
    "hash_seed",
    "coerce_seed",
    # curves
    "Curve",
    "CurveName",
    "PresetCurve",
    "FunctionCurve",
    "resolve_curve",
    "get_curve",
    "available_curves",
    # transforms
    "apply_transform",
    "register_transform",
    "rybittern_hue",
    # roles and formatting
    "DEFAULT_ROLES",
    "resolve_roles",
    "role_index",
    "format_css",
    "format_ramp",
    "contrast_ratio",
    # generation
    "RampResult",
    "ColorEngine",
    "RampOptions",
    "Track",
    "HueTrack",
    "generate_ramp",
    "hue_delta",
    # Version
    "__version__",
]
