from .engine import ColorEngine, generate_ramp, hue_delta, validate_steps
from .options import (
    CHROMA_DEFAULTS,
    DEFAULT_STEPS,
    HUE_DEFAULTS,
    LIGHTNESS_DEFAULTS,
    HueTrack,
    RampOptions,
    Track,
)

__all__ = [
    "ColorEngine",
    "generate_ramp",
    "hue_delta",
    "validate_steps",
    "CHROMA_DEFAULTS",
    "DEFAULT_STEPS",
    "HUE_DEFAULTS",
    "LIGHTNESS_DEFAULTS",
    "HueTrack",
    "RampOptions",
    "Track",
]
