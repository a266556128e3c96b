from .color_types import OKLCH, Ramp, LCHTuple, Scalar
from .space_type import ColorSpace, RESERVED_SPACES, MAX_CHROMA, MAX_LIGHTNESS, HUE_360

__all__ = [
    "OKLCH",
    "Ramp",
    "LCHTuple",
    "Scalar",
    "ColorSpace",
    "RESERVED_SPACES",
    "MAX_CHROMA",
    "MAX_LIGHTNESS",
    "HUE_360",
]
