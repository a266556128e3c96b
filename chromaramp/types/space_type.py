# No dependencies
from enum import Enum


class ColorSpace(str, Enum):
    OKLCH = "oklch"
    RYBITTERN = "rybittern"
    # Reserved identifiers; ramps pass through them unchanged until a
    # transform is registered.
    OKHSL = "okhsl"
    OKHSV = "okhsv"
    LCH = "lch"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"


RESERVED_SPACES = frozenset({
    ColorSpace.OKHSL,
    ColorSpace.OKHSV,
    ColorSpace.LCH,
    ColorSpace.HSL,
    ColorSpace.HSV,
    ColorSpace.HWB,
})

MAX_LIGHTNESS = 1.0
MAX_CHROMA = 0.4
HUE_360 = 360.0
