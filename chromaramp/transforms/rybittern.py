"""
Perceptual hue remap ("rybittern").

The hue circle is split into six sectors. Inside each sector the position is
mapped through a quarter circle, so hues bunch up near the primaries and
spread out between them. Hue 0 (the seam) is a fixed point. Chroma gets up
to a 6% boost at mid lightness, nothing at the extremes. Lightness and alpha
pass through.
"""
import math

import numpy as np
from numpy import ndarray

from ..types import OKLCH, Ramp, MAX_CHROMA, HUE_360

SECTOR = 1 / 6
CHROMA_BOOST = 0.06


def _sector_table(a: float):
    b = SECTOR * math.cos(a)
    cv = SECTOR * math.sin(a)
    return (cv, 1 / 3 - b, 1 / 3 + cv, 2 / 3 - b, 2 / 3 + cv, 1 - b)


def rybittern_hue(h: float) -> float:
    """Remap a single hue in degrees; the result is in ``[0, 360)``."""
    hh = ((h % HUE_360) + HUE_360) % HUE_360 / HUE_360
    if 0 < hh < 1:
        hh = 1 + (hh % 1)
        a = ((hh % SECTOR) / SECTOR) * math.pi / 2
        idx = math.floor(hh * 6) % 6
        hh = _sector_table(a)[idx]
    return hh * HUE_360


def np_rybittern_hue(h: ndarray) -> ndarray:
    """Vectorized :func:`rybittern_hue`."""
    h = np.asarray(h, dtype=np.float64)
    hh = np.mod(np.mod(h, HUE_360) + HUE_360, HUE_360) / HUE_360
    remap = (hh > 0) & (hh < 1)

    shifted = 1 + np.mod(hh, 1)
    a = (np.mod(shifted, SECTOR) / SECTOR) * np.pi / 2
    b = SECTOR * np.cos(a)
    cv = SECTOR * np.sin(a)
    # NaN hues are masked out below; keep the index valid
    idx = np.mod(np.floor(np.nan_to_num(shifted) * 6).astype(np.int64), 6)

    cases = np.stack([cv, 1 / 3 - b, 1 / 3 + cv, 2 / 3 - b, 2 / 3 + cv, 1 - b], axis=0)
    picked = np.take_along_axis(cases, idx[np.newaxis, ...], axis=0)[0]
    return np.where(remap, picked, hh) * HUE_360


def boost_chroma(l: float, c: float) -> float:
    return min(MAX_CHROMA, c * (1 + CHROMA_BOOST * (1 - abs(l - 0.5) * 2)))


def np_boost_chroma(l: ndarray, c: ndarray) -> ndarray:
    return np.minimum(MAX_CHROMA, c * (1 + CHROMA_BOOST * (1 - np.abs(l - 0.5) * 2)))


def rybittern_transform(ramp: Ramp) -> Ramp:
    if len(ramp) == 0:
        return ramp
    lch = ramp.as_array()
    hues = np_rybittern_hue(lch[:, 2])
    chromas = np_boost_chroma(lch[:, 0], lch[:, 1])
    return Ramp(
        color.replace(c=c, h=h)
        for color, c, h in zip(ramp, chromas.tolist(), hues.tolist())
    )


def rybittern_color(color: OKLCH) -> OKLCH:
    """Scalar form of :func:`rybittern_transform` for a single coordinate."""
    return color.replace(c=boost_chroma(color.l, color.c), h=rybittern_hue(color.h))
