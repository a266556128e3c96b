import math

import numpy as np
import pytest

from chromaramp import OKLCH, Ramp
from chromaramp.transforms import (
    boost_chroma,
    np_boost_chroma,
    np_rybittern_hue,
    rybittern_color,
    rybittern_hue,
    rybittern_transform,
)

HUES = [i * 7.5 for i in range(48)] + [0.001, 359.999, -30.0, 725.0]


def test_seam_is_a_fixed_point():
    assert rybittern_hue(0.0) == 0.0
    assert rybittern_hue(360.0) == 0.0
    assert rybittern_hue(-360.0) == 0.0
    assert np_rybittern_hue(np.array([0.0, 360.0])).tolist() == [0.0, 0.0]


def test_mid_sector_samples():
    # the middle of a sector sits at 45 degrees on the quarter circle
    quarter = 60 * math.sin(math.pi / 4)
    assert rybittern_hue(30.0) == pytest.approx(quarter)
    assert rybittern_hue(90.0) == pytest.approx(120 - quarter)
    assert rybittern_hue(150.0) == pytest.approx(120 + quarter)


def test_output_stays_on_the_circle():
    for h in HUES:
        out = rybittern_hue(h)
        assert 0.0 <= out < 360.0 + 1e-9


def test_negative_and_large_hues_are_normalized_first():
    assert rybittern_hue(-30.0) == pytest.approx(rybittern_hue(330.0))
    assert rybittern_hue(725.0) == pytest.approx(rybittern_hue(5.0))


def test_vectorized_matches_scalar():
    arr = np_rybittern_hue(np.array(HUES))
    for h, out in zip(HUES, arr.tolist()):
        assert out == pytest.approx(rybittern_hue(h), abs=1e-9)


def test_nan_hue_propagates():
    out = np_rybittern_hue(np.array([math.nan, 30.0]))
    assert math.isnan(out[0])
    assert out[1] == pytest.approx(rybittern_hue(30.0))


def test_chroma_boost_peaks_at_mid_lightness():
    assert boost_chroma(0.5, 0.1) == pytest.approx(0.106)
    assert boost_chroma(0.0, 0.1) == 0.1
    assert boost_chroma(1.0, 0.1) == 0.1
    assert boost_chroma(0.25, 0.1) == pytest.approx(0.103)


def test_chroma_boost_is_capped():
    assert boost_chroma(0.5, 0.39) == 0.4
    assert np_boost_chroma(np.array([0.5]), np.array([0.39])).tolist() == [0.4]


def test_transform_keeps_lightness_order_and_alpha():
    ramp = Ramp([
        OKLCH(0.9, 0.05, 30.0, alpha=0.5),
        OKLCH(0.5, 0.10, 0.0),
        OKLCH(0.1, 0.20, 200.0),
    ])
    out = rybittern_transform(ramp)
    assert [c.l for c in out] == [0.9, 0.5, 0.1]
    assert out[0].alpha == 0.5
    assert out[1].h == 0.0
    assert out[1].c == pytest.approx(0.106)
    for before, after in zip(ramp, out):
        assert after.h == pytest.approx(rybittern_hue(before.h), abs=1e-9)


def test_single_color_form():
    color = OKLCH(0.5, 0.1, 90.0)
    out = rybittern_color(color)
    assert out.l == 0.5
    assert out.c == pytest.approx(0.106)
    assert out.h == pytest.approx(rybittern_hue(90.0))


def test_empty_ramp():
    assert len(rybittern_transform(Ramp())) == 0
