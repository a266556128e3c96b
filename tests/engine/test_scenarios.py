"""End-to-end scenarios for the generator's documented behavior."""
import pytest

from chromaramp import ColorEngine
from chromaramp.curves import resolve_curve


def test_seed_123_five_steps():
    result = ColorEngine(123).generate(steps=5)
    assert len(result.ramp) == 5
    # easeOut evaluates to exactly 0 at t = 0
    assert result.ramp[0].l == 0.98
    assert len(result.css()) == 5


def test_one_full_rotation_at_the_midpoint():
    base = {"start": 0, "end": 0, "curve": "softStart"}
    still = ColorEngine(42).generate(steps=3, hue={**base, "rotations": 0})
    turning = ColorEngine(42).generate(steps=3, hue={**base, "rotations": 1})

    mid = resolve_curve("softStart", 1.0)(0.5)
    difference = (turning.ramp[1].h - still.ramp[1].h) % 360
    assert difference == pytest.approx((360 * mid) % 360)
    # the endpoints of a full turn coincide
    assert turning.ramp[0].h == pytest.approx(still.ramp[0].h)


def test_single_step_defined_behavior():
    result = ColorEngine(1).generate(steps=1, lightness={"start": 0.7, "end": 0.1})
    assert [color.l for color in result.ramp] == [0.7]
    assert result.roles["accent"] is result.ramp[0]
