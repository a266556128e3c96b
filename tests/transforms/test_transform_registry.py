import pytest

from chromaramp import ColorEngine, ColorSpace
from chromaramp.transforms import (
    apply_transform,
    get_transform,
    identity_transform,
    register_transform,
    rybittern_transform,
    unregister_transform,
)


def test_default_space_is_identity(ramp5):
    assert apply_transform(ramp5) is ramp5
    assert apply_transform(ramp5, "oklch") == ramp5
    assert apply_transform(ramp5, ColorSpace.OKLCH) == ramp5


def test_rybittern_dispatch(ramp5):
    assert apply_transform(ramp5, "rybittern") == rybittern_transform(ramp5)
    assert apply_transform(ramp5, ColorSpace.RYBITTERN) == rybittern_transform(ramp5)


def test_reserved_and_unknown_spaces_pass_through(ramp5):
    for space in ("okhsl", "okhsv", "lch", "hsl", "hsv", "hwb", "cmyk", "OKLCH"):
        assert apply_transform(ramp5, space) is ramp5
    assert get_transform("made-up") is identity_transform


def test_register_reserved_space(ramp5):
    def reverse_hues(ramp):
        return type(ramp)(c.replace(h=(360 - c.h) % 360) for c in ramp)

    register_transform(ColorSpace.LCH, reverse_hues)
    try:
        out = apply_transform(ramp5, "lch")
        assert [c.h for c in out] == [350.0, 320.0, 270.0, 160.0, 30.0]
    finally:
        unregister_transform("lch")
    assert apply_transform(ramp5, "lch") is ramp5


def test_builtins_are_protected():
    with pytest.raises(ValueError):
        register_transform("oklch", identity_transform)
    with pytest.raises(ValueError):
        unregister_transform(ColorSpace.RYBITTERN)
    with pytest.raises(TypeError):
        register_transform("hwb", "not callable")


def test_engine_applies_transform_after_generation():
    plain = ColorEngine(21).generate(steps=7)
    remapped = ColorEngine(21).generate(steps=7, space="rybittern")
    assert remapped.ramp == rybittern_transform(plain.ramp)
