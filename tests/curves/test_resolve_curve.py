import numpy as np
import pytest

from chromaramp.curves import (
    Curve,
    CurveName,
    FunctionCurve,
    PresetCurve,
    canonical_name,
    get_curve,
    resolve_curve,
)
from chromaramp.errors import InvalidConfiguration, UnknownCurveError

GRID = [i / 10 for i in range(11)]


def test_catalog_name_binds_accent():
    assert resolve_curve("easeOut", 2)(0.5) == 0.75
    assert resolve_curve("easeIn", 3)(0.5) == 0.125


def test_default_accent_is_one():
    # every catalog curve is bound with accent 1 unless told otherwise
    ease_out = resolve_curve("easeOut")
    for t in GRID:
        assert ease_out(t) == pytest.approx(t)


def test_alias_binds_accent():
    assert resolve_curve("pow", 2)(0.5) == 0.25
    assert resolve_curve("powInv", 2)(0.5) == 0.75
    steep = resolve_curve("sigmoid", 2.0)
    shallow = resolve_curve("sigmoid", 0.2)
    assert steep(0.8) > shallow(0.8)


def test_unknown_name_falls_back_to_linear():
    fallback = resolve_curve("definitelyNotACurve", 2.5)
    linear = resolve_curve("linear", 2.5)
    assert fallback == linear
    for t in GRID:
        assert fallback(t) == linear(t) == t


def test_unknown_name_strict_raises():
    with pytest.raises(UnknownCurveError) as info:
        resolve_curve("definitelyNotACurve", strict=True)
    assert info.value.name == "definitelyNotACurve"
    assert isinstance(info.value, InvalidConfiguration)
    assert isinstance(info.value, KeyError)
    assert "definitelyNotACurve" in str(info.value)


def test_callable_used_verbatim_with_accent():
    seen = []

    def custom(t, k):
        seen.append((t, k))
        return t * k

    curve = resolve_curve(custom, 0.5)
    assert isinstance(curve, FunctionCurve)
    assert curve(0.8) == 0.4
    assert seen == [(0.8, 0.5)]


def test_callable_on_arrays():
    curve = resolve_curve(lambda t, k: t ** 2 + k, 1.0)
    out = curve(np.array([0.0, 0.5, 1.0]))
    assert out.dtype == np.float64
    assert out.tolist() == [1.0, 1.25, 2.0]


def test_curve_instance_passes_through():
    curve = PresetCurve("wave")
    assert resolve_curve(curve, 9.0) is curve


def test_snake_case_and_enum_spellings():
    assert canonical_name("ease_in_out") == "easeInOut"
    assert resolve_curve("ease_out", 2)(0.5) == 0.75
    assert resolve_curve(CurveName.EASE_IN, 2)(0.5) == 0.25
    assert resolve_curve(CurveName.LAME, 1.0) == resolve_curve("lamé", 1.0)


def test_resolved_curves_return_floats_for_scalars():
    for name in ("linear", "easeInOut", "peakEarly", "wave"):
        assert type(resolve_curve(name)(0.3)) is float


def test_sample_positions():
    curve = resolve_curve("linear")
    assert curve.sample(5).tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert curve.sample(1).tolist() == [0.0]


def test_get_curve_raises_for_unknown():
    with pytest.raises(UnknownCurveError):
        get_curve("nope")


def test_bad_spec_type():
    with pytest.raises(TypeError):
        resolve_curve(3)
    with pytest.raises(TypeError):
        FunctionCurve("linear")


def test_curve_is_abstract():
    with pytest.raises(TypeError):
        Curve()
