import pytest

from chromaramp import OKLCH, ColorEngine, contrast_ratio, format_css, format_ramp


def test_css_string():
    assert format_css(OKLCH(0.98, 0.04, 212.4)) == "oklch(98% 0.040 212)"
    assert format_css(OKLCH(0.123, 0.1234, 0.0)) == "oklch(12% 0.123 0)"


def test_hue_and_lightness_round_half_up():
    assert format_css(OKLCH(0.125, 0.2, 10.5)) == "oklch(13% 0.200 11)"
    assert format_css(OKLCH(0.5, 0.2, 359.6)) == "oklch(50% 0.200 360)"


def test_chroma_ties_round_up():
    strings = [format_css(OKLCH(0.5, c, 10.0)) for c in (0.0625, 0.1875, 0.3125)]
    assert strings == ["oklch(50% 0.063 10)", "oklch(50% 0.188 10)", "oklch(50% 0.313 10)"]
    assert format_css(OKLCH(0.5, 0.0, 10.0)) == "oklch(50% 0.000 10)"


def test_alpha_suffix():
    assert format_css(OKLCH(0.5, 0.1, 10.0, alpha=0.5)) == "oklch(50% 0.100 10 / 0.5)"
    assert format_css(OKLCH(0.5, 0.1, 10.0), alpha=1) == "oklch(50% 0.100 10 / 1)"


def test_format_ramp_keeps_order(ramp5):
    strings = format_ramp(ramp5)
    assert strings == [format_css(c) for c in ramp5]
    assert strings[0] == "oklch(95% 0.020 10)"
    assert strings[-1] == "oklch(20% 0.100 330)"


def test_result_css_and_role_css():
    result = ColorEngine(123).generate(steps=4)
    assert result.css() == format_ramp(result.ramp)
    assert result.role_css()["surface"] == result.css()[0]


def test_contrast_ratio():
    white = OKLCH(1.0, 0.0, 0.0)
    black = OKLCH(0.0, 0.0, 0.0)
    assert contrast_ratio(white, black) == pytest.approx(21.0)
    assert contrast_ratio(black, white) == contrast_ratio(white, black)
    assert contrast_ratio(white, white) == 1.0
