import math

from tfeditor.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb, hsv_to_hsl
from tests.samples import samples_rgb_hsl, samples_rgb_hsv, achromatic_rgb


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(float(s_out) - s_exp) < 1e-9
        assert abs(float(l_out) - l_exp) < 1e-9


def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_exp) < 1e-9
        assert abs(g - g_exp) < 1e-9
        assert abs(b - b_exp) < 1e-9


def test_grays_have_no_hue():
    for rgb in achromatic_rgb:
        h, s, l = unit_rgb_to_hsl(*rgb)
        assert math.isnan(h)
        assert abs(float(l) - rgb[0]) < 1e-12


def test_black_and_white_have_no_saturation():
    assert math.isnan(unit_rgb_to_hsl(0.0, 0.0, 0.0)[1])
    assert math.isnan(unit_rgb_to_hsl(1.0, 1.0, 1.0)[1])
    assert unit_rgb_to_hsl(0.5, 0.5, 0.5)[1] == 0.0


def test_undefined_hue_is_gray():
    assert hsl_to_unit_rgb(math.nan, 1.0, 0.25) == (0.25, 0.25, 0.25)
    assert hsl_to_unit_rgb(120.0, math.nan, 0.75) == (0.75, 0.75, 0.75)


def test_hue_wraps():
    a = hsl_to_unit_rgb(-120.0, 1.0, 0.5)
    b = hsl_to_unit_rgb(240.0, 1.0, 0.5)
    assert all(abs(x - y) < 1e-12 for x, y in zip(a, b))


def test_hsv_to_hsl():
    for rgb, hsv in samples_rgb_hsv.items():
        h, s, l = hsv_to_hsl(*hsv)
        h_exp, s_exp, l_exp = samples_rgb_hsl[rgb]
        assert h == hsv[0]
        assert abs(s - s_exp) < 1e-9
        assert abs(l - l_exp) < 1e-9
