import math

import pytest

from tfeditor.conversions import (
    unit_rgb_to_lab,
    lab_to_unit_rgb,
    unit_rgb_to_hcl,
    hcl_to_unit_rgb,
    lab_to_hcl,
    hcl_to_lab,
    srgb_to_linear,
    linear_to_srgb,
)
from tests.samples import samples_rgb_lab, saturated_rgb

lab_tolerance = 0.05
rgb_tolerance = 1e-4


def test_unit_rgb_to_lab():
    for rgb, expected in samples_rgb_lab.items():
        lab = unit_rgb_to_lab(*rgb)
        assert lab == pytest.approx(expected, abs=lab_tolerance)


def test_grays_have_zero_a_and_b():
    for v in (0.1, 0.5, 0.9):
        l, a, b = unit_rgb_to_lab(v, v, v)
        assert a == 0.0
        assert b == 0.0
        assert 0 < l < 100


def test_lab_round_trip():
    for rgb in saturated_rgb:
        assert lab_to_unit_rgb(*unit_rgb_to_lab(*rgb)) == pytest.approx(rgb, abs=rgb_tolerance)


def test_hcl_round_trip():
    for rgb in saturated_rgb:
        assert hcl_to_unit_rgb(*unit_rgb_to_hcl(*rgb)) == pytest.approx(rgb, abs=rgb_tolerance)


def test_hcl_of_gray():
    h, c, l = unit_rgb_to_hcl(0.5, 0.5, 0.5)
    assert math.isnan(h)
    assert c == 0.0


def test_hcl_of_black_has_zero_chroma():
    h, c, l = lab_to_hcl(0.0, 0.0, 0.0)
    assert math.isnan(h)
    assert c == 0.0


def test_hcl_to_lab_undefined_hue():
    assert hcl_to_lab(math.nan, 30.0, 50.0) == (50.0, 0.0, 0.0)


def test_hcl_hue_in_degrees():
    h, c, l = lab_to_hcl(50.0, 0.0, 10.0)
    assert h == pytest.approx(90.0)
    assert c == pytest.approx(10.0)


def test_srgb_linear_round_trip():
    for c in (0.0, 0.02, 0.04045, 0.5, 1.0):
        assert linear_to_srgb(srgb_to_linear(c)) == pytest.approx(c, abs=1e-12)
