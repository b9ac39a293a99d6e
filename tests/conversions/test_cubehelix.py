import math

import pytest

from tfeditor.conversions import unit_rgb_to_cubehelix, cubehelix_to_unit_rgb
from tests.samples import saturated_rgb, achromatic_rgb


def test_round_trip():
    for rgb in saturated_rgb:
        assert cubehelix_to_unit_rgb(*unit_rgb_to_cubehelix(*rgb)) == pytest.approx(rgb, abs=1e-9)


def test_grays_have_no_hue():
    for rgb in achromatic_rgb:
        h, s, l = unit_rgb_to_cubehelix(*rgb)
        assert math.isnan(h)
        assert l == pytest.approx(rgb[0])


def test_black_and_white_have_no_saturation():
    assert math.isnan(unit_rgb_to_cubehelix(0.0, 0.0, 0.0)[1])
    assert math.isnan(unit_rgb_to_cubehelix(1.0, 1.0, 1.0)[1])


def test_undefined_channels_give_gray():
    assert cubehelix_to_unit_rgb(math.nan, math.nan, 0.3) == pytest.approx((0.3, 0.3, 0.3))


def test_hue_range():
    for rgb in saturated_rgb:
        h, _, _ = unit_rgb_to_cubehelix(*rgb)
        assert 0.0 <= h < 360.0
