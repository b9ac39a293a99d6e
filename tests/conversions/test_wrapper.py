import math

import pytest

from tfeditor.conversions import convert, scale, normalize, FormatType
from tests.samples import samples_rgb_hsl, samples_rgb_hsv, saturated_rgb

SPACES = ("rgb", "hsl", "hsv", "lab", "hcl", "cubehelix")


def test_convert_returns_tuple():
    result = convert((1.0, 0.5, 0.25), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_convert_identity():
    assert convert((0.1, 0.2, 0.3), "rgb", "rgb") == (0.1, 0.2, 0.3)


def test_convert_is_case_insensitive():
    assert convert((1.0, 0.0, 0.0), "RGB", "HSL") == convert((1.0, 0.0, 0.0), "rgb", "hsl")


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        convert((1.0, 0.0, 0.0), "rgb", "xyz")


def test_convert_matches_samples():
    for rgb, hsl in samples_rgb_hsl.items():
        assert convert(rgb, "rgb", "hsl") == pytest.approx(hsl)
    for rgb, hsv in samples_rgb_hsv.items():
        assert convert(rgb, "rgb", "hsv") == pytest.approx(hsv)


@pytest.mark.parametrize("from_space", SPACES)
@pytest.mark.parametrize("to_space", SPACES)
def test_convert_between_spaces(from_space, to_space):
    for rgb in saturated_rgb:
        source = convert(rgb, "rgb", from_space)
        target = convert(source, from_space, to_space)
        assert convert(target, to_space, "rgb") == pytest.approx(rgb, abs=1e-4)


def test_scale_int():
    assert scale((1.0, 0.5, 0.0), "rgb", FormatType.INT) == (255, 128, 0)
    assert scale((120.0, 0.5, 1.0), "hsv", FormatType.PERCENTAGE) == (120.0, 50.0, 100.0)


def test_scale_int_undefined_hue():
    assert scale((math.nan, 0.0, 0.5), "hsl", FormatType.INT) == (0, 0, 128)


def test_normalize_inverts_scale():
    assert normalize((255, 0, 51), "rgb", FormatType.INT) == pytest.approx((1.0, 0.0, 0.2))


def test_scale_rejects_lab():
    with pytest.raises(ValueError):
        scale((50.0, 0.0, 0.0), "lab", FormatType.INT)
