import pytest

from tfeditor.colors import Color
from tfeditor.errors import ColorParseError, OutOfRangeError
from tfeditor.stops import AlphaStop, ColorStop, check_position


def test_check_position():
    assert check_position(0) == 0.0
    assert check_position(1) == 1.0
    for bad in (-0.01, 1.01, float("nan"), float("inf")):
        with pytest.raises(OutOfRangeError):
            check_position(bad)
    with pytest.raises(TypeError):
        check_position("half")


def test_out_of_range_error_carries_position():
    with pytest.raises(OutOfRangeError) as info:
        check_position(1.5)
    assert info.value.position == 1.5


def test_alpha_stop():
    stop = AlphaStop(0.25, 0.5)
    assert stop.value == 0.5
    assert stop.with_position(0.75) == AlphaStop(0.75, 0.5)
    assert stop.with_value(1) == AlphaStop(0.25, 1.0)


def test_alpha_stop_is_frozen():
    stop = AlphaStop(0.25, 0.5)
    with pytest.raises(AttributeError):
        stop.alpha = 0.1


def test_alpha_out_of_range():
    with pytest.raises(OutOfRangeError):
        AlphaStop(0.5, 1.5)
    with pytest.raises(OutOfRangeError):
        AlphaStop(-0.5, 0.5)


def test_color_stop_normalizes_color():
    stop = ColorStop(0.5, "blue")
    assert stop.color == Color(0.0, 0.0, 1.0)
    assert stop == ColorStop(0.5, (0.0, 0.0, 1.0))


def test_color_stop_bad_color():
    with pytest.raises(ColorParseError):
        ColorStop(0.5, "blurple")


@pytest.mark.parametrize("value", [
    (0.5, 0.25),
    [0.5, 0.25],
    {"position": 0.5, "alpha": 0.25},
    {"stop": 0.5, "alpha": 0.25},
    AlphaStop(0.5, 0.25),
])
def test_alpha_stop_coerce(value):
    assert AlphaStop.coerce(value) == AlphaStop(0.5, 0.25)


def test_color_stop_coerce():
    assert ColorStop.coerce({"stop": 1, "color": "#ff0000"}) == ColorStop(1.0, "red")
    assert ColorStop.coerce((0, "white")).color == Color(1.0, 1.0, 1.0)


def test_coerce_rejects_garbage():
    with pytest.raises(TypeError):
        AlphaStop.coerce({"position": 0.5})
    with pytest.raises(TypeError):
        AlphaStop.coerce((0.1, 0.2, 0.3))
    with pytest.raises(TypeError):
        ColorStop.coerce(0.5)
