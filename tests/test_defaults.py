import pytest

from tfeditor import InterpolationMethod, TransferFunctionOptions, create_transfer_function
from tfeditor.defaults import DEFAULT_BINS, MIN_STOPS, POSITION_EPSILON


def test_default_options():
    options = TransferFunctionOptions()
    assert options.interpolation_method is InterpolationMethod.HSL_LONG
    assert options.bins == DEFAULT_BINS
    assert options.min_stops == MIN_STOPS
    assert options.position_epsilon == POSITION_EPSILON


def test_method_name_is_coerced():
    assert TransferFunctionOptions(interpolation_method="rgb").interpolation_method is InterpolationMethod.RGB


@pytest.mark.parametrize("kwargs", [
    {"position_epsilon": -0.1},
    {"min_stops": 1},
    {"interpolation_method": "sepia"},
])
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        TransferFunctionOptions(**kwargs)


def test_position_epsilon_limits_drags():
    model = create_transfer_function(options=TransferFunctionOptions(position_epsilon=0.1))
    assert model.move_alpha_stop_to(1, 0.95) == pytest.approx(0.9)
    assert model.move_alpha_stop_to(1, 0.01) == pytest.approx(0.1)


def test_min_stops_limits_removal():
    model = create_transfer_function(options=TransferFunctionOptions(min_stops=3))
    assert model.remove_alpha_stop_at(1) is False
    assert len(model.alpha_stops) == 3
