import pytest

from tfeditor import (
    AlphaStop,
    Color,
    ColorMap,
    InterpolationMethod,
    TransferFunction,
    TransferFunctionModel,
    TransferFunctionOptions,
    create_transfer_function,
)
from tfeditor.errors import DegenerateBinsError, InvalidStopSetError, OutOfRangeError


def sample_tf():
    return TransferFunction(
        alpha_stops=((0, 1), (0.5, 0.5), (1, 0)),
        color_map=ColorMap([(0, "blue"), (0.5, "white"), (1, "red")], "RGB"),
    )


def test_defaults(tf):
    assert [(s.position, s.alpha) for s in tf.alpha_stops] == [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0)]
    assert [str(s.color) for s in tf.color_stops] == ["#008000", "#ffff00", "#ff0000"]
    assert tf.interpolation_method is InterpolationMethod.HSL_LONG
    assert not tf.discrete
    assert tf.bins == 7


def test_round_trip():
    initial = sample_tf()
    assert create_transfer_function(initial).get_transfer_function() == initial


def test_options():
    options = TransferFunctionOptions(
        initial_alpha_stops=((0, 1), (1, 1)),
        interpolation_method="LAB",
        discrete=True,
        bins=3,
    )
    model = create_transfer_function(options=options)
    assert len(model.alpha_stops) == 2
    assert model.interpolation_method is InterpolationMethod.LAB
    assert len(model.get_bins()) == 3


def test_invalid_initial_state():
    with pytest.raises(InvalidStopSetError):
        TransferFunctionModel(TransferFunction(alpha_stops=((0, 1),)))
    with pytest.raises(DegenerateBinsError):
        TransferFunctionModel(TransferFunction(color_map=ColorMap(discrete=True, bins=0)))


def test_record_requires_color_map():
    with pytest.raises(TypeError):
        TransferFunction(color_map={"colorStops": []})


def test_sample_alpha():
    model = create_transfer_function(sample_tf())
    assert model.sample_alpha(0.25) == pytest.approx(0.75)


def test_sample_color():
    model = create_transfer_function(sample_tf())
    assert model.sample_color(0.25).value == pytest.approx((0.5, 0.5, 1.0, 1.0))


def test_sample_color_with_alpha():
    model = create_transfer_function(sample_tf())
    color = model.sample_color_with_alpha(0.25)
    assert color.rgb == pytest.approx((0.5, 0.5, 1.0))
    assert color.opacity == pytest.approx(0.75)


@pytest.mark.parametrize("method", list(InterpolationMethod))
def test_stop_colors_for_every_method(method):
    model = create_transfer_function(sample_tf())
    model.set_interpolation_method(method)
    for stop in model.color_stops:
        assert model.sample_color(stop.position).isclose(stop.color, 1e-6)


def test_out_of_range(tf):
    for sample in (tf.sample_alpha, tf.sample_color, tf.sample_color_with_alpha):
        with pytest.raises(OutOfRangeError):
            sample(1.5)


def test_render():
    model = create_transfer_function(sample_tf())
    strip = model.render(5)
    assert strip.shape == (5, 4)
    assert tuple(strip[0]) == pytest.approx((0.0, 0.0, 1.0, 1.0))
    assert tuple(strip[-1]) == pytest.approx((1.0, 0.0, 0.0, 0.0))


def test_move_alpha_stop():
    model = create_transfer_function(sample_tf())
    assert model.move_alpha_stop_to(1, 0.9, 0.2) == 0.9
    assert model.alpha_stops == (AlphaStop(0, 1), AlphaStop(0.9, 0.2), AlphaStop(1, 0))


def test_remove_endpoint_is_noop(recorder):
    model = create_transfer_function(TransferFunction(alpha_stops=((0, 1), (1, 0))))
    model.add_listener(recorder)
    recorder.reset()
    assert model.remove_alpha_stop_at(0) is False
    assert len(model.alpha_stops) == 2
    assert recorder.count == 0


def test_color_stop_operations(tf):
    index = tf.add_color_stop(0.25, "blue")
    assert tf.color_stops[index].color == Color(0.0, 0.0, 1.0)
    tf.set_color_stop_color(index, "white")
    assert tf.color_stops[index].color == Color(1.0, 1.0, 1.0)
    assert tf.move_color_stop_to(index, 0.3) == 0.3
    assert tf.remove_color_stop_at(index) is True
    assert len(tf.color_stops) == 3


def test_alpha_stop_operations(tf):
    index = tf.add_alpha_stop(0.25)
    assert tf.alpha_stops[index].alpha == pytest.approx(0.25)
    tf.set_alpha_stop_value(index, 0.9)
    assert tf.sample_alpha(0.25) == 0.9


def test_discretization(tf):
    tf.set_discrete(True)
    tf.set_bins(4)
    bins = tf.get_bins()
    assert [b.lower_bound for b in bins] == [0.0, 0.25, 0.5, 0.75]
    assert [b.upper_bound for b in bins] == [0.25, 0.5, 0.75, 1.0]
    assert tf.get_transfer_function().color_map.bins == 4


def test_replace_alpha_stops(tf):
    assert tf.replace_alpha_stops([(0, 0), (1, 1)]) is True
    assert len(tf.alpha_stops) == 2
    before = tf.alpha_stops
    with pytest.raises(InvalidStopSetError):
        tf.replace_alpha_stops([(0, 0), (0.5, 0.2)])
    assert tf.alpha_stops == before


def test_replace_color_map(tf):
    new_map = ColorMap([(0, "black"), (1, "white")], "RGB")
    tf.replace_color_map(new_map)
    assert tf.color_map == new_map
    with pytest.raises(InvalidStopSetError):
        tf.replace_color_map(ColorMap([(0.2, "black"), (1, "white")], "RGB"))
    assert tf.color_map == new_map


def test_replace_whole_function(tf, recorder):
    tf.add_listener(recorder)
    recorder.reset()
    assert tf.replace(sample_tf()) is True
    assert tf.get_transfer_function() == sample_tf()
    assert recorder.count == 1
    assert tf.replace(sample_tf()) is False
    assert recorder.count == 1


def test_replace_whole_function_all_or_nothing(tf):
    before = tf.get_transfer_function()
    broken = TransferFunction(alpha_stops=((0, 0), (1, 1)), color_map=ColorMap(discrete=True, bins=0))
    with pytest.raises(DegenerateBinsError):
        tf.replace(broken)
    assert tf.get_transfer_function() == before


def test_listener_called_immediately(tf, recorder):
    tf.add_listener(recorder)
    assert recorder.calls == [tf]


def test_each_mutation_notifies_once(tf, recorder):
    tf.add_listener(recorder)
    recorder.reset()
    tf.add_alpha_stop(0.2, 0.1)
    tf.move_alpha_stop_to(1, 0.3)
    tf.add_color_stop(0.7, "blue")
    tf.set_interpolation_method("RGB")
    tf.set_discrete(True)
    tf.set_bins(3)
    tf.replace_color_map(ColorMap())
    assert recorder.count == 7
    assert all(call is tf for call in recorder.calls)


def test_drag_notifies_per_step(tf, recorder):
    tf.add_listener(recorder)
    recorder.reset()
    for p in (0.55, 0.6, 0.65, 0.7):
        tf.move_alpha_stop_to(1, p)
    assert recorder.count == 4


def test_rejected_and_noop_mutations_are_silent(tf, recorder):
    tf.set_discrete(True)
    tf.add_listener(recorder)
    recorder.reset()
    with pytest.raises(OutOfRangeError):
        tf.add_alpha_stop(2.0, 0.5)
    with pytest.raises(DegenerateBinsError):
        tf.set_bins(0)
    tf.set_interpolation_method(tf.interpolation_method)
    tf.remove_color_stop_at(0)
    tf.move_alpha_stop_to(1, 0.5)
    assert recorder.count == 0


def test_direct_collection_edits_notify(tf, recorder):
    tf.add_listener(recorder)
    recorder.reset()
    tf.alpha_collection.add(0.3, 0.3)
    tf.color_map_model.set_bins(2)
    assert recorder.count == 2


def test_listener_sees_new_state(tf):
    seen = []
    tf.add_listener(lambda model: seen.append(model.alpha_stops))
    tf.move_alpha_stop_to(1, 0.9, 0.2)
    assert seen[-1][1] == AlphaStop(0.9, 0.2)


def test_remove_listener(tf, recorder):
    listener_id = tf.add_listener(recorder)
    assert tf.remove_listener(listener_id) is True
    tf.set_bins(2)
    assert recorder.count == 1
    assert tf.remove_listener(listener_id) is False


def test_default_map_stays_between_green_and_red(tf):
    # HSL_LONG blends hue as a number: green (120) to yellow (60) to red (0)
    for position in (0.1, 0.25, 0.4):
        h, s, _ = tf.sample_color(position).convert("hsl")
        assert 60 <= h <= 120
        assert s > 0.9
    h, _, _ = tf.sample_color(0.75).convert("hsl")
    assert 0 <= h <= 60


def test_continuous_map_may_have_zero_bins():
    model = create_transfer_function(TransferFunction(
        alpha_stops=((0, 0), (1, 1)),
        color_map=ColorMap([(0, "blue"), (1, "red")], "RGB", False, 0),
    ))
    assert model.bins == 0
    assert model.get_bins() == []
    assert model.sample_color(0.5).value == pytest.approx((0.5, 0.0, 0.5, 1.0))
    with pytest.raises(DegenerateBinsError):
        model.set_discrete(True)
    assert not model.discrete
