"""Basic tfeditor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from tfeditor import (
    ColorMap,
    InterpolationMethod,
    TransferFunction,
    create_color_picker,
    create_transfer_function,
)
from tfeditor.serialization import from_json, to_json


def demonstrate_stops() -> None:
    # A bone-like ramp: transparent air, opaque dense tissue.
    tf = create_transfer_function(TransferFunction(
        alpha_stops=((0.0, 0.0), (0.3, 0.05), (1.0, 1.0)),
        color_map=ColorMap([(0.0, "black"), (0.4, "#c05030"), (1.0, "ivory")], "LAB"),
    ))
    tf.add_listener(lambda model: print("  changed, stops:", len(model.alpha_stops)))

    index = tf.add_alpha_stop(0.6)
    print("Inserted alpha stop", index, "at", tf.alpha_stops[index])

    # Dragging keeps the stop between its neighbors.
    print("Dragged to:", tf.move_alpha_stop_to(index, 0.2))

    for position in (0.0, 0.5, 1.0):
        print(f"  {position:.1f} -> {tf.sample_color_with_alpha(position).hex8}")


def demonstrate_methods() -> None:
    # Same two stops, every interpolation method, sampled at the middle.
    tf = create_transfer_function(TransferFunction(
        color_map=ColorMap([(0.0, "red"), (1.0, "blue")], "RGB"),
    ))
    for method in InterpolationMethod:
        tf.set_interpolation_method(method)
        print(f"{method.value:>16}: {tf.sample_color(0.5).hex}")


def demonstrate_discrete() -> None:
    tf = create_transfer_function()
    tf.set_discrete(True)
    tf.set_bins(4)
    for b in tf.get_bins():
        print(f"[{b.lower_bound:.2f}, {b.upper_bound:.2f}) {b.color.hex}")


def demonstrate_picker() -> None:
    picker = create_color_picker("#3080ff")
    picker.set_saturation_value(0.0, 1.0)
    print("Desaturated:", picker.get_hex(), "hue kept at", round(picker.get_hsv().h, 1))
    picker.set_saturation_value(1.0, 1.0)
    print("Saturated again:", picker.get_hex())


def demonstrate_serialization() -> None:
    text = to_json(create_transfer_function().get_transfer_function(), indent=2)
    print(text)
    print("Round trip equal:", from_json(text) == TransferFunction())


if __name__ == "__main__":
    demonstrate_stops()
    demonstrate_methods()
    demonstrate_discrete()
    demonstrate_picker()
    demonstrate_serialization()
