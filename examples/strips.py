"""Render one strip per interpolation method into a single image.

Run directly with:
    python examples/strips.py [output.png]
"""
import sys

from PIL import Image, ImageDraw

from tfeditor import ColorMap, InterpolationMethod, TransferFunction, create_transfer_function
from tfeditor.raster import render_image


def method_strips(output_path: str | None = None, show: bool = False):
    strip_width = 512
    strip_height = 24
    label_width = 140
    methods = list(InterpolationMethod)

    tf = create_transfer_function(TransferFunction(
        alpha_stops=((0.0, 0.2), (0.5, 1.0), (1.0, 0.2)),
        color_map=ColorMap([(0.0, "#2040ff"), (0.5, "#f0f0f0"), (1.0, "#ff4020")], "RGB"),
    ))

    canvas = Image.new('RGB', (label_width + strip_width, strip_height * len(methods)), 'white')
    draw = ImageDraw.Draw(canvas)
    frame_list = []
    for row, method in enumerate(methods):
        tf.set_interpolation_method(method)
        # Composite over gray so the faded ends stay visible.
        img = render_image(tf, width=strip_width, height=strip_height, background="#808080")
        canvas.paste(img, (label_width, row * strip_height))
        draw.text((4, row * strip_height + 6), method.value, fill=(0, 0, 0))
        frame_list.append(img)
    if output_path:
        canvas.save(output_path)
    elif show:
        canvas.show()
    return frame_list


def discrete_strip(bins: int = 7, output_path: str | None = None):
    tf = create_transfer_function()
    tf.set_discrete(True)
    tf.set_bins(bins)
    img = render_image(tf, width=bins * 32, height=32)
    if output_path:
        img.save(output_path)
    return img


if __name__ == "__main__":
    method_strips(sys.argv[1] if len(sys.argv) > 1 else None, show=len(sys.argv) == 1)
