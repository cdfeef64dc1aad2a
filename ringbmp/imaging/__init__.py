from .canvas import Canvas, CheckedCanvas, pack_color, pixel_index, unpack_color
from .preview import canvas_to_image, save_preview
from .raster import (
    bullseye_fits,
    bullseye_radii,
    circle_octants,
    circle_steps,
    draw_bullseye,
    draw_circle,
    step_color,
)

__all__ = [
    "bullseye_fits",
    "bullseye_radii",
    "Canvas",
    "canvas_to_image",
    "CheckedCanvas",
    "circle_octants",
    "circle_steps",
    "draw_bullseye",
    "draw_circle",
    "pack_color",
    "pixel_index",
    "save_preview",
    "step_color",
    "unpack_color",
]
