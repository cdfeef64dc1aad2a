from __future__ import annotations

from PIL import Image

from .canvas import Canvas, unpack_color


def canvas_to_image(canvas: Canvas, swap_red_blue: bool = False) -> Image.Image:
    """Build an RGB Pillow image showing what a BMP viewer displays for the canvas.

    Viewers read each stored pixel as blue, green, red. Without the swap the
    canvas low byte is written first and therefore shows up as blue.
    """
    img = Image.new("RGB", (canvas.width, canvas.height))
    data = []
    for value in canvas.cells:
        c0, c1, c2 = unpack_color(value)
        if swap_red_blue:
            data.append((c0, c1, c2))
        else:
            data.append((c2, c1, c0))
    img.putdata(data)
    return img


def save_preview(path: str, canvas: Canvas, swap_red_blue: bool = False) -> None:
    img = canvas_to_image(canvas, swap_red_blue)
    try:
        img.save(path)
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"Failed to save preview {path}: {exc}") from exc
