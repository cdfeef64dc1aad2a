from __future__ import annotations

from typing import Iterator, List, Tuple

from .canvas import Canvas

Point = Tuple[int, int]


def step_color(x: int, y: int) -> Tuple[int, int, int]:
    """Color for one rasterization step, derived from the local x/y."""
    return x % 256, y % 256, 255 - (x % 256)


def circle_octants(center_x: int, center_y: int, x: int, y: int) -> List[Point]:
    """Return the 8 symmetric points of (x, y) around the center, duplicates kept."""
    return [
        (center_x + x, center_y + y),
        (center_x - x, center_y + y),
        (center_x + x, center_y - y),
        (center_x - x, center_y - y),
        (center_x + y, center_y + x),
        (center_x - y, center_y + x),
        (center_x + y, center_y - x),
        (center_x - y, center_y - x),
    ]


def _plot_octants(canvas: Canvas, center_x: int, center_y: int, x: int, y: int) -> None:
    c0, c1, c2 = step_color(x, y)
    for px, py in circle_octants(center_x, center_y, x, y):
        canvas.set_pixel(px, py, c0, c1, c2)


def circle_steps(radius: int) -> Iterator[Point]:
    """Yield the local (x, y) of every emission of the midpoint circle algorithm.

    Each loop pass emits twice: once before and once after the decision update.
    """
    x = 0
    y = radius
    d = 3 - 2 * radius
    while y >= x:
        yield x, y
        x += 1
        if d > 0:
            y -= 1
            d = d + 4 * (x - y) + 10
        else:
            d = d + 4 * x + 6
        yield x, y


def draw_circle(canvas: Canvas, center_x: int, center_y: int, radius: int) -> None:
    """Paint a circle outline. No clipping: the circle must fit the canvas."""
    for x, y in circle_steps(radius):
        _plot_octants(canvas, center_x, center_y, x, y)


def bullseye_radii(width: int, height: int) -> range:
    """Radii of the concentric rings, largest first, down to 1."""
    return range(max(width, height) // 2 - 1, 0, -1)


def bullseye_fits(width: int, height: int) -> bool:
    """True when every ring of the bullseye stays inside the canvas."""
    radii = bullseye_radii(width, height)
    if not radii:
        return True
    largest = radii[0]
    cx, cy = width // 2, height // 2
    return cx - largest >= 0 and cx + largest < width and cy - largest >= 0 and cy + largest < height


def draw_bullseye(canvas: Canvas) -> int:
    """Draw concentric circles centered on the canvas; return the ring count."""
    center_x = canvas.width // 2
    center_y = canvas.height // 2
    count = 0
    for radius in bullseye_radii(canvas.width, canvas.height):
        draw_circle(canvas, center_x, center_y, radius)
        count += 1
    return count
