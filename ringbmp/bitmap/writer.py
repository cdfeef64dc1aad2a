from __future__ import annotations

import os

from ..errors import BitmapIOError
from ..imaging.canvas import Canvas
from .encoding import write_bitmap


def save_bitmap(path: str, canvas: Canvas, swap_red_blue: bool = False) -> int:
    """Write the canvas to path as a 24-bit BMP and return the file size.

    The file is opened in binary mode and closed on every path. A file left
    half written by a failed write is removed.
    """
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise BitmapIOError(path, exc.strerror or str(exc)) from exc
    try:
        with handle:
            return write_bitmap(canvas, handle, swap_red_blue)
    except OSError as exc:
        _remove_partial(path)
        raise BitmapIOError(path, exc.strerror or str(exc)) from exc
    except Exception:
        _remove_partial(path)
        raise


def _remove_partial(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)
