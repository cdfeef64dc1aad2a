from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bitmap import encode_bitmap, save_bitmap
from .imaging import Canvas, CheckedCanvas, bullseye_fits, draw_bullseye, save_preview

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 1024
DEFAULT_OUTPUT = "myBitmap.bmp"


@dataclass
class RenderSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    output: str = DEFAULT_OUTPUT
    swap_red_blue: bool = False
    checked: bool = False
    preview: Optional[str] = None


class BullseyeBuilder:
    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()

    def build(self) -> Canvas:
        """Create a canvas and draw the concentric rings into it."""
        width = self.settings.width
        height = self.settings.height
        # Non-positive sizes are left to Canvas.create, which raises AllocationError.
        if width > 0 and height > 0 and not bullseye_fits(width, height):
            raise ValueError(f"Bullseye rings do not fit a {width}x{height} canvas")
        canvas_cls = CheckedCanvas if self.settings.checked else Canvas
        canvas = canvas_cls.create(width, height)
        try:
            draw_bullseye(canvas)
        except Exception:
            canvas.release()
            raise
        return canvas

    def build_bytes(self) -> bytes:
        with self.build() as canvas:
            return encode_bitmap(canvas, self.settings.swap_red_blue)

    def write(self) -> int:
        """Render and save the bitmap (and optional preview); return the bitmap size."""
        canvas = self.build()
        try:
            written = save_bitmap(self.settings.output, canvas, self.settings.swap_red_blue)
            if self.settings.preview:
                save_preview(self.settings.preview, canvas, self.settings.swap_red_blue)
            return written
        finally:
            canvas.release()
