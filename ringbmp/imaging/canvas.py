from __future__ import annotations

from typing import List, Optional, Tuple

from ..errors import AllocationError


def pixel_index(x: int, y: int, width: int) -> int:
    """Return the flat buffer index of (x, y) in a row-major canvas."""
    return x + y * width


def pack_color(c0: int, c1: int, c2: int) -> int:
    """Pack three 8-bit channels into one int, channel 0 in the lowest byte."""
    return (c0 & 0xFF) | ((c1 & 0xFF) << 8) | ((c2 & 0xFF) << 16)


def unpack_color(value: int) -> Tuple[int, int, int]:
    """Return the three lowest-order bytes of a packed color."""
    return value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF


class Canvas:
    """Row-major grid of packed colors, zero (black) on creation.

    Pixel writes are unchecked: coordinates outside the canvas may raise
    IndexError or land on another cell. Use CheckedCanvas when that matters.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise AllocationError(f"Invalid canvas size {width}x{height}")
        try:
            cells = [0] * (width * height)
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"Failed to allocate {width}x{height} pixel buffer") from exc
        self.width = width
        self.height = height
        self._cells: Optional[List[int]] = cells

    @classmethod
    def create(cls, width: int, height: int) -> "Canvas":
        return cls(width, height)

    @property
    def cells(self) -> List[int]:
        if self._cells is None:
            raise RuntimeError("Canvas has been released")
        return self._cells

    @property
    def released(self) -> bool:
        return self._cells is None

    def set_pixel(self, x: int, y: int, c0: int, c1: int, c2: int) -> None:
        self._cells[x + y * self.width] = pack_color(c0, c1, c2)

    def get_pixel(self, x: int, y: int) -> int:
        return self._cells[x + y * self.width]

    def release(self) -> None:
        self._cells = None

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class CheckedCanvas(Canvas):
    """Canvas that validates every write and records where it landed."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.writes: List[Tuple[int, int]] = []

    def set_pixel(self, x: int, y: int, c0: int, c1: int, c2: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        for channel in (c0, c1, c2):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value out of range: {channel}")
        self.writes.append((x, y))
        self.cells[pixel_index(x, y, self.width)] = pack_color(c0, c1, c2)

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self.cells[pixel_index(x, y, self.width)]
