from __future__ import annotations

from typing import BinaryIO, Iterator

from ..imaging.canvas import Canvas
from .header import build_metadata, row_stride


def pack_row(canvas: Canvas, y: int, buffer: bytearray, swap_red_blue: bool = False) -> bytearray:
    """Pack one canvas row into 3-byte pixels, leaving the padding bytes untouched.

    The low, mid and high bytes of each cell go to 3x, 3x+1 and 3x+2. With
    swap_red_blue the high byte comes first instead.
    """
    width = canvas.width
    cells = canvas.cells
    start = y * width
    for x in range(width):
        value = cells[start + x]
        offset = x * 3
        if swap_red_blue:
            buffer[offset] = (value >> 16) & 0xFF
            buffer[offset + 2] = value & 0xFF
        else:
            buffer[offset] = value & 0xFF
            buffer[offset + 2] = (value >> 16) & 0xFF
        buffer[offset + 1] = (value >> 8) & 0xFF
    return buffer


def iter_rows(canvas: Canvas, swap_red_blue: bool = False) -> Iterator[bytes]:
    """Yield padded scanlines bottom-up, as stored in a BMP file."""
    buffer = bytearray(row_stride(canvas.width))
    for y in range(canvas.height - 1, -1, -1):
        pack_row(canvas, y, buffer, swap_red_blue)
        yield bytes(buffer)


def write_bitmap(canvas: Canvas, stream: BinaryIO, swap_red_blue: bool = False) -> int:
    """Write the header and pixel rows to a binary stream; return bytes written."""
    metadata = build_metadata(canvas.width, canvas.height)
    header = metadata.to_bytes()
    stream.write(header)
    written = len(header)
    for row in iter_rows(canvas, swap_red_blue):
        stream.write(row)
        written += len(row)
    return written


def encode_bitmap(canvas: Canvas, swap_red_blue: bool = False) -> bytes:
    """Encode the whole bitmap file in memory."""
    out = bytearray(build_metadata(canvas.width, canvas.height).to_bytes())
    for row in iter_rows(canvas, swap_red_blue):
        out += row
    return bytes(out)
