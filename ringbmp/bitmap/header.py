from __future__ import annotations

from dataclasses import astuple, dataclass

BITS_PER_PIXEL = 24
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
MAGIC = b"BM"

# Byte width of each FileMetadata field after the 2-byte magic, in file order.
_FIELD_WIDTHS = (4, 4, 4, 4, 4, 4, 2, 2, 4, 4, 4, 4, 4, 4)


def row_stride(width: int, bits: int = BITS_PER_PIXEL) -> int:
    """Bytes per scanline, rounded up to a 4-byte boundary."""
    return ((width * bits + 31) // 32) * 4


@dataclass(frozen=True)
class FileMetadata:
    """The 54-byte BMP file header plus BITMAPINFOHEADER."""

    magic: bytes
    file_size: int
    reserved: int
    image_offset: int
    header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    def to_bytes(self) -> bytes:
        """Serialize field by field, little-endian, with no padding."""
        if len(self.magic) != 2:
            raise ValueError("Magic tag must be exactly 2 bytes")
        out = bytearray(self.magic)
        values = astuple(self)[1:]
        for value, size in zip(values, _FIELD_WIDTHS):
            out += value.to_bytes(size, "little", signed=value < 0)
        return bytes(out)


def build_metadata(width: int, height: int) -> FileMetadata:
    """Derive the header of a 24-bit uncompressed bitmap from its dimensions."""
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be greater than zero")
    image_size = row_stride(width) * height
    return FileMetadata(
        magic=MAGIC,
        file_size=image_size + HEADER_SIZE,
        reserved=0,
        image_offset=HEADER_SIZE,
        header_size=INFO_HEADER_SIZE,
        width=width,
        height=height,
        planes=1,
        bit_count=BITS_PER_PIXEL,
        compression=0,
        image_size=image_size,
        x_pixels_per_meter=0,
        y_pixels_per_meter=0,
        colors_used=0,
        colors_important=0,
    )
