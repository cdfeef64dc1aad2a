from .encoding import encode_bitmap, iter_rows, pack_row, write_bitmap
from .header import BITS_PER_PIXEL, HEADER_SIZE, FileMetadata, build_metadata, row_stride
from .writer import save_bitmap

__all__ = [
    "BITS_PER_PIXEL",
    "build_metadata",
    "encode_bitmap",
    "FileMetadata",
    "HEADER_SIZE",
    "iter_rows",
    "pack_row",
    "row_stride",
    "save_bitmap",
    "write_bitmap",
]
