import io
import os
import struct
import tempfile
import unittest
from unittest import mock

from PIL import Image

from ringbmp.bitmap import (
    HEADER_SIZE,
    build_metadata,
    encode_bitmap,
    iter_rows,
    row_stride,
    save_bitmap,
    write_bitmap,
)
from ringbmp.errors import BitmapIOError
from ringbmp.imaging import Canvas, draw_bullseye

HEADER_FORMAT = "<2sIIIIiiHHIIiiII"


def read_header(data):
    return struct.unpack(HEADER_FORMAT, data[:HEADER_SIZE])


class TestRowStride(unittest.TestCase):
    def test_padded_to_four_bytes(self):
        for width in range(1, 65):
            stride = row_stride(width)
            self.assertEqual(stride % 4, 0)
            self.assertGreaterEqual(stride, width * 3)
            self.assertLess(stride, width * 3 + 4)

    def test_known_values(self):
        self.assertEqual(row_stride(4), 12)
        self.assertEqual(row_stride(5), 16)
        self.assertEqual(row_stride(175), 528)


class TestMetadata(unittest.TestCase):
    def test_header_layout(self):
        header = build_metadata(4, 2).to_bytes()
        self.assertEqual(len(header), 54)
        self.assertEqual(header[:2], b"BM")
        self.assertEqual(int.from_bytes(header[10:14], "little"), 54)
        self.assertEqual(int.from_bytes(header[2:6], "little"), 54 + 12 * 2)

    def test_round_trip(self):
        for width, height in ((1, 1), (4, 2), (5, 3), (1024, 768)):
            fields = read_header(build_metadata(width, height).to_bytes())
            magic, file_size, reserved, offset, info_size, w, h, planes, bpp, compression, image_size = fields[:11]
            self.assertEqual(magic, b"BM")
            self.assertEqual((w, h), (width, height))
            self.assertEqual(image_size, row_stride(width) * height)
            self.assertEqual(file_size, image_size + 54)
            self.assertEqual((reserved, offset, info_size, planes, bpp, compression), (0, 54, 40, 1, 24, 0))
            self.assertEqual(fields[11:], (0, 0, 0, 0))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            build_metadata(0, 1)


class TestEncoding(unittest.TestCase):
    def setUp(self):
        self.canvas = Canvas.create(5, 3)
        self.canvas.set_pixel(0, 0, 1, 2, 3)
        self.canvas.set_pixel(4, 2, 7, 8, 9)

    def test_file_size(self):
        for width, height in ((1, 1), (2, 7), (5, 3), (13, 4)):
            data = encode_bitmap(Canvas.create(width, height))
            self.assertEqual(len(data), 54 + row_stride(width) * height)

    def test_rows_are_bottom_up(self):
        data = encode_bitmap(self.canvas)
        stride = row_stride(5)
        top_row = data[54 + 2 * stride : 54 + 3 * stride]
        bottom_row = data[54 : 54 + stride]
        self.assertEqual(top_row[:3], bytes([1, 2, 3]))
        self.assertEqual(bottom_row[12:15], bytes([7, 8, 9]))

    def test_padding_is_zero(self):
        self.canvas.set_pixel(4, 1, 255, 255, 255)
        for row in iter_rows(self.canvas):
            self.assertEqual(len(row), 16)
            self.assertEqual(row[15], 0)

    def test_swap_red_blue(self):
        data = encode_bitmap(self.canvas, swap_red_blue=True)
        top_row = data[54 + 2 * 16 :]
        self.assertEqual(top_row[:3], bytes([3, 2, 1]))

    def test_idempotent(self):
        draw_bullseye(self.canvas)
        self.assertEqual(encode_bitmap(self.canvas), encode_bitmap(self.canvas))

    def test_write_bitmap_to_stream(self):
        stream = io.BytesIO()
        written = write_bitmap(self.canvas, stream)
        self.assertEqual(written, 54 + 16 * 3)
        self.assertEqual(stream.getvalue(), encode_bitmap(self.canvas))

    def test_pillow_decodes_channel_order(self):
        with Image.open(io.BytesIO(encode_bitmap(self.canvas))) as img:
            self.assertEqual(img.size, (5, 3))
            rgb = img.convert("RGB")
            self.assertEqual(rgb.getpixel((0, 0)), (3, 2, 1))
            self.assertEqual(rgb.getpixel((4, 2)), (9, 8, 7))
            self.assertEqual(rgb.getpixel((2, 1)), (0, 0, 0))
        with Image.open(io.BytesIO(encode_bitmap(self.canvas, swap_red_blue=True))) as img:
            self.assertEqual(img.convert("RGB").getpixel((0, 0)), (1, 2, 3))


class TestSaveBitmap(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.canvas = Canvas.create(4, 2)

    def test_writes_file(self):
        path = os.path.join(self.tmp.name, "out.bmp")
        self.assertEqual(save_bitmap(path, self.canvas), 78)
        with open(path, "rb") as handle:
            self.assertEqual(handle.read(), encode_bitmap(self.canvas))

    def test_bytes_are_not_translated(self):
        self.canvas.set_pixel(0, 0, 0x0A, 0x0D, 0x0A)
        path = os.path.join(self.tmp.name, "newlines.bmp")
        save_bitmap(path, self.canvas)
        self.assertEqual(os.path.getsize(path), 78)

    def test_unopenable_sink(self):
        path = os.path.join(self.tmp.name, "missing", "out.bmp")
        with self.assertRaises(BitmapIOError) as ctx:
            save_bitmap(path, self.canvas)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertEqual(ctx.exception.path, path)
        self.assertFalse(os.path.exists(path))

    def test_failed_write_removes_partial_file(self):
        path = os.path.join(self.tmp.name, "partial.bmp")
        failure = OSError(28, "No space left on device")
        with mock.patch("ringbmp.bitmap.writer.write_bitmap", side_effect=failure):
            with self.assertRaises(BitmapIOError) as ctx:
                save_bitmap(path, self.canvas)
        self.assertIn("No space left on device", str(ctx.exception))
        self.assertFalse(os.path.exists(path))

    def test_released_canvas_leaves_no_file(self):
        path = os.path.join(self.tmp.name, "released.bmp")
        self.canvas.release()
        with self.assertRaises(RuntimeError):
            save_bitmap(path, self.canvas)
        self.assertFalse(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
