from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..render import DEFAULT_HEIGHT, DEFAULT_OUTPUT, DEFAULT_WIDTH, BullseyeBuilder, RenderSettings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="ringbmp: draw a bullseye of midpoint circles into a 24-bit BMP file."
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help=f"Image width (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help=f"Image height (default: {DEFAULT_HEIGHT})")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"Output file (default: {DEFAULT_OUTPUT})")
    parser.add_argument(
        "--swap-red-blue",
        action="store_true",
        help="Write pixels in conventional BGR order instead of canvas byte order",
    )
    parser.add_argument("--checked", action="store_true", help="Bounds-check every pixel write")
    parser.add_argument("--preview", metavar="PATH", help="Also save a Pillow preview image (e.g. preview.png)")
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings(
        width=args.width,
        height=args.height,
        output=args.output,
        swap_red_blue=args.swap_red_blue,
        checked=args.checked,
        preview=args.preview,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = _settings_from_args(args)
    try:
        written = BullseyeBuilder(settings).write()
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(f"Wrote {settings.output} ({settings.width}x{settings.height}, {written} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
