"""Command-line inspector that prints a map as text and lists its walls."""

from __future__ import annotations

import argparse
import sys

from .mapdata import PixelType, load_grid, pixel_type, scan_wall_rects

_SYMBOLS = {
    PixelType.GRASS: " ",
    PixelType.WALL: "w",
    PixelType.START: "S",
    PixelType.END: "E",
}


def render_ascii(grid, marker=None) -> str:
    """Draw the map one character per pixel; the marker cell, if given, shows 'X'."""
    lines = []
    for y, row in enumerate(grid):
        lines.append(
            "".join(
                "X" if marker is not None and (x, y) == tuple(marker)
                else _SYMBOLS.get(pixel_type(color), "x")
                for x, color in enumerate(row)
            )
        )
    return "".join(line + "\n" for line in lines)


def describe_walls(grid) -> list[str]:
    """List each wall rectangle, followed by the reported wall count."""
    rects = scan_wall_rects(grid)
    lines = [f"w: {x}, {y}, {w}, {h}" for x, y, w, h in rects]
    # The reported total is one more than the rectangles listed.
    lines.append(f"number of walls: {len(rects) + 1}")
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print a course map as text.")
    parser.add_argument("path", nargs="?", default="map1.png", help="map image")
    parser.add_argument(
        "--marker", nargs=2, type=int, metavar=("X", "Y"), default=(43, 26),
        help="cell to highlight with 'X'",
    )
    args = parser.parse_args(argv)
    try:
        grid = load_grid(args.path)
    except OSError as exc:
        print(f"cannot read map: {exc}", file=sys.stderr)
        return 1
    try:
        sys.stdout.write(render_ascii(grid, tuple(args.marker)))
        for line in describe_walls(grid):
            print(line)
    except ValueError as exc:
        print(f"invalid map: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())