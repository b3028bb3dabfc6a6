# blueprint/__main__.py
"""Render a layout JSON file to SVG: python -m blueprint layout.json -o plan.svg"""
import argparse
import logging
import sys
from pathlib import Path

from blueprint.layout import HouseLayout
from blueprint.renderer import render_svg


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="blueprint", description=__doc__)
    parser.add_argument("layout", help="path to a HouseLayout JSON file, or - for stdin")
    parser.add_argument("-o", "--output", help="write the SVG here instead of stdout")
    parser.add_argument("--width", type=float, default=900, help="canvas width in pixels")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    raw = sys.stdin.read() if args.layout == "-" else Path(args.layout).read_text()
    svg = render_svg(HouseLayout.model_validate_json(raw), args.width)

    if args.output:
        Path(args.output).write_text(svg)
    else:
        sys.stdout.write(svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
