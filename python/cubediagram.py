#!/usr/bin/env python3
"""
Cube face diagrams: OLL descriptors and PLL arrow programs rendered to SVG.

Library entry points:

    parse_face_descriptor("xUx===xDx") -> FaceDescriptor
    render_oll_face(desc, SizeConfig.from_cubie_size(25)) -> str

    parse_pll_program("1<2 3>4 5<>6") -> Program
    render_pll_face(program, SizeConfig.from_cubie_size(25)) -> str

Command line:

    cubediagram oll "xUx===xDx" > sune.svg
    cubediagram pll "2>4 4>6 6>2" -w 50 > uperm.svg
    cubediagram preview "xUx===xDx"
    cubediagram genimages algorithms.md -d images/
    cubediagram prettytable algorithms.md
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_oll_ascii, render_pll_ascii
from cube_types import (
    DEFAULT_CUBIE_SIZE,
    Cubie,
    ExpectedDigit,
    FaceDescriptor,
    IllegalOrientationForPosition,
    MalformedDescriptor,
    OllParseError,
    Operator,
    Orientation,
    OutOfRangeCubie,
    ParseError,
    PllParseError,
    Program,
    SizeConfig,
    Statement,
    UnexpectedOperatorToken,
    UnknownOrientationChar,
)
from genimages import ImageSpec, ImageSpecError, generate_images
from markdown_tables import prettify_file
from oll_parser import format_face_descriptor, parse_face_descriptor
from oll_render import render_oll_face
from pll_parser import format_pll_program, parse_pll_program
from pll_render import render_pll_face

__all__ = [
    "SizeConfig",
    "Orientation",
    "FaceDescriptor",
    "Cubie",
    "Operator",
    "Statement",
    "Program",
    "ParseError",
    "OllParseError",
    "PllParseError",
    "UnknownOrientationChar",
    "IllegalOrientationForPosition",
    "MalformedDescriptor",
    "ExpectedDigit",
    "OutOfRangeCubie",
    "UnexpectedOperatorToken",
    "parse_face_descriptor",
    "format_face_descriptor",
    "render_oll_face",
    "parse_pll_program",
    "format_pll_program",
    "render_pll_face",
    "main",
]

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if size <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cubediagram", description="Render cube face diagrams as SVG.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress at INFO level")

    sub = parser.add_subparsers(dest="command", required=True)

    size_help = f"width of each cubie in pixels (default {DEFAULT_CUBIE_SIZE})"

    oll = sub.add_parser("oll", help="print an OLL diagram")
    oll.add_argument("descriptor", help="nine orientation characters, e.g. 'xUx===xDx'")
    oll.add_argument("-w", "--cubie-size", type=_positive_int, default=DEFAULT_CUBIE_SIZE, help=size_help)

    pll = sub.add_parser("pll", help="print a PLL diagram")
    pll.add_argument("program", help="arrow statements, e.g. '1<2 3>4 5<>6'")
    pll.add_argument("-w", "--cubie-size", type=_positive_int, default=DEFAULT_CUBIE_SIZE, help=size_help)

    preview = sub.add_parser("preview", help="show a colored text preview of an OLL or PLL spec")
    preview.add_argument("spec")

    gen = sub.add_parser("genimages", help="render every diagram declared in a markdown file")
    gen.add_argument("input", type=Path)
    gen.add_argument("-d", "--dest", type=Path, default=Path("images"), help="destination directory (default images/)")
    gen.add_argument("-w", "--cubie-size", type=_positive_int, default=DEFAULT_CUBIE_SIZE, help=size_help)

    table = sub.add_parser("prettytable", help="align the tables in a markdown file")
    table.add_argument("input", type=Path)

    return parser


def preview_panel(spec: ImageSpec) -> Panel:
    """Wrap the ASCII preview of a spec in a titled panel."""
    if spec.oll is not None:
        body = render_oll_ascii(spec.oll)
        title = f"OLL {format_face_descriptor(spec.oll)}"
    elif spec.pll is not None:
        body = render_pll_ascii(spec.pll)
        title = f"PLL {format_pll_program(spec.pll)}" if len(spec.pll) else "PLL (no arrows)"
    else:
        raise ImageSpecError("ImageSpec has neither an OLL nor a PLL diagram")
    return Panel(Text.from_ansi(body), title=title, border_style="yellow")


def run(args: argparse.Namespace, console: Console) -> None:
    match args.command:
        case "oll":
            cfg = SizeConfig.from_cubie_size(args.cubie_size)
            print(render_oll_face(parse_face_descriptor(args.descriptor), cfg))
        case "pll":
            cfg = SizeConfig.from_cubie_size(args.cubie_size)
            print(render_pll_face(parse_pll_program(args.program), cfg))
        case "preview":
            console.print(preview_panel(ImageSpec.from_text(args.spec)))
        case "genimages":
            cfg = SizeConfig.from_cubie_size(args.cubie_size)
            written = generate_images(args.input, args.dest, cfg)
            console.print(f"Wrote {len(written)} image(s) to {args.dest}")
        case "prettytable":
            print(prettify_file(args.input))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    console = Console()
    err_console = Console(stderr=True)

    try:
        run(args, console)
    except (ParseError, ImageSpecError, OSError) as e:
        err_console.print(Text(f"ERROR: {e}", style="bold red"))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
