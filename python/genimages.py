"""
Batch image generation from markdown documents.

Diagrams are declared with markdown comment lines, name and spec separated
by two spaces:

    [//]: # (sune  xUx===xDx)
    [//]: # (uperm  2>4 4>6 6>2)

Each declaration is rendered to <dest>/<name>.svg.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from cube_types import FaceDescriptor, ParseError, Program, SizeConfig
from oll_parser import parse_face_descriptor
from oll_render import render_oll_face
from pll_parser import parse_pll_program
from pll_render import render_pll_face

__all__ = ["ImageSpec", "ImageDesc", "ImageSpecError", "scan_lines", "render_descs", "generate_images"]

logger = logging.getLogger(__name__)

IMAGE_DESC_RE = re.compile(r"#\s*\(([A-Za-z0-9]+)  (.*)\)")


class ImageSpecError(ValueError):
    """A diagram declaration that is neither valid OLL nor valid PLL."""


@dataclass(frozen=True)
class ImageSpec:
    """A parsed diagram: exactly one of oll/pll is set."""

    oll: FaceDescriptor | None = None
    pll: Program | None = None

    @classmethod
    def from_text(cls, text: str) -> ImageSpec:
        """
        Detect the notation and parse.

        '=' anywhere means OLL; otherwise '<' or '>' means PLL.
        """
        if "=" in text:
            return cls(oll=parse_face_descriptor(text))
        if "<" in text or ">" in text:
            return cls(pll=parse_pll_program(text))
        raise ImageSpecError(
            f"'{text}' is not a valid image spec\n"
            f"  OLL specs contain '=' (e.g. 'xUx===xDx')\n"
            f"  PLL specs contain '<' or '>' (e.g. '1<2 3>4')"
        )

    def render(self, cfg: SizeConfig) -> str:
        if self.oll is not None:
            return render_oll_face(self.oll, cfg)
        if self.pll is not None:
            return render_pll_face(self.pll, cfg)
        raise ImageSpecError("ImageSpec has neither an OLL nor a PLL diagram")


@dataclass(frozen=True)
class ImageDesc:
    """One declaration found in the input."""

    file_stem: str
    spec: ImageSpec
    line_number: int


def scan_lines(lines: Iterable[str]) -> Iterator[ImageDesc]:
    """Yield a parsed ImageDesc for every declaration line (1-based line numbers)."""
    for line_number, line in enumerate(lines, start=1):
        match = IMAGE_DESC_RE.search(line)
        if match is None:
            continue

        file_stem, spec_text = match.group(1), match.group(2)
        try:
            spec = ImageSpec.from_text(spec_text)
        except (ParseError, ImageSpecError) as e:
            raise ImageSpecError(
                f"Invalid image spec for '{file_stem}' on line {line_number}: '{spec_text}'\n{e}"
            ) from e

        yield ImageDesc(file_stem, spec, line_number)


def render_descs(descs: Iterable[ImageDesc], dest_dir: Path, cfg: SizeConfig) -> list[Path]:
    """Write one SVG per declaration, returning the paths written."""
    dest_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for desc in descs:
        full_path = (dest_dir / desc.file_stem).with_suffix(".svg")
        full_path.write_text(desc.spec.render(cfg) + "\n", encoding="utf-8")
        logger.info("Wrote %s (line %d)", full_path, desc.line_number)
        written.append(full_path)
    return written


def generate_images(input_path: Path, dest_dir: Path, cfg: SizeConfig) -> list[Path]:
    """
    Scan a markdown file and render every declared diagram.

    The whole input is validated before any file is written.
    """
    with input_path.open(encoding="utf-8") as f:
        descs = list(scan_lines(f))

    logger.info("Found %d image declarations in %s", len(descs), input_path)
    return render_descs(descs, dest_dir, cfg)
