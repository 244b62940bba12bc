"""
Layout geometry for a 3x3 cube face diagram.

The canvas is a square made of (outside in): a sticker band, a gutter, the
black background square with its border, and the nine cubies separated by
gutters. All offsets are integer pixels derived from a SizeConfig.
"""

from __future__ import annotations

from typing import Sequence

from cube_types import FACE_POSITIONS, Orientation, SizeConfig
from svg_builder import Path, Tag

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# For each face position, the edges a sticker may sit on.
# FACE and EMPTY are legal everywhere and are not listed.
LEGAL_ORIENTATIONS: tuple[frozenset[Orientation], ...] = (
    frozenset({Orientation.LEFT, Orientation.UP}),
    frozenset({Orientation.UP}),
    frozenset({Orientation.RIGHT, Orientation.UP}),
    frozenset({Orientation.LEFT}),
    frozenset(),  # Center has no outer edge
    frozenset({Orientation.RIGHT}),
    frozenset({Orientation.LEFT, Orientation.DOWN}),
    frozenset({Orientation.DOWN}),
    frozenset({Orientation.RIGHT, Orientation.DOWN}),
)


# =============================================================================
# Offsets
# =============================================================================


def big_square_size(cfg: SizeConfig) -> int:
    """border * 2 + gutter * 4 + cubie * 3"""
    return cfg.border_width * 2 + cfg.gutter_size * 4 + cfg.cubie_size * 3


def canvas_size(cfg: SizeConfig) -> int:
    return big_square_size(cfg) + cfg.gutter_size * 2 + cfg.sticker_width * 2


def row_or_col_start(idx: int, cfg: SizeConfig) -> int:
    """Top-left pixel offset of grid row or column idx (0, 1 or 2)."""
    if idx not in (0, 1, 2):
        raise ValueError(f"Row/column index must be 0, 1 or 2, got {idx}")
    return cfg.sticker_width + cfg.gutter_size * (2 + idx) + cfg.border_width + cfg.cubie_size * idx


def cell_center(idx: int, cfg: SizeConfig) -> int:
    return row_or_col_start(idx, cfg) + cfg.cubie_size // 2


def far_band_start(cfg: SizeConfig) -> int:
    """Offset of the sticker band on the right (x) or bottom (y) side."""
    return big_square_size(cfg) + cfg.sticker_width + cfg.gutter_size * 2


# =============================================================================
# Primitives
# =============================================================================


def _rect_path(x: int, y: int, width: int, height: int) -> str:
    return Path().M(x, y).h(width).v(height).h(-width).v(-height).output()


def render_square(x: int, y: int, width: int, fill: str) -> str:
    tag = Tag("path").attr("fill", fill).attr("border-width", 0).attr("d", _rect_path(x, y, width, width))
    return tag.element()


def render_rect(x: int, y: int, width: int, height: int, fill: str) -> str:
    """A stroked rectangle, used for stickers."""
    tag = (
        Tag("path")
        .attr("fill", fill)
        .attr("stroke", "black")
        .attr("stroke-width", 2)
        .attr("d", _rect_path(x, y, width, height))
    )
    return tag.element()


def render_big_square(cfg: SizeConfig) -> str:
    """Black background; the gaps between cubies show it as grid lines."""
    offset = cfg.sticker_width + cfg.gutter_size
    return render_square(offset, offset, big_square_size(cfg), "black")


def render_small_squares(fills: Sequence[str], cfg: SizeConfig) -> str:
    if len(fills) != FACE_POSITIONS:
        raise ValueError(f"Expected {FACE_POSITIONS} fills, got {len(fills)}")

    parts: list[str] = []
    for idx, fill in enumerate(fills):
        row, col = divmod(idx, 3)
        x = row_or_col_start(col, cfg)
        y = row_or_col_start(row, cfg)
        parts.append(render_square(x, y, cfg.cubie_size, fill))
    return "".join(parts)


def svg_root(cfg: SizeConfig) -> Tag:
    size = canvas_size(cfg)
    return Tag("svg").attr("xmlns", SVG_NAMESPACE).attr("height", size).attr("width", size)
