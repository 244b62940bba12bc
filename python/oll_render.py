"""
SVG rendering for OLL face descriptors.
"""

from __future__ import annotations

import logging

from cube_types import FaceDescriptor, Orientation, SizeConfig
from face_layout import (
    canvas_size,
    far_band_start,
    render_big_square,
    render_rect,
    render_small_squares,
    row_or_col_start,
    svg_root,
)

__all__ = ["render_oll_face", "color_for_orientation"]

logger = logging.getLogger(__name__)

STICKER_COLOR = "yellow"


def color_for_orientation(orientation: Orientation) -> str:
    """Fill of the cubie itself. Directional cells are white; the sticker carries the color."""
    match orientation:
        case Orientation.FACE:
            return "yellow"
        case Orientation.EMPTY:
            return "gray"
        case _:
            return "white"


def render_sticker(position: int, orientation: Orientation, cfg: SizeConfig) -> str:
    """Sticker rectangle in the band next to position, or "" for FACE/EMPTY."""
    row, col = divmod(position, 3)

    match orientation:
        case Orientation.UP:
            return render_rect(row_or_col_start(col, cfg), 0, cfg.cubie_size, cfg.sticker_width, STICKER_COLOR)
        case Orientation.DOWN:
            return render_rect(
                row_or_col_start(col, cfg), far_band_start(cfg), cfg.cubie_size, cfg.sticker_width, STICKER_COLOR
            )
        case Orientation.LEFT:
            return render_rect(0, row_or_col_start(row, cfg), cfg.sticker_width, cfg.cubie_size, STICKER_COLOR)
        case Orientation.RIGHT:
            return render_rect(
                far_band_start(cfg), row_or_col_start(row, cfg), cfg.sticker_width, cfg.cubie_size, STICKER_COLOR
            )
        case _:
            return ""


def render_oll_face(desc: FaceDescriptor, cfg: SizeConfig) -> str:
    """
    Render an OLL face as a standalone SVG document.

    Layers, back to front: black background square, nine cubies colored by
    orientation, then one sticker per directional orientation.
    """
    root = svg_root(cfg)

    fills = [color_for_orientation(o) for o in desc.orientations]
    stickers = [render_sticker(pos, o, cfg) for pos, o in enumerate(desc.orientations)]
    sticker_count = sum(1 for s in stickers if s)

    logger.info("render_oll_face: canvas=%d, stickers=%d", canvas_size(cfg), sticker_count)

    return root.element(
        render_big_square(cfg),
        render_small_squares(fills, cfg),
        *stickers,
    )
