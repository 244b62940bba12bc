"""
SVG rendering for PLL arrow programs.
"""

from __future__ import annotations

import logging

from cube_types import FACE_POSITIONS, Program, SizeConfig, Statement
from face_layout import canvas_size, cell_center, render_big_square, render_small_squares, svg_root
from svg_builder import Path, Tag

__all__ = ["render_pll_face"]

logger = logging.getLogger(__name__)

ARROW_COLOR = "red"
ARROW_MARKER_ID = "arrow"
ARROW_MARKER_URL = f"url(#{ARROW_MARKER_ID})"


def render_defs() -> str:
    """Arrowhead marker shared by every line."""
    marker = (
        Tag("marker")
        .attr("id", ARROW_MARKER_ID)
        .attr("viewBox", "0 0 10 10")
        .attr("refX", 5)
        .attr("refY", 5)
        .attr("markerWidth", 3)
        .attr("markerHeight", 3)
        .attr("orient", "auto-start-reverse")
    )
    head = Path().M(0, 0).L(10, 5).L(0, 10).z()
    head_tag = Tag("path").attr("d", head.output()).attr("fill", ARROW_COLOR)

    return Tag("defs").element(marker.element(head_tag.element()))


def render_statement(statement: Statement, cfg: SizeConfig) -> str:
    """A line between the centers of the two cubies."""
    tag = (
        Tag("line")
        .attr("x1", cell_center(statement.start.col, cfg))
        .attr("y1", cell_center(statement.start.row, cfg))
        .attr("x2", cell_center(statement.end.col, cfg))
        .attr("y2", cell_center(statement.end.row, cfg))
        .attr("stroke-width", 4)
        .attr("stroke", ARROW_COLOR)
    )
    if statement.op.has_start_head:
        tag.attr("marker-start", ARROW_MARKER_URL)
    if statement.op.has_end_head:
        tag.attr("marker-end", ARROW_MARKER_URL)
    return tag.element()


def render_pll_face(program: Program, cfg: SizeConfig) -> str:
    """
    Render a PLL program as a standalone SVG document.

    The face is uniformly yellow; arrows are drawn in program order so later
    statements sit on top.
    """
    root = svg_root(cfg)

    logger.info("render_pll_face: canvas=%d, arrows=%d", canvas_size(cfg), len(program))

    return root.element(
        render_defs(),
        render_big_square(cfg),
        render_small_squares(["yellow"] * FACE_POSITIONS, cfg),
        *(render_statement(s, cfg) for s in program.statements),
    )
