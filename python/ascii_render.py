"""
Colored terminal previews for OLL and PLL diagrams.

Same layout as the SVG output, one character cell per cubie:
- OLL: 5x5 layout, the outer ring holds stickers, the inner 3x3 the cubies
- PLL: the 3x3 grid of cubie numbers followed by one line per arrow
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from cube_types import FaceDescriptor, Operator, Orientation, Program

__all__ = ["render_oll_ascii", "render_pll_ascii"]

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]


def _plain(s: str) -> str:
    return s


def _cell_for_orientation(orientation: Orientation) -> tuple[str, Colorizer]:
    match orientation:
        case Orientation.FACE:
            return "#", chalk.yellow
        case Orientation.EMPTY:
            return ".", _plain
        case _:
            return "o", chalk.white


def _sticker_slot(position: int, orientation: Orientation) -> tuple[int, int] | None:
    """Buffer (row, col) of the sticker for a face position, in the 5x5 layout."""
    row, col = divmod(position, 3)
    match orientation:
        case Orientation.UP:
            return (0, col + 1)
        case Orientation.DOWN:
            return (4, col + 1)
        case Orientation.LEFT:
            return (row + 1, 0)
        case Orientation.RIGHT:
            return (row + 1, 4)
        case _:
            return None


def render_oll_ascii(desc: FaceDescriptor, cell_width: int = 2, color: bool = True) -> str:
    """
    Render an OLL face as text.

    Example ("xUx===xDx", color off):

            #
          . o .
          # # #
          . o .
            #

    Args:
        desc: Parsed face descriptor
        cell_width: Characters per cell (default 2)
        color: Apply chalk colors (default True)

    Returns:
        Multi-line string, no trailing newline
    """
    buffer: list[list[tuple[str, Colorizer]]] = [[(" ", _plain)] * 5 for _ in range(5)]

    for position, orientation in enumerate(desc.orientations):
        row, col = divmod(position, 3)
        buffer[row + 1][col + 1] = _cell_for_orientation(orientation)

        slot = _sticker_slot(position, orientation)
        if slot is not None:
            buffer[slot[0]][slot[1]] = ("#", chalk.yellow)

    lines: list[str] = []
    for buffer_row in buffer:
        # Lines end at the last visible cell, before any color codes
        visible = [i for i, (char, _) in enumerate(buffer_row) if char != " "]
        last = visible[-1] if visible else -1

        parts = []
        for i, (char, colorize) in enumerate(buffer_row[: last + 1]):
            content = char.center(cell_width) if cell_width > 1 else char
            if i == last:
                content = content.rstrip()
            parts.append(colorize(content) if color else content)
        lines.append("".join(parts))
    return "\n".join(lines)


def _arrow_text(op: Operator) -> str:
    match op:
        case Operator.START_HEAD:
            return "<--"
        case Operator.END_HEAD:
            return "-->"
        case Operator.BOTH_HEAD:
            return "<->"


def render_pll_ascii(program: Program, cell_width: int = 3, color: bool = True) -> str:
    """
    Render a PLL program as text: the numbered grid, then the arrows.

    Cubies that take part in an arrow are shown red, the rest yellow.
    """
    involved = {s.start.idx for s in program.statements} | {s.end.idx for s in program.statements}

    lines: list[str] = []
    for row in range(3):
        parts = []
        for col in range(3):
            idx = row * 3 + col
            content = str(idx + 1).center(cell_width)
            if color:
                content = chalk.red(content) if idx in involved else chalk.yellow(content)
            parts.append(content)
        lines.append("".join(parts))

    for statement in program.statements:
        arrow = f"{statement.start.idx + 1} {_arrow_text(statement.op)} {statement.end.idx + 1}"
        lines.append(chalk.red(arrow) if color else arrow)

    logger.debug("render_pll_ascii: %d arrows, %d cubies involved", len(program), len(involved))
    return "\n".join(lines)
