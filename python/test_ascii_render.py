"""Tests for ascii_render module."""

import re

from ascii_render import render_oll_ascii, render_pll_ascii
from oll_parser import parse_face_descriptor
from pll_parser import parse_pll_program

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    return ANSI_RE.sub("", s)


class TestRenderOllAscii:
    """Tests for the OLL text preview."""

    def test_plain_layout(self) -> None:
        """Stickers in the outer ring, cubies inside."""
        output = render_oll_ascii(parse_face_descriptor("xUx===xDx"), color=False)
        assert output.split("\n") == [
            "    #",
            "  . o .",
            "  # # #",
            "  . o .",
            "    #",
        ]

    def test_side_stickers(self) -> None:
        """LEFT and RIGHT stickers sit in the first and last columns."""
        output = render_oll_ascii(parse_face_descriptor("L=R L=R L=R"), color=False)
        lines = output.split("\n")
        assert lines[0] == ""
        assert lines[1] == "# o # o #"
        assert lines[4] == ""

    def test_cell_width_one(self) -> None:
        """Single-character cells."""
        output = render_oll_ascii(parse_face_descriptor("LUR=x=LDR"), cell_width=1, color=False)
        assert output.split("\n") == [
            "  #",
            "#ooo#",
            " #.#",
            "#ooo#",
            "  #",
        ]

    def test_color_keeps_text(self) -> None:
        """Colored output has the same visible text."""
        desc = parse_face_descriptor("xUx===xDx")
        assert strip_ansi(render_oll_ascii(desc)) == render_oll_ascii(desc, color=False)

    def test_colored_lines_have_no_trailing_padding(self) -> None:
        """A colored sticker at the end of a line is not followed by padding."""
        for text in ("xUx===xDx", "L=R L=R L=R", "=U=====D="):
            lines = strip_ansi(render_oll_ascii(parse_face_descriptor(text))).split("\n")
            assert all(not line.endswith(" ") for line in lines)
        assert strip_ansi(render_oll_ascii(parse_face_descriptor("xUx===xDx"))).split("\n")[0] == "    #"


class TestRenderPllAscii:
    """Tests for the PLL text preview."""

    def test_grid_and_arrows(self) -> None:
        """Numbered grid followed by one line per arrow."""
        output = render_pll_ascii(parse_pll_program("1<2 3>4 5<>6"), color=False)
        assert output.split("\n") == [
            " 1  2  3 ",
            " 4  5  6 ",
            " 7  8  9 ",
            "1 <-- 2",
            "3 --> 4",
            "5 <-> 6",
        ]

    def test_empty_program(self) -> None:
        """Only the grid."""
        output = render_pll_ascii(parse_pll_program(""), color=False)
        assert output.count("\n") == 2

    def test_color_keeps_text(self) -> None:
        """Colored output has the same visible text."""
        program = parse_pll_program("2>4 4>6 6>2")
        assert strip_ansi(render_pll_ascii(program)) == render_pll_ascii(program, color=False)
