"""
Shared type definitions for cube face diagrams.

OLL diagrams describe which edge of each of the nine face positions carries a
colored sticker. PLL diagrams describe arrows between face positions.

The cube face is numbered like this:

    0 1 2
    3 4 5
    6 7 8
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FACE_POSITIONS = 9


# =============================================================================
# Size Configuration
# =============================================================================


@dataclass(frozen=True)
class SizeConfig:
    """Pixel sizes for one rendered face. Build with from_cubie_size()."""

    cubie_size: int
    border_width: int
    gutter_size: int
    sticker_width: int

    @classmethod
    def from_cubie_size(cls, cubie_size: int) -> SizeConfig:
        """Derive the full configuration from the edge length of one cubie."""
        if not isinstance(cubie_size, int) or isinstance(cubie_size, bool):
            raise ValueError(f"cubie_size must be an integer, got {cubie_size!r}")
        if cubie_size <= 0:
            raise ValueError(f"cubie_size must be positive, got {cubie_size}")
        return cls(
            cubie_size=cubie_size,
            border_width=2,
            gutter_size=cubie_size // 10,
            sticker_width=cubie_size // 5,
        )


DEFAULT_CUBIE_SIZE = 25


# =============================================================================
# OLL Types
# =============================================================================


class Orientation(Enum):
    """Where a position's colored facelet sits. Values are the canonical characters."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"
    FACE = "="  # Whole cell colored
    EMPTY = "x"  # Not colored at all

    @property
    def is_directional(self) -> bool:
        return self in (Orientation.UP, Orientation.DOWN, Orientation.LEFT, Orientation.RIGHT)


@dataclass(frozen=True)
class FaceDescriptor:
    """Nine orientations in row-major order."""

    orientations: tuple[Orientation, ...]

    def __len__(self) -> int:
        return len(self.orientations)

    def __getitem__(self, position: int) -> Orientation:
        return self.orientations[position]


# =============================================================================
# PLL Types
# =============================================================================


@dataclass(frozen=True)
class Cubie:
    """A face position, 0-indexed (written 1-9 in source text)."""

    idx: int

    @property
    def row(self) -> int:
        return self.idx // 3

    @property
    def col(self) -> int:
        return self.idx % 3


class Operator(Enum):
    """Which end(s) of an arrow carry an arrowhead."""

    START_HEAD = "<"
    END_HEAD = ">"
    BOTH_HEAD = "<>"

    @property
    def has_start_head(self) -> bool:
        return self in (Operator.START_HEAD, Operator.BOTH_HEAD)

    @property
    def has_end_head(self) -> bool:
        return self in (Operator.END_HEAD, Operator.BOTH_HEAD)


@dataclass(frozen=True)
class Statement:
    """One arrow between two cubies."""

    start: Cubie
    op: Operator
    end: Cubie


@dataclass(frozen=True)
class Program:
    """Arrows in drawing order."""

    statements: tuple[Statement, ...] = ()

    def __len__(self) -> int:
        return len(self.statements)


# =============================================================================
# Errors
# =============================================================================


class ParseError(ValueError):
    """Base class for rejected OLL/PLL input."""


class OllParseError(ParseError):
    pass


class UnknownOrientationChar(OllParseError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        shown = repr(char) if char else "empty token"
        super().__init__(
            f"Unknown orientation character {shown}\n"
            f"  Position: {position}\n"
            f"  Valid characters:\n"
            f"    - U, D, L, R: sticker on the up/down/left/right edge\n"
            f"    - '=' or F: whole cell colored\n"
            f"    - '.', E, X or x: cell not colored"
        )


class IllegalOrientationForPosition(OllParseError):
    def __init__(self, position: int, orientation: Orientation, legal: frozenset[Orientation]) -> None:
        self.position = position
        self.orientation = orientation
        legal_names = ", ".join(sorted(o.name for o in legal)) or "none"
        super().__init__(
            f"Illegal orientation {orientation.name} for position {position}\n"
            f"  Stickers can only sit on an outer edge of the face\n"
            f"  Legal directions at position {position}: {legal_names}"
        )


class MalformedDescriptor(OllParseError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Malformed face descriptor: found {count} orientation characters\n"
            f"  Expected exactly {FACE_POSITIONS}, one per face position (whitespace is ignored)"
        )


class PllParseError(ParseError):
    pass


class ExpectedDigit(PllParseError):
    def __init__(self, found: str | None, offset: int) -> None:
        self.found = found
        self.offset = offset
        shown = "end of input" if found is None else repr(found)
        super().__init__(
            f"Expected a cubie digit (1-9), found {shown}\n"
            f"  Offset: {offset}"
        )


class OutOfRangeCubie(PllParseError):
    def __init__(self, digit: int, offset: int) -> None:
        self.digit = digit
        self.offset = offset
        super().__init__(
            f"Out-of-range cubie {digit}\n"
            f"  Offset: {offset}\n"
            f"  Cubies are numbered 1-9"
        )


class UnexpectedOperatorToken(PllParseError):
    def __init__(self, found: str | None, offset: int) -> None:
        self.found = found
        self.offset = offset
        shown = "end of input" if found is None else repr(found)
        super().__init__(
            f"Expected an arrow operator, found {shown}\n"
            f"  Offset: {offset}\n"
            f"  Valid operators: '<' (head at start), '>' (head at end), '<>' (both heads)"
        )
