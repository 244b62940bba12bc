"""
PLL program parsing.

Grammar (whitespace is allowed between any two tokens):

    program   := statement*
    statement := cubie operator cubie
    cubie     := '1' .. '9'
    operator  := '<>' | '<' | '>'

Each parse function takes the full text and an offset and returns the parsed
value together with the offset just past it.
"""

from __future__ import annotations

import logging

from cube_types import (
    Cubie,
    ExpectedDigit,
    Operator,
    OutOfRangeCubie,
    Program,
    Statement,
    UnexpectedOperatorToken,
)

__all__ = ["parse_pll_program", "format_pll_program"]

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"

# Longest first so "<>" is never read as "<" followed by a stray ">"
_OPERATOR_TOKENS: tuple[tuple[str, Operator], ...] = (
    ("<>", Operator.BOTH_HEAD),
    ("<", Operator.START_HEAD),
    (">", Operator.END_HEAD),
)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _parse_cubie(text: str, pos: int) -> tuple[Cubie, int]:
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        raise ExpectedDigit(None, pos)

    ch = text[pos]
    if ch not in _DIGITS:
        raise ExpectedDigit(ch, pos)

    digit = int(ch)
    if not 1 <= digit <= 9:
        raise OutOfRangeCubie(digit, pos)

    return Cubie(digit - 1), pos + 1


def _parse_operator(text: str, pos: int) -> tuple[Operator, int]:
    pos = _skip_whitespace(text, pos)
    for token, op in _OPERATOR_TOKENS:
        if text.startswith(token, pos):
            return op, pos + len(token)

    found = text[pos] if pos < len(text) else None
    raise UnexpectedOperatorToken(found, pos)


def _parse_statement(text: str, pos: int) -> tuple[Statement, int]:
    start, pos = _parse_cubie(text, pos)
    op, pos = _parse_operator(text, pos)
    end, pos = _parse_cubie(text, pos)
    return Statement(start, op, end), pos


def parse_pll_program(text: str) -> Program:
    """
    Parse a PLL arrow program.

    Example:
        "1<2 3>4 5<>6" -> three arrows: head on cubie 1, head on cubie 4,
                          heads on both 5 and 6

    Empty or whitespace-only input gives an empty Program.

    Raises:
        ExpectedDigit: cubie missing or not a digit
        OutOfRangeCubie: cubie 0
        UnexpectedOperatorToken: operator missing or not one of <, >, <>
    """
    statements: list[Statement] = []
    pos = _skip_whitespace(text, 0)
    while pos < len(text):
        statement, pos = _parse_statement(text, pos)
        statements.append(statement)
        pos = _skip_whitespace(text, pos)

    program = Program(tuple(statements))
    logger.debug("parse_pll_program: %r -> %d statements", text, len(program))
    return program


def format_statement(statement: Statement) -> str:
    return f"{statement.start.idx + 1}{statement.op.value}{statement.end.idx + 1}"


def format_pll_program(program: Program) -> str:
    """Canonical text form, e.g. "1<2 3>4 5<>6"."""
    return " ".join(format_statement(s) for s in program.statements)
