"""
Markdown table prettifier: pads every table column to its widest cell.
"""

from __future__ import annotations

from itertools import groupby
from pathlib import Path
from typing import Iterable

__all__ = ["prettify_lines", "prettify_file"]


def _is_table_line(line: str) -> bool:
    return line.startswith("|")


def prettify_table(table_lines: list[str]) -> list[str]:
    """
    Align one table.

    Segments are split on '|' and trimmed. Empty leading/trailing segments
    (outside the outer pipes) stay empty; every other segment becomes
    " " + text padded to the column width + " ".
    """
    segment_lists = [[s.strip() for s in line.split("|")] for line in table_lines]

    max_segments = max(len(segments) for segments in segment_lists)
    widths = [0] * max_segments
    for segments in segment_lists:
        for i, segment in enumerate(segments):
            widths[i] = max(widths[i], len(segment))

    result: list[str] = []
    for segments in segment_lists:
        last = len(segments) - 1
        padded = [
            segment if widths[i] == 0 or (not segment and i in (0, last)) else f" {segment.ljust(widths[i])} "
            for i, segment in enumerate(segments)
        ]
        result.append("|".join(padded))
    return result


def prettify_lines(lines: Iterable[str]) -> list[str]:
    """Prettify every table in a markdown document; other lines pass through."""
    result: list[str] = []
    for is_table, group in groupby((line.rstrip("\n") for line in lines), key=_is_table_line):
        if is_table:
            result.extend(prettify_table(list(group)))
        else:
            result.extend(group)
    return result


def prettify_file(path: Path) -> str:
    with path.open(encoding="utf-8") as f:
        return "\n".join(prettify_lines(f))
