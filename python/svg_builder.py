"""
Minimal SVG fragment builders: path data strings and element tags.
"""

from __future__ import annotations

from html import escape

__all__ = ["Path", "Tag"]


class Path:
    """Accumulates path-data commands. Every command returns self for chaining."""

    def __init__(self) -> None:
        self._commands: list[str] = []

    def M(self, x: int, y: int) -> Path:  # noqa: N802
        return self._add(f"M {x} {y}")

    def L(self, x: int, y: int) -> Path:  # noqa: N802
        return self._add(f"L {x} {y}")

    def h(self, dx: int) -> Path:
        return self._add(f"h {dx}")

    def v(self, dy: int) -> Path:
        return self._add(f"v {dy}")

    def z(self) -> Path:
        return self._add("z")

    def output(self) -> str:
        return " ".join(self._commands).strip()

    def _add(self, command: str) -> Path:
        self._commands.append(command)
        return self


class Tag:
    """
    One SVG element with an ordered attribute list.

    Attributes are written in insertion order, one per line:

        <path
           fill="black"
           d="M 0 0 h 10">
        </path>
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.attrs: list[tuple[str, str]] = []

    def attr(self, name: str, value: object) -> Tag:
        self.attrs.append((name, str(value)))
        return self

    def open(self) -> str:
        attr_string = "\n".join(f'   {name}="{escape(value, quote=True)}"' for name, value in self.attrs)
        return f"<{self.name}\n{attr_string}>\n"

    def close(self) -> str:
        return f"</{self.name}>\n"

    def element(self, *children: str) -> str:
        """Open tag, children, close tag."""
        return self.open() + "".join(children) + self.close()
