"""Tests for svg_builder module."""

from svg_builder import Path, Tag


class TestPath:
    """Tests for the path-data builder."""

    def test_empty_path(self) -> None:
        """A new path has no output."""
        assert Path().output() == ""

    def test_square_path(self) -> None:
        """Relative commands chain into one string."""
        path = Path().M(10, 10).h(20).v(20).h(-20).v(-20)
        assert path.output() == "M 10 10 h 20 v 20 h -20 v -20"

    def test_closed_triangle(self) -> None:
        """Absolute line-to and close-path."""
        path = Path().M(0, 0).L(10, 5).L(0, 10).z()
        assert path.output() == "M 0 0 L 10 5 L 0 10 z"

    def test_chaining_returns_same_builder(self) -> None:
        """Each command returns the builder it was called on."""
        path = Path()
        assert path.M(1, 2) is path
        assert path.z() is path

    def test_unclosed_path_is_not_an_error(self) -> None:
        """No geometric validation is done."""
        assert Path().M(0, 0).h(5).output() == "M 0 0 h 5"


class TestTag:
    """Tests for the element tag builder."""

    def test_open_and_close(self) -> None:
        """Attributes are written one per line in insertion order."""
        tag = Tag("path").attr("fill", "black").attr("d", "M 0 0")
        assert tag.open() == '<path\n   fill="black"\n   d="M 0 0">\n'
        assert tag.close() == "</path>\n"

    def test_no_attributes(self) -> None:
        """A bare tag still opens and closes."""
        tag = Tag("defs")
        assert tag.open() == "<defs\n>\n"
        assert tag.close() == "</defs>\n"

    def test_values_converted_to_str(self) -> None:
        """Numeric values are written as text."""
        tag = Tag("svg").attr("height", 101)
        assert 'height="101"' in tag.open()

    def test_attribute_order_preserved(self) -> None:
        """Attributes are never reordered."""
        tag = Tag("svg").attr("xmlns", "ns").attr("height", 1).attr("width", 2)
        opened = tag.open()
        assert opened.index("xmlns") < opened.index("height") < opened.index("width")

    def test_values_escaped(self) -> None:
        """Quotes and angle brackets in values are escaped."""
        tag = Tag("text").attr("title", 'a "b" <c>')
        assert 'title="a &quot;b&quot; &lt;c&gt;"' in tag.open()

    def test_element_wraps_children(self) -> None:
        """element() places children between open and close."""
        inner = Tag("path").attr("d", "z").element()
        outer = Tag("marker").attr("id", "arrow").element(inner)
        assert outer == '<marker\n   id="arrow">\n<path\n   d="z">\n</path>\n</marker>\n'
