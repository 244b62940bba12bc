"""Tests for the cubediagram command line and public API."""

from pathlib import Path

import pytest

import cubediagram
from cubediagram import (
    SizeConfig,
    main,
    parse_face_descriptor,
    parse_pll_program,
    preview_panel,
    render_oll_face,
    render_pll_face,
)
from genimages import ImageSpec, ImageSpecError


class TestPublicApi:
    """The facade re-exports the core entry points."""

    def test_entry_points(self) -> None:
        """Parse and render through the facade."""
        cfg = SizeConfig.from_cubie_size(25)
        assert render_oll_face(parse_face_descriptor("xUx===xDx"), cfg).startswith("<svg")
        assert render_pll_face(parse_pll_program("1<2"), cfg).startswith("<svg")

    def test_all_names_exist(self) -> None:
        """Everything in __all__ is importable."""
        for name in cubediagram.__all__:
            assert hasattr(cubediagram, name)

    def test_preview_panel_needs_a_diagram(self) -> None:
        """A spec with neither diagram is rejected."""
        with pytest.raises(ImageSpecError, match="neither an OLL nor a PLL"):
            preview_panel(ImageSpec())


class TestCli:
    """Tests for main()."""

    def test_oll(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the OLL SVG."""
        assert main(["oll", "xUx===xDx"]) == 0
        out = capsys.readouterr().out
        cfg = SizeConfig.from_cubie_size(25)
        assert out == render_oll_face(parse_face_descriptor("xUx===xDx"), cfg) + "\n"

    def test_pll_with_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        """-w sets the cubie size."""
        assert main(["pll", "1<2 3>4", "-w", "50"]) == 0
        out = capsys.readouterr().out
        assert out == render_pll_face(parse_pll_program("1<2 3>4"), SizeConfig.from_cubie_size(50)) + "\n"

    def test_parse_error_exit_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Parse errors go to stderr with status 1."""
        assert main(["oll", "xUx"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Malformed face descriptor" in captured.err

    def test_pll_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """PLL errors are reported the same way."""
        assert main(["pll", "1-2"]) == 1
        assert "Expected an arrow operator" in capsys.readouterr().err

    def test_non_positive_size_rejected(self) -> None:
        """argparse rejects a zero cubie size."""
        with pytest.raises(SystemExit):
            main(["oll", "=========", "-w", "0"])

    def test_preview_oll(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Preview shows the face in a titled panel."""
        assert main(["preview", "xUx===xDx"]) == 0
        out = capsys.readouterr().out
        assert "OLL xUx===xDx" in out
        assert ". o ." in out

    def test_preview_pll(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Preview lists the arrows."""
        assert main(["preview", "1<>9"]) == 0
        out = capsys.readouterr().out
        assert "PLL 1<>9" in out
        assert "1 <-> 9" in out

    def test_preview_unknown_spec(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Specs that are neither OLL nor PLL fail."""
        assert main(["preview", "hello"]) == 1
        assert "not a valid image spec" in capsys.readouterr().err

    def test_genimages(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Batch generation writes files into the destination."""
        source = tmp_path / "doc.md"
        source.write_text("[//]: # (sune  xUx===xDx)\n[//]: # (uperm  2>4 4>6 6>2)\n", encoding="utf-8")
        dest = tmp_path / "images"

        assert main(["genimages", str(source), "-d", str(dest)]) == 0
        assert (dest / "sune.svg").exists()
        assert (dest / "uperm.svg").exists()
        assert "Wrote 2 image(s)" in capsys.readouterr().out

    def test_genimages_missing_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input file is reported, not raised."""
        assert main(["genimages", str(tmp_path / "missing.md")]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_prettytable(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints the prettified document."""
        source = tmp_path / "doc.md"
        source.write_text("|a|bb|\n|ccc|d|\n", encoding="utf-8")
        assert main(["prettytable", str(source)]) == 0
        assert capsys.readouterr().out == "| a   | bb |\n| ccc | d  |\n"
