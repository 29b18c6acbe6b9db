"""Unit tests for the document I/O layer.

Tests for document reading, sibling glyph lookup and SVG writing.
"""

import asyncio
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from conftest import SQUARE_SPLINES, glyph_lines, make_fetcher

from sfdpreview.core.scene import SceneBuilder
from sfdpreview.exceptions import DocumentLoadError, SceneWriteError
from sfdpreview.io.reader import SiblingGlyphFetcher, read_sfd_lines, split_lines
from sfdpreview.io.writer import SvgWriter, diamond_path_data, square_path_data

SVG = "{http://www.w3.org/2000/svg}"


def write_glyph(directory: Path, name: str, lines: list[str]) -> Path:
    path = directory / f"{name}.glyph"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestReadSfdLines:
    """Tests for document reading."""

    def test_missing_file(self, tmp_path):
        """A missing document raises DocumentLoadError."""
        with pytest.raises(DocumentLoadError, match="file not found"):
            read_sfd_lines(tmp_path / "missing.sfd")

    def test_crlf_lines(self, tmp_path):
        """Carriage returns are stripped from every line."""
        path = tmp_path / "font.sfd"
        path.write_bytes(b"StartChar: A\r\nEncoding: 65 65 1\r\nEndChar\r\n")

        assert read_sfd_lines(path) == ["StartChar: A", "Encoding: 65 65 1", "EndChar", ""]

    def test_undecodable_file(self, tmp_path):
        """Invalid UTF-8 raises DocumentLoadError."""
        path = tmp_path / "font.sfd"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(DocumentLoadError):
            read_sfd_lines(path)

    def test_split_lines(self):
        """Splitting keeps empty lines."""
        assert split_lines("a\n\nb") == ["a", "", "b"]


class TestSiblingGlyphFetcher:
    """Tests for sibling glyph file lookup."""

    def test_finds_glyph_by_encoding(self, tmp_path):
        """The file whose Encoding carries the id is returned."""
        write_glyph(tmp_path, "A", glyph_lines("A", 1))
        write_glyph(tmp_path, "B", glyph_lines("B", 2, splines=SQUARE_SPLINES))

        lines = asyncio.run(SiblingGlyphFetcher(tmp_path)(2))

        assert lines[0] == "StartChar: B"
        assert "SplineSet" in lines

    def test_unknown_id(self, tmp_path):
        """No matching file yields None."""
        write_glyph(tmp_path, "A", glyph_lines("A", 1))
        assert asyncio.run(SiblingGlyphFetcher(tmp_path)(99)) is None

    def test_short_encoding_skips_file(self, tmp_path):
        """Files with a malformed Encoding never match."""
        write_glyph(tmp_path, "A", ["StartChar: A", "Encoding: 1 1", "EndChar"])
        assert asyncio.run(SiblingGlyphFetcher(tmp_path)(1)) is None

    def test_other_files_ignored(self, tmp_path):
        """Only files matching the glyph pattern are scanned."""
        (tmp_path / "font.props").write_text("Encoding: 7 7 7\n", encoding="utf-8")
        assert asyncio.run(SiblingGlyphFetcher(tmp_path)(7)) is None

    def test_missing_directory(self, tmp_path):
        """A directory that does not exist resolves nothing."""
        assert asyncio.run(SiblingGlyphFetcher(tmp_path / "gone")(1)) is None

    def test_unreadable_file_skipped(self, tmp_path):
        """Undecodable files are skipped and the scan goes on."""
        (tmp_path / "a.glyph").write_bytes(b"\xff\xfe\xfa")
        write_glyph(tmp_path, "b", glyph_lines("b", 4))
        lines = asyncio.run(SiblingGlyphFetcher(tmp_path)(4))
        assert lines[0] == "StartChar: b"


class TestSvgWriter:
    """Tests for SVG serialization."""

    @pytest.fixture
    def scene(self):
        lines = glyph_lines(
            "x",
            7,
            splines=["0 0 m 1", " 0 50 50 100 100 100 c 0", " 100 0 l 1", " 0 0 l 2"],
            refers=["Refer: 5 -1 N 1 0 0 1 10 0 2"],
        )
        glyphs = {5: glyph_lines("sq", 5, splines=SQUARE_SPLINES), 7: lines}
        return asyncio.run(SceneBuilder().build_scene(7, make_fetcher(glyphs)))

    def test_document_structure(self, scene):
        """The SVG carries the frame size and the flipped coordinate system."""
        root = ET.fromstring(SvgWriter(400, 400).to_string(scene))

        assert root.tag == f"{SVG}svg"
        assert root.get("class") == "glyph-svg"
        assert root.get("width") == "400"
        width, height = scene.view_box.width, scene.view_box.height
        assert root.get("viewBox") == f"0 0 {width:g} {height:g}"
        (system,) = list(root)
        assert system.tag == f"{SVG}g"
        assert system.get("transform").startswith("matrix(1 0 0 -1 ")

    def test_element_classes(self, scene):
        """Every drawable becomes an element with its class."""
        root = ET.fromstring(SvgWriter().to_string(scene))
        classes = [element.get("class") for element in root.iter() if element.get("class")]

        assert classes.count("axis") == 2
        assert classes.count("font-width-line") == 1
        assert classes.count("refer-glyph-path") == 1
        assert classes.count("glyph-path") == 1
        assert classes.count("glyph-forward-handle") == 2
        assert classes.count("glyph-backward-handle") == 2
        assert classes.count("glyph-point") == 3

    def test_reference_group_matrix(self, scene):
        """Reference groups carry their matrix."""
        root = ET.fromstring(SvgWriter().to_string(scene))
        transforms = [g.get("transform") for g in root.iter(f"{SVG}g")]
        assert "matrix(1 0 0 1 10 0)" in transforms

    def test_marker_shapes(self, scene):
        """Corner points are squares, tangents diamonds, curves circles."""
        root = ET.fromstring(SvgWriter().to_string(scene))
        points = [e for e in root.iter() if e.get("class") == "glyph-point"]
        assert [e.tag for e in points] == [f"{SVG}circle", f"{SVG}path", f"{SVG}path"]
        handles = [e for e in root.iter(f"{SVG}circle") if "handle" in e.get("class")]
        assert all(e.get("fill") == "none" for e in handles)

    def test_shape_path_data(self):
        """Squares and diamonds are closed paths around the centre."""
        assert square_path_data(10, 10, 2) == "M 8 8 h 4 v 4 h -4 Z"
        assert diamond_path_data(10, 10, 2) == "M 10 8 l 2 2 l -2 2 l -2 -2 Z"

    def test_write(self, scene, tmp_path):
        """Scenes are written as UTF-8 SVG files."""
        path = tmp_path / "x.svg"
        SvgWriter().write(scene, path)
        assert path.read_text(encoding="utf-8").startswith("<?xml")

    def test_write_error(self, scene, tmp_path):
        """Unwritable targets raise SceneWriteError."""
        with pytest.raises(SceneWriteError):
            SvgWriter().write(scene, tmp_path / "missing" / "x.svg")
