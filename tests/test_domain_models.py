"""Tests for domain models to verify they work correctly."""

import pytest

from sfdpreview.config import LogLevel, LoggingConfig, PreviewSettings, SceneConfig
from sfdpreview.domain import (
    CurveTo,
    GlyphRecord,
    Group,
    Line,
    LineTo,
    Marker,
    MarkerShape,
    MoveTo,
    Path,
    PointType,
    ReferenceRecord,
    RenderScene,
    ViewBox,
    format_number,
)


class TestViewBox:
    """Tests for ViewBox class."""

    def test_tuple_form(self) -> None:
        """The public form is (min_x, min_y, width, height)."""
        box = ViewBox(-10, 5, 90, 25)
        assert box.as_tuple() == (-10, 5, 100, 20)
        assert box.as_bounds() == (-10, 5, 90, 25)

    def test_empty(self) -> None:
        """The empty accumulator is recognised."""
        assert ViewBox.empty().is_empty()
        assert not ViewBox(0, 0, 0, 0).is_empty()

    def test_corners(self) -> None:
        """Corners run counter-clockwise from the min corner."""
        assert ViewBox(0, 0, 2, 1).corners() == [(0, 0), (2, 0), (2, 1), (0, 1)]

    def test_immutable(self) -> None:
        """ViewBox is frozen."""
        box = ViewBox(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            box.min_x = 3  # type: ignore


class TestGlyphModels:
    """Tests for glyph and reference records."""

    def test_record_without_gid(self) -> None:
        """A fresh record has no glyph id."""
        record = GlyphRecord(name="A")
        assert record.gid == -1
        assert not record.has_gid
        assert record.lines == []

    def test_reference_matrix(self) -> None:
        """References expose their six coefficients."""
        reference = ReferenceRecord(5, 65, "N", 1, 0, 0.5, 1, 10, 20)
        assert reference.matrix == (1, 0, 0.5, 1, 10, 20)

    def test_reference_defaults_to_identity(self) -> None:
        """Missing coefficients default to the identity."""
        assert ReferenceRecord(5, -1, "N").matrix == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


class TestSplineCommands:
    """Tests for spline command models."""

    def test_end_points(self) -> None:
        """Every command exposes its end point."""
        assert MoveTo(1, 2).end == (1, 2)
        assert LineTo(3, 4).end == (3, 4)
        assert CurveTo(0, 0, 1, 1, 5, 6).end == (5, 6)

    def test_default_point_type(self) -> None:
        """Commands default to an unknown point type."""
        assert LineTo(0, 0).point_type is PointType.UNKNOWN


class TestScene:
    """Tests for scene nodes."""

    def test_format_number(self) -> None:
        """Integral values lose their decimal point."""
        assert format_number(10.0) == "10"
        assert format_number(-0.0) == "0"
        assert format_number(0.25) == "0.25"
        assert format_number(1 / 3) == "0.333333"

    def test_path_data(self) -> None:
        """Path data joins M, L and C segments without closing."""
        path = Path(
            (MoveTo(0, 0), LineTo(10, 0), CurveTo(10, 5, 5, 10, 0, 10)),
            "glyph-path",
            1.0,
        )
        assert path.path_data() == "M 0 0 L 10 0 C 10 5 5 10 0 10"

    def test_scene_leaves(self) -> None:
        """Leaf counting descends into nested groups."""
        marker = Marker(0, 0, 1, MarkerShape.CIRCLE, "glyph-point", 1.0)
        line = Line(0, 0, 1, 1, "axis", 1.0)
        root = Group(children=[line, Group(children=[Group(children=[marker])])])
        scene = RenderScene(
            gid=1, view_box=ViewBox(0, 0, 1, 1), scale=1.0, advance_width=1, root=root
        )

        assert scene.node_count() == 2
        assert list(root.iter_leaves()) == [line, marker]
        assert scene.nodes is root.children


class TestSettings:
    """Tests for configuration models."""

    def test_defaults(self) -> None:
        """Defaults match the preview conventions."""
        config = PreviewSettings().scene
        assert config.margin_rate == 0.2
        assert config.marker_size == 3.0
        assert config.epsilon == 0.01
        assert config.layer == "Fore"

    def test_surface_must_be_positive(self) -> None:
        """A zero-sized surface is rejected."""
        with pytest.raises(ValueError):
            SceneConfig(surface_width=0)

    def test_log_levels(self) -> None:
        """Log levels are restricted to the known names."""
        assert LoggingConfig().log_level is LogLevel.WARNING
        assert LoggingConfig(log_level="DEBUG").log_level is LogLevel.DEBUG
        with pytest.raises(ValueError):
            LoggingConfig(log_level="LOUD")
