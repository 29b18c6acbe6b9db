"""Domain models for sfdpreview.

This module contains the models flowing between the parser, the geometry
engine and the scene builder. Models are plain dataclasses, immutable where
possible, and independent of any rendering backend.

Key classes:
- GlyphRecord: Raw lines of one glyph group
- ReferenceRecord: A parsed composite reference
- MoveTo, LineTo, CurveTo: Spline drawing commands
- ViewBox: Axis-aligned frame stored by min/max corners
- Line, Path, Marker, Group, RenderScene: Drawable scene tree
"""

from sfdpreview.domain.glyph import GlyphFetcher, GlyphRecord, ReferenceRecord
from sfdpreview.domain.scene import (
    IDENTITY,
    Group,
    Line,
    Marker,
    MarkerShape,
    Matrix,
    Node,
    Path,
    RenderScene,
    format_number,
)
from sfdpreview.domain.spline import CurveTo, LineTo, MoveTo, PointType, SplineCommand
from sfdpreview.domain.viewbox import ViewBox

__all__: list[str] = [
    # Enums
    "MarkerShape",
    "PointType",
    # Glyph data
    "GlyphFetcher",
    "GlyphRecord",
    "ReferenceRecord",
    # Spline commands
    "CurveTo",
    "LineTo",
    "MoveTo",
    "SplineCommand",
    # Geometry
    "ViewBox",
    # Scene
    "IDENTITY",
    "Group",
    "Line",
    "Marker",
    "Matrix",
    "Node",
    "Path",
    "RenderScene",
    "format_number",
]
