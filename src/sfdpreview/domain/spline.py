"""Spline drawing commands decoded from a `SplineSet` block.

FontForge writes operands before the command letter:

    x y m
    x y flag l
    c1x c1y c2x c2y x y flag c
"""

from dataclasses import dataclass
from enum import Enum


class PointType(Enum):
    """On-curve point type, derived from the point flag modulo 4."""

    CURVE = "curve"
    CORNER = "corner"
    TANGENT = "tangent"
    EXTREME = "extreme"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new contour at (x, y)."""

    x: float
    y: float

    @property
    def end(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to the on-curve point (x, y)."""

    x: float
    y: float
    point_type: PointType = PointType.UNKNOWN

    @property
    def end(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier segment to the on-curve point (x, y).

    Attributes:
        c1x: First control point x (paired with the segment start)
        c1y: First control point y
        c2x: Second control point x (paired with the segment end)
        c2y: Second control point y
        x: End point x
        y: End point y
        point_type: Type of the end point
    """

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float
    point_type: PointType = PointType.UNKNOWN

    @property
    def end(self) -> tuple[float, float]:
        return (self.x, self.y)

    def coordinates(self) -> list[tuple[float, float]]:
        """Return both control points and the end point."""
        return [(self.c1x, self.c1y), (self.c2x, self.c2y), (self.x, self.y)]


SplineCommand = MoveTo | LineTo | CurveTo
