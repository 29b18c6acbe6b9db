"""Drawable scene nodes produced by the scene builder.

A scene is a tree: leaf drawables (lines, paths, markers) hang from groups,
and every group carries its own affine transform. Coordinates are in font
units of the enclosing group; stroke widths and marker sizes are already
multiplied by the render scale.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from sfdpreview.domain.spline import CurveTo, LineTo, MoveTo, PointType, SplineCommand
from sfdpreview.domain.viewbox import ViewBox

Matrix = tuple[float, float, float, float, float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def format_number(value: float) -> str:
    """Format a coordinate compactly (integers without a decimal point)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")


class MarkerShape(Enum):
    """Shape of a point or handle marker."""

    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"


@dataclass(frozen=True, slots=True)
class Line:
    """A straight stroke between two points."""

    x1: float
    y1: float
    x2: float
    y2: float
    css_class: str
    stroke_width: float


@dataclass(frozen=True, slots=True)
class Path:
    """A compound outline built from spline commands in line order."""

    commands: tuple[SplineCommand, ...]
    css_class: str
    stroke_width: float

    def path_data(self) -> str:
        """Return the SVG path data (``M``/``L``/``C`` only, no implicit close)."""
        parts: list[str] = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                values = ("M", command.x, command.y)
            elif isinstance(command, LineTo):
                values = ("L", command.x, command.y)
            elif isinstance(command, CurveTo):
                values = (
                    "C",
                    command.c1x,
                    command.c1y,
                    command.c2x,
                    command.c2y,
                    command.x,
                    command.y,
                )
            else:
                continue
            parts.append(" ".join([values[0], *(format_number(v) for v in values[1:])]))
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Marker:
    """A point marker centred on (x, y).

    Attributes:
        x: Centre x coordinate
        y: Centre y coordinate
        size: Half extent of the shape (radius for circles)
        shape: Marker shape
        css_class: Class name used for styling
        stroke_width: Outline stroke width
        filled: Whether the marker is filled
        point_type: Point type of the on-curve point, None for handles
    """

    x: float
    y: float
    size: float
    shape: MarkerShape
    css_class: str
    stroke_width: float
    filled: bool = True
    point_type: PointType | None = None


@dataclass
class Group:
    """A node grouping children under an affine transform."""

    transform: Matrix = IDENTITY
    children: list["Node"] = field(default_factory=list)
    css_class: str | None = None

    def iter_leaves(self) -> Iterator["Line | Path | Marker"]:
        """Yield every leaf drawable in depth-first order."""
        for child in self.children:
            if isinstance(child, Group):
                yield from child.iter_leaves()
            else:
                yield child


Node = Line | Path | Marker | Group


@dataclass
class RenderScene:
    """The rendered preview of one glyph.

    Attributes:
        gid: Glyph id that was rendered
        view_box: Margined frame in font units
        scale: Font units per surface pixel
        advance_width: Advance width of the glyph
        root: Coordinate system group flipping font space into surface space
    """

    gid: int
    view_box: ViewBox
    scale: float
    advance_width: float
    root: Group

    @property
    def nodes(self) -> list[Node]:
        """Top level drawables in z-order."""
        return self.root.children

    def node_count(self) -> int:
        """Count every leaf drawable of the scene."""
        return sum(1 for _ in self.root.iter_leaves())
