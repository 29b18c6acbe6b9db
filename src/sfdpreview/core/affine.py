"""Affine composition for composite references and view boxes.

Coefficients follow the fontTools/SVG convention ``(a, b, c, d, e, f)``:
``x' = a*x + c*y + e`` and ``y' = b*x + d*y + f``.
"""

from fontTools.misc.arrayTools import calcBounds
from fontTools.misc.transform import Transform

from sfdpreview.domain import Group, Matrix, Node, ViewBox


def transform_box(
    box: ViewBox, a: float, b: float, c: float, d: float, e: float, f: float
) -> ViewBox:
    """Transform a box and return the axis-aligned frame of the result.

    All four corners are transformed, so rotated, skewed and mirrored
    references are framed correctly.

    Args:
        box: Box in the referenced glyph's coordinates
        a, b, c, d, e, f: Affine coefficients of the reference

    Returns:
        Box in the referencing glyph's coordinates (empty stays empty)
    """
    if box.is_empty():
        return box
    points = Transform(a, b, c, d, e, f).transformPoints(box.corners())
    return ViewBox(*calcBounds(points))


def transform_group(
    a: float,
    b: float,
    c: float,
    d: float,
    e: float,
    f: float,
    children: list[Node] | None = None,
) -> Group:
    """Wrap drawables in a group carrying the given affine transform."""
    return Group(transform=(a, b, c, d, e, f), children=list(children or []))


def flip_transform(box: ViewBox) -> Matrix:
    """Return the transform from y-up font space to the y-down surface.

    The top-left corner of the box (``min_x``, ``max_y``) maps to the surface
    origin and the box extends to ``(width, height)``.

    Args:
        box: The margined view box

    Returns:
        Affine coefficients of the coordinate system group
    """
    transform = (
        Transform()
        .translate(0, box.min_y)
        .scale(1, -1)
        .translate(-box.min_x, -box.height)
    )
    return tuple(transform)
