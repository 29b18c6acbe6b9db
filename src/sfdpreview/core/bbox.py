"""Bounding box estimation for glyph outlines and composite references.

All frames are handled as ViewBox (explicit min/max corners) and only turned
into ``(min_x, min_y, width, height)`` at the public boundary.
"""

import logging

from fontTools.misc.arrayTools import unionRect

from sfdpreview.core.affine import transform_box
from sfdpreview.core.commands import decode_all
from sfdpreview.core.layer import extract_layer, parse_references
from sfdpreview.domain import CurveTo, GlyphFetcher, ReferenceRecord, ViewBox

logger = logging.getLogger(__name__)


def estimate(advance_width: float, spline_lines: list[str]) -> ViewBox:
    """Estimate the frame of a spline set.

    The frame always contains the origin and the advance width, so empty
    glyphs such as spaces still get a usable frame. Control points count as
    well as on-curve points.

    Args:
        advance_width: Advance width of the glyph
        spline_lines: Lines of the `SplineSet` block

    Returns:
        The frame enclosing every operand coordinate
    """
    min_x, min_y, max_x, max_y = 0.0, 0.0, float(advance_width), 0.0
    for command in decode_all(spline_lines):
        points = command.coordinates() if isinstance(command, CurveTo) else [command.end]
        for x, y in points:
            min_x = min(min_x, x)
            max_x = max(max_x, x)
            min_y = min(min_y, y)
            max_y = max(max_y, y)
    return ViewBox(min_x, min_y, max_x, max_y)


def merge_view_box(box1: ViewBox, box2: ViewBox) -> ViewBox:
    """Return the smallest frame containing both boxes."""
    return ViewBox(*unionRect(box1.as_bounds(), box2.as_bounds()))


def add_margin(box: ViewBox, rate: float) -> ViewBox:
    """Grow a box on all four sides by ``rate`` times its larger dimension."""
    margin = max(box.width, box.height) * rate
    return ViewBox(
        box.min_x - margin,
        box.min_y - margin,
        box.max_x + margin,
        box.max_y + margin,
    )


async def estimate_with_references(
    references: list[ReferenceRecord],
    fetch: GlyphFetcher,
    layer: str = "Fore",
    visiting: frozenset[int] = frozenset(),
) -> ViewBox:
    """Estimate the combined frame of composite references.

    References are resolved one after another in declaration order. A
    reference whose glyph cannot be fetched, or that points back to a glyph
    already being resolved, contributes nothing.

    Args:
        references: Parsed references of the referencing glyph
        fetch: Capability resolving glyph ids to lines
        layer: Layer section holding the outlines
        visiting: Glyph ids on the current resolution path

    Returns:
        Frame in the referencing glyph's coordinates; ViewBox.empty() when
        no reference contributed
    """
    box = ViewBox.empty()
    for reference in references:
        if reference.gid in visiting:
            logger.debug("Skipping cyclic reference to glyph %d", reference.gid)
            continue

        lines = await fetch(reference.gid)
        if lines is None:
            logger.debug("Skipping reference to missing glyph %d", reference.gid)
            continue

        local = await estimate_local_box(lines, fetch, layer, visiting | {reference.gid})
        if local.is_empty():
            continue
        box = merge_view_box(box, transform_box(local, *reference.matrix))
    return box


async def estimate_local_box(
    lines: list[str],
    fetch: GlyphFetcher,
    layer: str = "Fore",
    visiting: frozenset[int] = frozenset(),
) -> ViewBox:
    """Estimate the frame of a referenced glyph in its own coordinates.

    A referenced glyph does not contribute its advance width.
    """
    data = extract_layer(layer, lines)
    box = ViewBox.empty()
    if data.references:
        nested = await estimate_with_references(
            parse_references(data.references), fetch, layer, visiting
        )
        box = merge_view_box(box, nested)
    if data.spline_lines:
        box = merge_view_box(box, estimate(0, data.spline_lines))
    return box


async def estimate_glyph_box(
    advance_width: float,
    references: list[ReferenceRecord],
    spline_lines: list[str],
    fetch: GlyphFetcher,
    layer: str = "Fore",
    visiting: frozenset[int] = frozenset(),
) -> ViewBox:
    """Estimate the frame of a glyph including its references, before margin."""
    box = estimate(advance_width, spline_lines)
    if references:
        box = merge_view_box(
            box, await estimate_with_references(references, fetch, layer, visiting)
        )
    return box
