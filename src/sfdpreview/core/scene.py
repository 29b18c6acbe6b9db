"""Scene building: turn one glyph into a tree of drawables.

The scene is emitted in z-order inside a coordinate system group that flips
font space (y up) into surface space (y down):

1. metric guides (both axes and the advance width line)
2. composite references, each under its own transform
3. the glyph's own outline path
4. control handles of curve segments
5. on-curve point markers
"""

import logging
import math

from sfdpreview.config import SceneConfig
from sfdpreview.core.affine import flip_transform, transform_group
from sfdpreview.core.bbox import add_margin, estimate_glyph_box
from sfdpreview.core.classifier import parse_width
from sfdpreview.core.commands import decode_all
from sfdpreview.core.layer import extract_layer, parse_references
from sfdpreview.domain import (
    CurveTo,
    GlyphFetcher,
    Group,
    Line,
    LineTo,
    Marker,
    MarkerShape,
    Node,
    Path,
    PointType,
    ReferenceRecord,
    RenderScene,
    SplineCommand,
    ViewBox,
)
from sfdpreview.exceptions import RenderError

logger = logging.getLogger(__name__)

GLYPH_PATH_CLASS = "glyph-path"
REFER_PATH_CLASS = "refer-glyph-path"
POINT_CLASS = "glyph-point"
FORWARD_HANDLE_CLASS = "glyph-forward-handle"
BACKWARD_HANDLE_CLASS = "glyph-backward-handle"
AXIS_CLASS = "axis"
WIDTH_LINE_CLASS = "font-width-line"

_SHAPES = {
    PointType.CORNER: (MarkerShape.SQUARE, 0.8),
    PointType.TANGENT: (MarkerShape.DIAMOND, 1.2),
}


def render_scale(box: ViewBox, surface_width: float, surface_height: float) -> float:
    """Font units per surface pixel for a box fit into the surface."""
    return max(box.width / surface_width, box.height / surface_height)


class SceneBuilder:
    """Builds the render scene of a glyph.

    Example:
        builder = SceneBuilder(SceneConfig(surface_width=600))
        scene = await builder.build_scene(gid, fetch)
    """

    def __init__(self, config: SceneConfig | None = None) -> None:
        """Initialize the scene builder.

        Args:
            config: Scene configuration (defaults if None)
        """
        self.config = config or SceneConfig()

    async def build_scene(self, gid: int, fetch: GlyphFetcher) -> RenderScene | None:
        """Build the scene of a glyph.

        Args:
            gid: Glyph id to render
            fetch: Capability resolving glyph ids to lines

        Returns:
            RenderScene, or None if the glyph cannot be fetched

        Raises:
            RenderError: If the geometry yields a non-finite frame
        """
        lines = await fetch(gid)
        if lines is None:
            logger.debug("Nothing to render for glyph %d", gid)
            return None

        layer = self.config.layer
        advance_width = parse_width(lines)
        data = extract_layer(layer, lines)
        references = parse_references(data.references)
        visiting = frozenset({gid})

        box = await estimate_glyph_box(
            advance_width, references, data.spline_lines, fetch, layer, visiting
        )
        box = add_margin(box, self.config.margin_rate)
        if not (math.isfinite(box.width) and math.isfinite(box.height)):
            raise RenderError(gid, f"view box is not finite: {box.as_tuple()}")
        scale = render_scale(box, self.config.surface_width, self.config.surface_height)

        root = Group(transform=flip_transform(box), css_class="coordinate-system")
        root.children.extend(self.axis_nodes(box, advance_width, scale))
        root.children.extend(await self.reference_nodes(references, fetch, scale, visiting))

        commands = decode_all(data.spline_lines)
        if commands:
            root.children.append(Path(tuple(commands), GLYPH_PATH_CLASS, scale))
        root.children.extend(self.handle_nodes(commands, scale))
        root.children.extend(self.point_nodes(commands, scale))

        return RenderScene(
            gid=gid,
            view_box=box,
            scale=scale,
            advance_width=advance_width,
            root=root,
        )

    def axis_nodes(self, box: ViewBox, advance_width: float, scale: float) -> list[Node]:
        """Horizontal and vertical axes plus the advance width guide."""
        return [
            Line(box.min_x, 0, box.max_x, 0, AXIS_CLASS, scale),
            Line(0, box.min_y, 0, box.max_y, AXIS_CLASS, scale),
            Line(advance_width, box.min_y, advance_width, box.max_y, WIDTH_LINE_CLASS, scale),
        ]

    async def reference_nodes(
        self,
        references: list[ReferenceRecord],
        fetch: GlyphFetcher,
        scale: float,
        visiting: frozenset[int] = frozenset(),
    ) -> list[Node]:
        """Build one transformed group per resolvable reference.

        A referenced glyph's own references are placed, depth first, inside
        its group ahead of its outline.
        """
        nodes: list[Node] = []
        for reference in references:
            if reference.gid in visiting:
                logger.debug("Skipping cyclic reference to glyph %d", reference.gid)
                continue

            lines = await fetch(reference.gid)
            if lines is None:
                logger.debug("Skipping reference to missing glyph %d", reference.gid)
                continue

            data = extract_layer(self.config.layer, lines)
            children = await self.reference_nodes(
                parse_references(data.references),
                fetch,
                scale,
                visiting | {reference.gid},
            )
            commands = decode_all(data.spline_lines)
            if commands:
                children.append(Path(tuple(commands), REFER_PATH_CLASS, scale))
            if children:
                nodes.append(transform_group(*reference.matrix, children=children))
        return nodes

    def handle_nodes(self, commands: list[SplineCommand], scale: float) -> list[Node]:
        """Build the control handles of every curve segment.

        Each curve yields a forward handle (start point to first control
        point) followed by a backward handle (end point to second control
        point).
        """
        nodes: list[Node] = []
        last_x, last_y = 0.0, 0.0
        for command in commands:
            if isinstance(command, CurveTo):
                nodes.extend(
                    self._handle(last_x, last_y, command.c1x, command.c1y, True, scale)
                )
                nodes.extend(
                    self._handle(command.x, command.y, command.c2x, command.c2y, False, scale)
                )
            last_x, last_y = command.end
        return nodes

    def _handle(
        self, x1: float, y1: float, x2: float, y2: float, forward: bool, scale: float
    ) -> list[Node]:
        epsilon = self.config.epsilon
        dx = x2 - x1
        dy = y2 - y1
        length = math.hypot(dx, dy)
        if (abs(dx) < epsilon and abs(dy) < epsilon) or length == 0:
            return []

        css_class = FORWARD_HANDLE_CLASS if forward else BACKWARD_HANDLE_CLASS
        radius = self.config.marker_size * scale
        # stop the line at the marker circumference
        ratio = (length - radius) / length
        return [
            Line(x1, y1, x1 + dx * ratio, y1 + dy * ratio, css_class, scale),
            Marker(x2, y2, radius, MarkerShape.CIRCLE, css_class, scale, filled=False),
        ]

    def point_nodes(self, commands: list[SplineCommand], scale: float) -> list[Node]:
        """Build one marker per on-curve point of `l` and `c` commands."""
        base = self.config.marker_size * scale
        nodes: list[Node] = []
        for command in commands:
            if not isinstance(command, (LineTo, CurveTo)):
                continue
            shape, factor = _SHAPES.get(command.point_type, (MarkerShape.CIRCLE, 1.0))
            nodes.append(
                Marker(
                    command.x,
                    command.y,
                    base * factor,
                    shape,
                    POINT_CLASS,
                    scale,
                    filled=True,
                    point_type=command.point_type,
                )
            )
        return nodes
