"""SVG writer for render scenes.

This module serializes a RenderScene into a standalone SVG document. All
strokes and fills use ``currentColor`` so the host page controls colours
through CSS classes.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from sfdpreview.domain import (
    IDENTITY,
    Group,
    Line,
    Marker,
    MarkerShape,
    Node,
    Path as PathNode,
    RenderScene,
    format_number,
)
from sfdpreview.exceptions import SceneWriteError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_CLASS = "glyph-svg"
STROKE = "currentColor"


def square_path_data(x: float, y: float, size: float) -> str:
    """Path data of a square of half extent ``size`` centred on (x, y)."""
    side = 2 * size
    return "M {} {} h {} v {} h {} Z".format(
        *(format_number(v) for v in (x - size, y - size, side, side, -side))
    )


def diamond_path_data(x: float, y: float, size: float) -> str:
    """Path data of a diamond of half diagonal ``size`` centred on (x, y)."""
    return "M {} {} l {} {} l {} {} l {} {} Z".format(
        *(format_number(v) for v in (x, y - size, size, size, -size, size, -size, -size))
    )


class SvgWriter:
    """Serializes render scenes to SVG.

    Example:
        writer = SvgWriter(surface_width=400, surface_height=400)
        writer.write(scene, Path("A.svg"))
    """

    def __init__(
        self, surface_width: float | None = None, surface_height: float | None = None
    ) -> None:
        """Initialize the writer.

        Args:
            surface_width: Pixel width of the document (unset if None)
            surface_height: Pixel height of the document (unset if None)
        """
        self.surface_width = surface_width
        self.surface_height = surface_height

    def to_element(self, scene: RenderScene) -> ET.Element:
        """Build the SVG element tree of a scene."""
        box = scene.view_box
        attributes = {
            "xmlns": SVG_NAMESPACE,
            "class": SVG_CLASS,
            "viewBox": f"0 0 {format_number(box.width)} {format_number(box.height)}",
        }
        if self.surface_width is not None:
            attributes["width"] = format_number(self.surface_width)
        if self.surface_height is not None:
            attributes["height"] = format_number(self.surface_height)

        svg = ET.Element("svg", attributes)
        svg.append(self._node_element(scene.root))
        return svg

    def to_string(self, scene: RenderScene) -> str:
        """Serialize a scene to SVG text."""
        element = self.to_element(scene)
        ET.indent(element)
        return ET.tostring(element, encoding="unicode", xml_declaration=True)

    def write(self, scene: RenderScene, output_path: Path) -> None:
        """Write a scene to an SVG file.

        Raises:
            SceneWriteError: If the file cannot be written
        """
        try:
            output_path.write_text(self.to_string(scene) + "\n", encoding="utf-8")
        except OSError as e:
            raise SceneWriteError(str(output_path), str(e)) from e

    def _node_element(self, node: Node) -> ET.Element:
        if isinstance(node, Group):
            return self._group_element(node)
        if isinstance(node, Line):
            return ET.Element(
                "line",
                {
                    "class": node.css_class,
                    "x1": format_number(node.x1),
                    "y1": format_number(node.y1),
                    "x2": format_number(node.x2),
                    "y2": format_number(node.y2),
                    "stroke": STROKE,
                    "stroke-width": format_number(node.stroke_width),
                },
            )
        if isinstance(node, PathNode):
            return ET.Element(
                "path",
                {
                    "class": node.css_class,
                    "d": node.path_data(),
                    "fill": STROKE,
                    "stroke": STROKE,
                    "stroke-width": format_number(node.stroke_width),
                },
            )
        return self._marker_element(node)

    def _group_element(self, group: Group) -> ET.Element:
        attributes = {}
        if group.css_class:
            attributes["class"] = group.css_class
        if group.transform != IDENTITY:
            attributes["transform"] = "matrix({})".format(
                " ".join(format_number(v) for v in group.transform)
            )
        element = ET.Element("g", attributes)
        for child in group.children:
            element.append(self._node_element(child))
        return element

    def _marker_element(self, marker: Marker) -> ET.Element:
        attributes = {
            "class": marker.css_class,
            "fill": STROKE if marker.filled else "none",
            "stroke": STROKE,
            "stroke-width": format_number(marker.stroke_width),
        }
        if marker.shape is MarkerShape.SQUARE:
            attributes["d"] = square_path_data(marker.x, marker.y, marker.size)
            return ET.Element("path", attributes)
        if marker.shape is MarkerShape.DIAMOND:
            attributes["d"] = diamond_path_data(marker.x, marker.y, marker.size)
            return ET.Element("path", attributes)
        attributes.update(
            cx=format_number(marker.x),
            cy=format_number(marker.y),
            r=format_number(marker.size),
        )
        return ET.Element("circle", attributes)
