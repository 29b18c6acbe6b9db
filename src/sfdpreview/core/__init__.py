"""Core processing for sfdpreview.

This module contains the parser, geometry engine and scene builder:

- Line classification of SFD records
- Glyph store (document segmentation) and fetch cache
- Layer extraction and spline command decoding
- Bounding box estimation across composite references
- Affine composition of boxes and groups
- Scene building and the preview session driving it

Key functions:
- classify: Recognize an SFD record line
- extract_layer: Isolate references and spline lines of a layer
- decode: Decode a spline line into a command
- estimate: Frame of a spline set seeded with the advance width
- estimate_with_references: Frame of composite references (async)
- merge_view_box, add_margin: Frame arithmetic
- transform_box, transform_group: Affine composition

Key classes:
- GlyphStore: Per-document glyph groups by id and name
- GlyphCache: Memoized external lookups
- SceneBuilder: Builds the render scene of one glyph
- PreviewSession: Loaded document, cache and active render
"""

from sfdpreview.core.affine import flip_transform, transform_box, transform_group
from sfdpreview.core.bbox import (
    add_margin,
    estimate,
    estimate_glyph_box,
    estimate_local_box,
    estimate_with_references,
    merge_view_box,
)
from sfdpreview.core.classifier import LineKind, classify, parse_encoding_gid, parse_width
from sfdpreview.core.commands import decode, decode_all, parse_point_flag, point_type_from_flag
from sfdpreview.core.layer import LayerData, extract_layer, parse_reference, parse_references
from sfdpreview.core.scene import SceneBuilder, render_scale
from sfdpreview.core.session import PreviewSession
from sfdpreview.core.store import GlyphCache, GlyphStore

__all__ = [
    # Classes
    "GlyphCache",
    "GlyphStore",
    "LayerData",
    "LineKind",
    "PreviewSession",
    "SceneBuilder",
    # Parsing
    "classify",
    "decode",
    "decode_all",
    "extract_layer",
    "parse_encoding_gid",
    "parse_point_flag",
    "parse_reference",
    "parse_references",
    "parse_width",
    "point_type_from_flag",
    # Geometry
    "add_margin",
    "estimate",
    "estimate_glyph_box",
    "estimate_local_box",
    "estimate_with_references",
    "flip_transform",
    "merge_view_box",
    "render_scale",
    "transform_box",
    "transform_group",
]
