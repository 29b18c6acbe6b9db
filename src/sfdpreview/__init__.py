"""sfdpreview - Preview FontForge SFD glyph outlines as vector scenes.

sfdpreview reads the line-oriented spline font description (SFD) text format,
resolves composite glyph references and renders a single glyph as an SVG
document with its outline, point markers and control handles.

Example:
    $ sfdpreview render MyFont.sfd --glyph A

This will create A.svg showing the outline of glyph A fit into an auto
computed frame.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
