"""Document I/O layer for sfdpreview.

This module handles reading SFD documents and sibling glyph files, and
writing rendered scenes as SVG.

Key responsibilities:
- Load SFD documents (single `.sfd` files or `.glyph` files of an `.sfdir`)
- Resolve glyph ids from sibling `.glyph` files
- Serialize render scenes to SVG documents

Key classes:
- SiblingGlyphFetcher: Async glyph lookup across a directory
- SvgWriter: Render scene to SVG
"""

from sfdpreview.io.reader import SiblingGlyphFetcher, read_sfd_lines
from sfdpreview.io.writer import SvgWriter

__all__ = [
    "SiblingGlyphFetcher",
    "SvgWriter",
    "read_sfd_lines",
]
