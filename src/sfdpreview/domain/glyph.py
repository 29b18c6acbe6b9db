"""Glyph records and composite references.

This module defines the raw glyph record kept by the glyph store and the
parsed form of a composite reference (`Refer:` line).
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field


@dataclass
class GlyphRecord:
    """The raw lines of one glyph group.

    Attributes:
        gid: Glyph id from the `Encoding:` record (-1 if never declared)
        name: Glyph name from the `StartChar:` record
        lines: Lines from `StartChar:` through `EndChar`, in document order
    """

    gid: int = -1
    name: str | None = None
    lines: list[str] = field(default_factory=list)

    @property
    def has_gid(self) -> bool:
        """Check if the group declared a valid glyph id."""
        return self.gid != -1


@dataclass(frozen=True, slots=True)
class ReferenceRecord:
    """A composite reference to another glyph.

    The six coefficients follow the PostScript/SVG matrix convention:
    ``x' = a*x + c*y + e`` and ``y' = b*x + d*y + f``.

    Attributes:
        gid: Glyph id of the referenced glyph
        codepoint: Unicode code point of the referenced glyph (unused)
        selected: Editor selection flag (ignored)
        a: Affine coefficient xx
        b: Affine coefficient xy
        c: Affine coefficient yx
        d: Affine coefficient yy
        e: Horizontal offset
        f: Vertical offset
    """

    gid: int
    codepoint: int
    selected: str
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @property
    def matrix(self) -> tuple[float, float, float, float, float, float]:
        """Return the affine coefficients as a 6-tuple."""
        return (self.a, self.b, self.c, self.d, self.e, self.f)


GlyphFetcher = Callable[[int], Awaitable[list[str] | None]]
"""Async capability resolving a glyph id to its lines (None when not found)."""
