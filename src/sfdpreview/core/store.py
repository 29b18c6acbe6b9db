"""Per-document glyph storage and fetch result caching."""

import logging

from sfdpreview.core.classifier import (
    LineKind,
    classify,
    parse_encoding_gid,
    parse_glyph_name,
)
from sfdpreview.domain import GlyphRecord

logger = logging.getLogger(__name__)


class GlyphStore:
    """Glyph groups of one SFD document, keyed by glyph id and by name.

    The store is rebuilt wholesale for every document snapshot: call
    ``clear()`` and then ``parse_all()`` with the new lines.

    Example:
        store = GlyphStore()
        store.parse_all(lines)
        gid = store.get_glyph_gid("A")
        data = store.get_glyph_data(gid)
    """

    def __init__(self) -> None:
        self._glyphs: dict[int, list[str] | None] = {}
        self._name_to_gid: dict[str, int] = {}

    def parse_all(self, lines: list[str]) -> None:
        """Split a document into glyph groups in a single forward pass.

        A group runs from ``StartChar:`` through ``EndChar``. Groups that never
        declare a valid ``Encoding:`` id are dropped.

        Args:
            lines: All lines of the document
        """
        current: GlyphRecord | None = None

        for line in lines:
            kind = classify(line)
            if kind is LineKind.START_CHAR:
                current = GlyphRecord(name=parse_glyph_name(line), lines=[line])
            elif current is None:
                continue
            elif kind is LineKind.END_CHAR:
                current.lines.append(line)
                if current.has_gid:
                    self.add_glyph(current.gid, current.name, current.lines)
                else:
                    logger.debug("Dropping glyph without encoding: %s", current.name)
                current = None
            else:
                if kind is LineKind.ENCODING:
                    gid = parse_encoding_gid(line)
                    if gid is not None:
                        current.gid = gid
                current.lines.append(line)

    def add_glyph(self, gid: int, name: str | None, lines: list[str] | None) -> None:
        """Register the lines of a glyph under its id and name."""
        self._glyphs[gid] = lines
        if name:
            self._name_to_gid[name] = gid

    def get_glyph_gid(self, name: str) -> int | None:
        """Get the glyph id registered for a name."""
        return self._name_to_gid.get(name)

    def has(self, gid: int) -> bool:
        """Check if a glyph id is registered."""
        return gid in self._glyphs

    def get_glyph_data(self, gid: int) -> list[str] | None:
        """Get the lines of a glyph, None if unknown."""
        return self._glyphs.get(gid)

    def list_names_sorted(self) -> list[tuple[str, int]]:
        """List ``(name, gid)`` pairs in ascending name order."""
        return sorted(self._name_to_gid.items(), key=lambda item: item[0])

    def clear(self) -> None:
        """Forget every glyph of the current document."""
        self._glyphs = {}
        self._name_to_gid = {}

    def __len__(self) -> int:
        return len(self._glyphs)


class GlyphCache:
    """Memoized results of external glyph lookups.

    Misses are cached as None so an unresolvable id is looked up once. A
    cache lives exactly as long as the document it was created for.
    """

    def __init__(self) -> None:
        self._entries: dict[int, list[str] | None] = {}

    def __contains__(self, gid: object) -> bool:
        return gid in self._entries

    def get(self, gid: int) -> list[str] | None:
        """Get cached lines for a glyph id (None for a cached miss)."""
        return self._entries.get(gid)

    def put(self, gid: int, lines: list[str] | None) -> None:
        """Cache a lookup result."""
        self._entries[gid] = lines

    def __len__(self) -> int:
        return len(self._entries)
