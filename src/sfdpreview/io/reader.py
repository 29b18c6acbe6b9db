"""Reading SFD documents and sibling glyph files.

FontForge can store a font as one `.sfd` file or as an `.sfdir` directory
holding one `.glyph` file per glyph. A glyph shown from a `.glyph` file may
reference glyphs that live in the other files of the same directory.
"""

import asyncio
import logging
from pathlib import Path

from sfdpreview.core.classifier import LineKind, classify, parse_encoding_gid
from sfdpreview.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

GLYPH_FILE_PATTERN = "*.glyph"


def split_lines(text: str) -> list[str]:
    """Split document text into lines, dropping carriage returns."""
    return [line.rstrip("\r") for line in text.split("\n")]


def read_sfd_lines(path: Path) -> list[str]:
    """Read an SFD document or glyph file as a list of lines.

    Args:
        path: Path to the `.sfd` or `.glyph` file

    Returns:
        Lines of the document

    Raises:
        DocumentLoadError: If the file does not exist or cannot be decoded
    """
    if not path.exists():
        raise DocumentLoadError(str(path), "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(str(path), str(e)) from e

    return split_lines(text)


def _file_gid(lines: list[str]) -> int | None:
    for line in lines:
        if classify(line) is LineKind.ENCODING:
            return parse_encoding_gid(line)
    return None


class SiblingGlyphFetcher:
    """Resolves glyph ids by scanning `.glyph` files in a directory.

    The first `Encoding:` line of each file decides whether the file holds
    the requested glyph. Instances are awaitable callables and can be passed
    wherever a glyph fetcher is expected.

    Example:
        fetch = SiblingGlyphFetcher(Path("MyFont.sfdir"))
        lines = await fetch(36)
    """

    def __init__(self, directory: Path, pattern: str = GLYPH_FILE_PATTERN) -> None:
        """Initialize the fetcher.

        Args:
            directory: Directory holding the glyph files
            pattern: Glob pattern selecting glyph files
        """
        self._directory = directory
        self._pattern = pattern

    @property
    def directory(self) -> Path:
        return self._directory

    async def __call__(self, gid: int) -> list[str] | None:
        """Find the lines of the glyph with the given id.

        Args:
            gid: Glyph id to look up

        Returns:
            Lines of the matching glyph file, or None if no file matches
        """
        if not self._directory.is_dir():
            return None

        for path in sorted(self._directory.glob(self._pattern)):
            try:
                text = await asyncio.to_thread(path.read_text, encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable glyph file %s: %s", path, e)
                continue

            lines = split_lines(text)
            if _file_gid(lines) == gid:
                logger.debug("Glyph %d found in %s", gid, path.name)
                return lines

        return None
