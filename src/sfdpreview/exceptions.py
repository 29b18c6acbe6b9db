"""Exception hierarchy for sfdpreview."""


class SfdPreviewError(Exception):
    """Base exception for all sfdpreview errors."""

    pass


class DocumentError(SfdPreviewError):
    """Errors related to reading SFD documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading an SFD document or glyph file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class SceneWriteError(DocumentError):
    """Error writing a rendered scene."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write scene '{path}': {reason}")


class GlyphError(SfdPreviewError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in the document."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in document")


class GlyphLookupError(GlyphError):
    """A glyph fetcher failed while resolving a glyph id."""

    def __init__(self, gid: int, reason: str) -> None:
        self.gid = gid
        self.reason = reason
        super().__init__(f"Lookup of glyph id {gid} failed: {reason}")


class RenderError(SfdPreviewError):
    """Error building the scene of a specific glyph."""

    def __init__(self, gid: int, reason: str) -> None:
        self.gid = gid
        self.reason = reason
        super().__init__(f"Rendering glyph id {gid} failed: {reason}")
