"""Preview session: one loaded document, its glyph cache and active render.

The session is the collaborator that feeds the scene builder. It resolves
glyph ids from the loaded document first, then through an optional external
fetcher (e.g. sibling `.glyph` files), caching every external result for as
long as the document stays loaded.
"""

from sfdpreview.config import PreviewSettings
from sfdpreview.core.scene import SceneBuilder
from sfdpreview.core.store import GlyphCache, GlyphStore
from sfdpreview.domain import GlyphFetcher, RenderScene
from sfdpreview.exceptions import GlyphLookupError, GlyphNotFoundError
from sfdpreview.utils import RenderLogger


class PreviewSession:
    """Owns the glyph store, the fetch cache and the current scene.

    Renders are sequential but may interleave when a new glyph becomes
    active while an earlier render still awaits lookups. Only the most
    recent render is committed to ``current_scene``; results superseded by a
    later render of any glyph, or by a document load, are discarded.

    Example:
        session = PreviewSession(fetcher=SiblingGlyphFetcher(folder))
        session.load_document(lines)
        scene = await session.show_glyph("A")
    """

    def __init__(
        self,
        fetcher: GlyphFetcher | None = None,
        settings: PreviewSettings | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            fetcher: External capability for glyphs outside the document
            settings: Application settings (defaults if None)
            render_logger: Logger collecting render statistics
        """
        self.settings = settings or PreviewSettings()
        self.builder = SceneBuilder(self.settings.scene)
        self.render_logger = render_logger or RenderLogger()
        self._fetcher = fetcher
        self._store = GlyphStore()
        self._cache = GlyphCache()
        self._active_gid: int | None = None
        self._render_serial = 0
        self.current_name: str | None = None
        self.current_scene: RenderScene | None = None

    @property
    def store(self) -> GlyphStore:
        return self._store

    @property
    def active_gid(self) -> int | None:
        """Glyph id of the most recently requested render."""
        return self._active_gid

    def load_document(self, lines: list[str]) -> None:
        """Replace the loaded document.

        The store is rebuilt, the fetch cache discarded and pending renders
        invalidated; the active glyph name is kept so the caller may
        re-render it.
        """
        self._store.clear()
        self._store.parse_all(lines)
        self._cache = GlyphCache()
        # renders still awaiting lookups belong to the old document
        self._render_serial += 1
        self.render_logger.log_document_loaded(len(lines), len(self._store))

    async def get_glyph_data(self, gid: int) -> list[str] | None:
        """Resolve a glyph id to its lines.

        Args:
            gid: Glyph id to resolve

        Returns:
            Lines of the glyph, or None when no source knows it
        """
        if self._store.has(gid):
            return self._store.get_glyph_data(gid)
        if gid in self._cache:
            return self._cache.get(gid)

        lines = None
        if self._fetcher is not None:
            try:
                lines = await self._fetcher(gid)
            except (GlyphLookupError, OSError) as e:
                self.render_logger.log_lookup_error(gid, e)

        if lines is None:
            self.render_logger.log_glyph_missing(gid)
        self._cache.put(gid, lines)
        return lines

    def glyph_names(self) -> list[tuple[str, int]]:
        """List ``(name, gid)`` pairs of the document in name order."""
        return self._store.list_names_sorted()

    def startup_glyph(self, name: str | None = None) -> tuple[str, int] | None:
        """Pick the glyph to show first.

        Args:
            name: Preferred glyph name (e.g. the last one shown)

        Returns:
            ``(name, gid)`` of the named glyph if known, otherwise of the
            first glyph in name order; None for an empty document
        """
        if name is not None:
            gid = self._store.get_glyph_gid(name)
            if gid is not None:
                return (name, gid)
        names = self.glyph_names()
        return names[0] if names else None

    async def show_glyph(self, name: str) -> RenderScene | None:
        """Render a glyph by name and make it the active glyph.

        Raises:
            GlyphNotFoundError: If the document has no glyph with that name
        """
        gid = self._store.get_glyph_gid(name)
        if gid is None:
            raise GlyphNotFoundError(name)
        self.current_name = name
        return await self.show_gid(gid)

    async def show_gid(self, gid: int) -> RenderScene | None:
        """Render a glyph id and commit the scene unless a newer render started.

        Returns:
            The committed scene, or None when the glyph is unknown or the
            render was superseded by a newer one
        """
        self._active_gid = gid
        self._render_serial += 1
        serial = self._render_serial
        scene = await self.builder.build_scene(gid, self.get_glyph_data)
        if serial != self._render_serial:
            self.render_logger.log_render_stale(gid, self._active_gid)
            return None

        self.current_scene = scene
        if scene is not None:
            self.render_logger.log_render_complete(gid, scene.node_count())
        return scene

    async def rerender(self) -> RenderScene | None:
        """Render the active glyph again (e.g. after a surface resize)."""
        if self._active_gid is None:
            return None
        return await self.show_gid(self._active_gid)
