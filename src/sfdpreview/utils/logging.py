"""Logging utilities for sfdpreview."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics collected while previewing a document."""

    rendered_count: int = 0
    stale_count: int = 0
    missing_glyphs: list[int] = field(default_factory=list)
    lookup_errors: list[tuple[int, str]] = field(default_factory=list)

    @property
    def missing_count(self) -> int:
        """Number of glyph ids that could not be resolved."""
        return len(self.missing_glyphs)


_handlers: list[logging.Handler] = []


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # replace handlers from an earlier call
    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sfdpreview")
    logger.debug("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class RenderLogger:
    """Logger for tracking document loads, renders and glyph lookups."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("sfdpreview")
        self._stats = RenderStats()

    def log_document_loaded(self, line_count: int, glyph_count: int) -> None:
        """Log a freshly parsed document."""
        self._logger.info("Document loaded", lines=line_count, glyphs=glyph_count)

    def log_render_complete(self, gid: int, node_count: int) -> None:
        """Log a committed render."""
        self._logger.debug("Glyph rendered", gid=gid, nodes=node_count)
        self._stats.rendered_count += 1

    def log_render_stale(self, gid: int, active_gid: int | None) -> None:
        """Log a render discarded because another glyph became active."""
        self._logger.debug("Stale render discarded", gid=gid, active=active_gid)
        self._stats.stale_count += 1

    def log_glyph_missing(self, gid: int) -> None:
        """Log a glyph id that no source could resolve."""
        self._logger.debug("Glyph not found", gid=gid)
        self._stats.missing_glyphs.append(gid)

    def log_lookup_error(self, gid: int, error: Exception) -> None:
        """Log a failing glyph fetcher."""
        self._logger.warning(
            "Glyph lookup failed",
            gid=gid,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.lookup_errors.append((gid, str(error)))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
