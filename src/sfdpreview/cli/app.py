"""CLI application entry point for sfdpreview.

This module provides the main CLI interface using Typer.
"""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from sfdpreview import __version__
from sfdpreview.cli.output import (
    console,
    print_document_info,
    print_error,
    print_glyph_table,
    print_header,
    print_scene_summary,
    print_step,
    print_success,
)
from sfdpreview.config import LogLevel, LoggingConfig, PreviewSettings, SceneConfig
from sfdpreview.core import PreviewSession
from sfdpreview.exceptions import (
    DocumentLoadError,
    GlyphNotFoundError,
    RenderError,
    SceneWriteError,
    SfdPreviewError,
)
from sfdpreview.io import SiblingGlyphFetcher, SvgWriter, read_sfd_lines
from sfdpreview.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="sfdpreview",
    help="Preview glyph outlines of FontForge SFD documents as SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]sfdpreview[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Preview glyph outlines of FontForge SFD documents as SVG."""


def _load_session(input_file: Path, settings: PreviewSettings, quiet: bool) -> PreviewSession:
    """Read a document and load it into a new preview session.

    Glyphs referenced but not defined in the document are looked up in the
    sibling `.glyph` files of its directory.
    """
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )
    lines = read_sfd_lines(input_file)
    session = PreviewSession(
        fetcher=SiblingGlyphFetcher(input_file.parent),
        settings=settings,
        render_logger=RenderLogger(logger),
    )
    session.load_document(lines)
    if not quiet:
        print_document_info(str(input_file), len(lines), len(session.store))
    return session


@app.command()
def render(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an SFD document or .glyph file",
            show_default=False,
        ),
    ],
    glyph: Annotated[
        str | None,
        typer.Option(
            "--glyph",
            "-g",
            help="Name of the glyph to render (default: first glyph by name)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {glyph}.svg)",
        ),
    ] = None,
    width: Annotated[
        float,
        typer.Option(
            "--width",
            help="Surface width in pixels",
            min=1.0,
        ),
    ] = 400.0,
    height: Annotated[
        float,
        typer.Option(
            "--height",
            help="Surface height in pixels",
            min=1.0,
        ),
    ] = 400.0,
    margin: Annotated[
        float,
        typer.Option(
            "--margin",
            "-m",
            help="Margin relative to the larger frame dimension (0-1)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.2,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render one glyph of an SFD document to an SVG file.

    Composite references are resolved within the document first and then
    from sibling .glyph files in the same directory.

    Example:
        sfdpreview render MyFont.sfd --glyph A
    """
    if not input_file.is_file():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading document")

    settings = PreviewSettings(
        scene=SceneConfig(surface_width=width, surface_height=height, margin_rate=margin),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    try:
        session = _load_session(input_file, settings, quiet)

        if glyph is not None:
            name = glyph
        else:
            startup = session.startup_glyph()
            if startup is None:
                print_error("No glyphs with an encoding found in document")
                raise typer.Exit(code=1)
            name, _gid = startup

        if not quiet:
            print_step(f"Rendering {name}")

        scene = asyncio.run(session.show_glyph(name))
        if scene is None:
            print_error(f"Nothing to render for glyph '{name}'")
            raise typer.Exit(code=1)

        output_path = output if output is not None else Path(f"{name}.svg")
        SvgWriter(width, height).write(scene, output_path)

        if not quiet:
            print_scene_summary(name, scene)
            print_success(str(output_path), session.render_logger.stats.missing_count)

    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except RenderError as e:
        print_error(f"Could not render glyph: {e.reason}")
        raise typer.Exit(code=1)
    except SceneWriteError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except SfdPreviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command("list")
def list_glyphs(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an SFD document or .glyph file",
            show_default=False,
        ),
    ],
) -> None:
    """List the glyphs of an SFD document with their glyph ids."""
    if not input_file.is_file():
        print_error(f"Input file not found: {input_file}")
        raise typer.Exit(code=1)

    try:
        session = _load_session(input_file, PreviewSettings(), quiet=True)
    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)

    glyphs = session.glyph_names()
    console.print(f"\n[bold]{len(glyphs)} glyphs[/bold]\n")
    print_glyph_table(glyphs)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
