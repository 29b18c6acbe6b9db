"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sfdpreview.domain import RenderScene

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]sfdpreview[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, line_count: int, glyph_count: int) -> None:
    """Print document information.

    Args:
        path: Path to the document
        line_count: Number of lines read
        glyph_count: Number of glyphs with a glyph id
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {line_count:,} lines")


def print_glyph_table(glyphs: list[tuple[str, int]]) -> None:
    """Print glyph names and ids as a table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Name")
    table.add_column("GID", justify="right")
    for name, gid in glyphs:
        table.add_row(Text(name), str(gid))
    console.print(table)


def print_scene_summary(name: str, scene: RenderScene) -> None:
    """Print the frame and drawable count of a rendered glyph."""
    min_x, min_y, width, height = scene.view_box.as_tuple()
    console.print(
        f"  {name} {SYM_DOT} viewBox {min_x:g} {min_y:g} {width:g} {height:g} "
        f"{SYM_DOT} {scene.node_count()} drawables"
    )


def print_success(output_path: str, missing: int) -> None:
    """Print success message.

    Args:
        output_path: Path to the written SVG
        missing: Number of references that could not be resolved
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)
    if missing:
        console.print(f"  [yellow]{missing} unresolved references[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
