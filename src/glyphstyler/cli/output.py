"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from glyphstyler.domain import ControlPoint
from glyphstyler.io import FontMetadata

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]Glyphstyler[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str,
    font_type: str,
    glyph_count: int,
    upm: int,
    flavor: str | None = None,
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
        flavor: Web font flavor, if any
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    kind = f"{font_type}, {flavor.upper()}" if flavor else font_type
    line1.append(f" ({kind})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_metadata(metadata: FontMetadata) -> None:
    """Print name table metadata as a two-column table."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    for field_name, value in metadata.model_dump().items():
        label = field_name.replace("_", " ").capitalize()
        table.add_row(label, Text(value) if value else Text("-", style="dim"))
    console.print(table)


def print_styles(rows: list[tuple[str, str, str]]) -> None:
    """Print available style presets.

    Args:
        rows: (name, description, parameters) per style
    """
    table = Table(box=None, padding=(0, 2))
    table.add_column("Style", style="bold")
    table.add_column("Effect")
    table.add_column("Parameters", style="dim")
    for name, description, parameters in rows:
        table.add_row(name, description, parameters)
    console.print(table)


def print_path(path_syntax: str) -> None:
    """Print an outline in path syntax."""
    console.print(Text(path_syntax or "(empty)"))


def print_points(points: list[ControlPoint]) -> None:
    """Print control points with their owning command and field."""
    table = Table(box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Command", justify="right")
    table.add_column("Field")
    for i, point in enumerate(points):
        kind = "on" if point.on_curve else "off"
        if point.last_of_contour:
            kind += " (end)"
        table.add_row(
            str(i),
            kind,
            f"{point.x:g}",
            f"{point.y:g}",
            str(point.command_index),
            point.key,
        )
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    processed: int,
    skipped: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        processed: Number of glyphs transformed
        skipped: Number of glyphs left untouched
        avg_time_ms: Average processing time per glyph in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {processed} glyphs styled {SYM_DOT} {skipped} skipped")

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.2f}ms avg per glyph")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
