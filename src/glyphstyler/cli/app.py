"""CLI application entry point for glyphstyler.

This module provides the main CLI interface using Typer.
"""

import random
from pathlib import Path
from typing import Annotated

import typer

from glyphstyler import __version__
from glyphstyler.cli.output import (
    console,
    create_progress,
    print_error,
    print_font_info,
    print_header,
    print_metadata,
    print_path,
    print_points,
    print_step,
    print_styles,
    print_success,
)
from glyphstyler.config import (
    GlyphStylerSettings,
    LoggingConfig,
    ProcessingConfig,
    StyleName,
)
from glyphstyler.core import FontProcessor, build_transform, parse_style
from glyphstyler.core.styles import STYLE_DESCRIPTIONS, describe_parameters
from glyphstyler.domain import extract_control_points, to_path_syntax
from glyphstyler.exceptions import (
    BatchError,
    FontLoadError,
    FontSaveError,
    GlyphStylerError,
)
from glyphstyler.io import FontReader, FontWriter, read_metadata, write_metadata

# Create the Typer app
app = typer.Typer(
    name="glyphstyler",
    help="Apply geometric styles (bold, italic, pixelate, ...) to every glyph of a font.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphstyler[/bold blue] v{__version__}")
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
    """Apply geometric styles to font outlines."""


def _check_input(input_font: Path) -> None:
    if not input_font.exists():
        print_error(
            f"Input file not found: {input_font}",
            details=f"The file '{input_font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_font.is_file():
        print_error(
            f"Input path is not a file: {input_font}",
            details="Please provide a path to a TTF, OTF, WOFF or WOFF2 font file.",
        )
        raise typer.Exit(code=1)


def _load(input_font: Path) -> FontReader:
    try:
        reader = FontReader(input_font)
        reader.load()
    except Exception as e:
        raise FontLoadError(str(input_font), str(e)) from e
    return reader


def _parse_style_or_exit(style: str) -> StyleName:
    try:
        return parse_style(style)
    except GlyphStylerError:
        print_error(
            f"Invalid style: {style}",
            details="Valid values: " + ", ".join(s.value for s in StyleName),
        )
        raise typer.Exit(code=1) from None


@app.command()
def apply(
    input_font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF/WOFF/WOFF2 font file",
            show_default=False,
        ),
    ],
    style: Annotated[
        str,
        typer.Option(
            "--style",
            "-s",
            help="Style preset (bold|thin|wide|condensed|italic|flatten|pixelate|jitter|punk)",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-{Style}.{ext})",
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Random seed for jitter and punk",
        ),
    ] = None,
    keep_names: Annotated[
        bool,
        typer.Option(
            "--keep-names",
            help="Do not append the style to the font's family names",
        ),
    ] = False,
    include_composite: Annotated[
        bool,
        typer.Option(
            "--include-composite",
            help="Also style composite glyphs (they are decomposed)",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Apply a style preset to every glyph of a font.

    Example:
        glyphstyler apply Roboto-Regular.ttf --style italic

    This will create Roboto-Regular-Italic.ttf with every outline sheared.
    """
    _check_input(input_font)
    style_name = _parse_style_or_exit(style)

    if not quiet:
        print_header(__version__)

    settings = GlyphStylerSettings(
        processing=ProcessingConfig(
            skip_composite=not include_composite,
            seed=seed,
            rename_font=not keep_names,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    output_path = output or FontWriter.get_styled_path(input_font, style_name.value)

    try:
        if not quiet:
            print_step("Loading font")
            reader = _load(input_font)
            try:
                print_font_info(
                    font_path=str(input_font),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                    flavor=reader.flavor,
                )
                glyph_count = reader.glyph_count
            finally:
                reader.close()

            print_step(f"Applying {style_name.value}")

        processor = FontProcessor(settings)

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task(
                    f"Styling {glyph_count} glyphs", total=glyph_count
                )

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.process(
                    font_path=input_font,
                    style=style_name,
                    output_path=output_path,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.process(
                font_path=input_font,
                style=style_name,
                output_path=output_path,
            )

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=stats.duration_seconds,
                processed=stats.processed_count,
                skipped=stats.skipped_count,
                avg_time_ms=stats.avg_glyph_time_ms,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except BatchError as e:
        print_error(str(e), details="No output file was written.")
        raise typer.Exit(code=1)
    except GlyphStylerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def styles() -> None:
    """List the available style presets and their default parameters."""
    rows = [
        (style.value, STYLE_DESCRIPTIONS[style], describe_parameters(style))
        for style in StyleName
    ]
    print_styles(rows)


@app.command()
def info(
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to font file", show_default=False),
    ],
) -> None:
    """Show font format, size and name table metadata."""
    _check_input(input_font)

    try:
        reader = _load(input_font)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)

    try:
        print_font_info(
            font_path=str(input_font),
            font_type=reader.format,
            glyph_count=reader.glyph_count,
            upm=reader.units_per_em,
            flavor=reader.flavor,
        )
        console.print()
        print_metadata(read_metadata(reader.font))
    finally:
        reader.close()


@app.command()
def outline(
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to font file", show_default=False),
    ],
    glyph: Annotated[
        str,
        typer.Argument(help="Glyph name, or a single character", show_default=False),
    ],
    style: Annotated[
        str | None,
        typer.Option(
            "--style",
            "-s",
            help="Preview the outline with a style preset applied",
        ),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            help="Random seed for jitter and punk",
        ),
    ] = None,
    points: Annotated[
        bool,
        typer.Option(
            "--points",
            help="List control points instead of the path",
        ),
    ] = False,
) -> None:
    """Print one glyph's outline as path syntax, optionally styled."""
    _check_input(input_font)
    style_name = _parse_style_or_exit(style) if style is not None else None

    try:
        reader = _load(input_font)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)

    try:
        glyph_name = reader.resolve_glyph_name(glyph)
        if glyph_name is None:
            print_error(f"Glyph not found: {glyph}")
            raise typer.Exit(code=1)
        glyph_outline = reader.get_outline(glyph_name) or ()
    finally:
        reader.close()

    if style_name is not None:
        rng = random.Random(seed) if seed is not None else None
        glyph_outline = build_transform(style_name, rng=rng)(glyph_outline)

    if points:
        print_points(list(extract_control_points(glyph_outline)))
    else:
        print_path(to_path_syntax(glyph_outline))


@app.command()
def meta(
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to font file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Where to save the edited font (required when editing)",
        ),
    ] = None,
    family: Annotated[str | None, typer.Option("--family", help="Family name")] = None,
    subfamily: Annotated[str | None, typer.Option("--subfamily", help="Subfamily name")] = None,
    full_name: Annotated[str | None, typer.Option("--full-name", help="Full name")] = None,
    version: Annotated[str | None, typer.Option("--font-version", help="Version string")] = None,
    copyright_notice: Annotated[str | None, typer.Option("--copyright", help="Copyright notice")] = None,
    manufacturer: Annotated[str | None, typer.Option("--manufacturer", help="Manufacturer")] = None,
    designer: Annotated[str | None, typer.Option("--designer", help="Designer")] = None,
    description: Annotated[str | None, typer.Option("--description", help="Description")] = None,
    license_text: Annotated[str | None, typer.Option("--license", help="License description")] = None,
) -> None:
    """Show or edit name table metadata.

    Without edit options the current metadata is printed.
    """
    _check_input(input_font)

    edits = {
        "font_family": family,
        "font_subfamily": subfamily,
        "full_name": full_name,
        "version": version,
        "copyright": copyright_notice,
        "manufacturer": manufacturer,
        "designer": designer,
        "description": description,
        "license": license_text,
    }
    edits = {key: value for key, value in edits.items() if value is not None}

    if edits and output is None:
        print_error("Editing metadata requires --output")
        raise typer.Exit(code=1)

    try:
        reader = _load(input_font)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)

    try:
        metadata = read_metadata(reader.font)
        if edits and output is not None:
            metadata = metadata.model_copy(update=edits)
            write_metadata(reader.font, metadata)
            FontWriter(reader.font, output).save()
            print_step(f"Saved {output}")
        print_metadata(metadata)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    finally:
        reader.close()


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
