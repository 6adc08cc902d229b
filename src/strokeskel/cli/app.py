"""CLI application entry point for strokeskel.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated, Any

import typer

from strokeskel import __version__
from strokeskel.cli.output import (
    console,
    print_comparison,
    print_error,
    print_header,
    print_input_info,
    print_points,
    print_result,
    print_saved,
    print_step,
)
from strokeskel.config import (
    ComparisonConfig,
    LoggingConfig,
    RasterConfig,
    SkeletonSettings,
    ThinningConfig,
    ThinningMethod,
)
from strokeskel.core import SkeletonProcessor, compare_strategies, save_comparison_images
from strokeskel.exceptions import NonConvergenceError, StrokeSkelError
from strokeskel.io import (
    color_buffer_to_raster,
    image_to_color_buffer,
    load_color_buffer,
    load_contour,
    rasterize_contour,
    save_raster,
)
from strokeskel.utils import configure_logging

EXIT_NOT_CONVERGED = 2

# Create the Typer app
app = typer.Typer(
    name="strokeskel",
    help="Reduce rasterized handwriting strokes to one-pixel-wide skeletons.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]strokeskel[/bold blue] v{__version__}")
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
    """Reduce rasterized handwriting strokes to one-pixel-wide skeletons."""


def _validate_input(input_path: Path) -> None:
    """Exit with an error message if ``input_path`` is not a readable file."""
    if not input_path.exists():
        print_error(
            f"Input file not found: {input_path}",
            details=f"The file '{input_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_path.is_file():
        print_error(
            f"Input path is not a file: {input_path}",
            details="Please provide an image or a .json contour file.",
        )
        raise typer.Exit(code=1)


def _load_buffer(input_path: Path, margin: int) -> tuple[list[Any], int, int, str]:
    """Load an image, or rasterize a contour file, into a color buffer.

    Returns:
        Tuple of (pixels, width, height, input kind)
    """
    if input_path.suffix.lower() == ".json":
        contour = load_contour(input_path)
        pixels, width, height = image_to_color_buffer(rasterize_contour(contour, margin=margin))
        return pixels, width, height, "contour"

    pixels, width, height = load_color_buffer(input_path)
    return pixels, width, height, "image"


def _parse_method(method: str) -> ThinningMethod:
    try:
        return ThinningMethod(method.lower())
    except ValueError:
        valid = ", ".join(m.value for m in ThinningMethod)
        print_error(f"Invalid method: {method}", details=f"Valid values: {valid}")
        raise typer.Exit(code=1) from None


@app.command()
def thin(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Image of a filled stroke, or a .json contour file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the skeleton as an image to this path",
        ),
    ] = None,
    method: Annotated[
        str,
        typer.Option(
            "--method",
            "-m",
            help="Thinning strategy (zhang_suen|center)",
        ),
    ] = "zhang_suen",
    max_iterations: Annotated[
        int,
        typer.Option(
            "--max-iterations",
            "-n",
            help="Safety bound on full thinning iterations",
            min=1,
        ),
    ] = 1000,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            "-t",
            help="Luma threshold; strictly brighter pixels are foreground",
            min=0,
            max=254,
        ),
    ] = 128,
    margin: Annotated[
        int,
        typer.Option(
            "--margin",
            help="Background margin around rasterized contours",
            min=1,
            max=100,
        ),
    ] = 10,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help=f"Exit with code {EXIT_NOT_CONVERGED} if thinning does not converge",
        ),
    ] = False,
    points: Annotated[
        bool,
        typer.Option(
            "--points",
            help="Print skeleton coordinates",
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
    """Thin a filled stroke down to its one-pixel-wide skeleton.

    Example:
        strokeskel thin stroke.png -o stroke-skeleton.png
    """
    _validate_input(input_path)
    thinning_method = _parse_method(method)

    settings = SkeletonSettings(
        thinning=ThinningConfig(
            method=thinning_method,
            max_iterations=max_iterations,
            threshold=threshold,
            fail_on_nonconvergence=strict,
        ),
        raster=RasterConfig(margin=margin),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading input")

    try:
        pixels, width, height, kind = _load_buffer(input_path, settings.raster.margin)

        if not quiet:
            print_input_info(str(input_path), kind, width, height)
            print_step(f"Thinning ({thinning_method.value})")

        processor = SkeletonProcessor(settings, logger=logger)
        result = processor.process_buffer(pixels, width, height, source=str(input_path))

        if output is not None:
            save_raster(result.raster, output)

    except NonConvergenceError as e:
        print_error(str(e), details="Input may touch the border or contain noise")
        raise typer.Exit(code=EXIT_NOT_CONVERGED) from None
    except StrokeSkelError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if not quiet:
        print_result(result, output_path=str(output) if output is not None else None)
    if points:
        print_points(result)


@app.command()
def compare(
    input_path: Annotated[
        Path,
        typer.Argument(
            help="Image of a filled stroke, or a .json contour file",
            show_default=False,
        ),
    ],
    budget_ms: Annotated[
        float | None,
        typer.Option(
            "--budget-ms",
            help="Per-strategy time budget in milliseconds",
            min=0.001,
        ),
    ] = None,
    save_dir: Annotated[
        Path | None,
        typer.Option(
            "--save-dir",
            help="Write input and per-strategy result images to this directory",
        ),
    ] = None,
    max_iterations: Annotated[
        int,
        typer.Option(
            "--max-iterations",
            "-n",
            help="Safety bound on full thinning iterations",
            min=1,
        ),
    ] = 1000,
    margin: Annotated[
        int,
        typer.Option(
            "--margin",
            help="Background margin around rasterized contours",
            min=1,
            max=100,
        ),
    ] = 10,
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
    """Compare all thinning strategies on the same input.

    Example:
        strokeskel compare stroke.json --save-dir comparison/
    """
    _validate_input(input_path)

    settings = SkeletonSettings(
        thinning=ThinningConfig(max_iterations=max_iterations),
        raster=RasterConfig(margin=margin),
        comparison=ComparisonConfig(time_budget_ms=budget_ms),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step("Loading input")

    try:
        pixels, width, height, kind = _load_buffer(input_path, settings.raster.margin)

        if not quiet:
            print_input_info(str(input_path), kind, width, height)
            print_step("Comparing strategies")

        entries = compare_strategies(
            pixels,
            width,
            height,
            config=settings.comparison,
            thinning=settings.thinning,
        )
        print_comparison(entries)

        if save_dir is not None:
            raster = color_buffer_to_raster(
                pixels, width, height, threshold=settings.thinning.threshold
            )
            written = save_comparison_images(raster, entries, save_dir, prefix=input_path.stem)
            if not quiet:
                print_saved([str(p) for p in written])

    except StrokeSkelError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
