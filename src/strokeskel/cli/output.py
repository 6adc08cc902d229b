"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with summaries, tables, and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from strokeskel.core import ComparisonEntry
from strokeskel.domain import SkeletonResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_WARN = "!"  # Warning
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]strokeskel[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(path: str, kind: str, width: int | None = None, height: int | None = None) -> None:
    """Print input information.

    Args:
        path: Path to the input file
        kind: Input kind (e.g., "image", "contour")
        width: Raster width, if known
        height: Raster height, if known
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    line.append(f" ({kind})")
    console.print(line)
    if width is not None and height is not None:
        console.print(f"  {width} x {height} px")


def _format_time(ms: float) -> str:
    """Format milliseconds into human-readable time string."""
    if ms < 1:
        return f"{ms * 1000:.0f}µs"
    elif ms < 1000:
        return f"{ms:.1f}ms"
    return f"{ms / 1000:.1f}s"


def print_result(result: SkeletonResult, output_path: str | None = None) -> None:
    """Print the summary of one skeletonization run.

    Args:
        result: Pipeline result
        output_path: Where the skeleton image was written, if anywhere
    """
    iteration = result.iteration
    time_str = _format_time(result.elapsed_ms)

    if iteration.cancelled:
        console.print(f"\n[bold yellow]{SYM_WARN} Stopped early[/bold yellow] in {time_str}")
    elif not iteration.converged:
        console.print(
            f"\n[bold yellow]{SYM_WARN} Did not converge[/bold yellow] in {time_str}"
        )
        console.print("  Input may touch the border or contain noise")
    else:
        console.print(f"\n[bold green]{SYM_OK} Converged[/bold green] in {time_str}")

    console.print(
        f"  {result.point_count} skeleton points {SYM_DOT} "
        f"{iteration.iterations} iterations {SYM_DOT} "
        f"{iteration.total_changes} pixels removed {SYM_DOT} {iteration.strategy}"
    )

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_points(result: SkeletonResult) -> None:
    """Print skeleton coordinates, one per line."""
    for x, y in result.points():
        console.print(f"{x} {y}", highlight=False)


def print_comparison(entries: list[ComparisonEntry]) -> None:
    """Print a table comparing strategies.

    Args:
        entries: Comparison entries, baseline first
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Strategy")
    table.add_column("Points", justify="right")
    table.add_column("Iterations", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Relative", justify="right")
    table.add_column("Status")

    for entry in entries:
        iteration = entry.result.iteration
        if iteration.cancelled:
            status = "[yellow]stopped[/yellow]"
        elif iteration.converged:
            status = f"[green]{SYM_OK}[/green]"
        else:
            status = "[yellow]bound hit[/yellow]"
        relative = f"{entry.relative_time:.2f}x" if entry.relative_time is not None else "-"
        table.add_row(
            entry.method.value,
            str(entry.point_count),
            str(iteration.iterations),
            _format_time(entry.elapsed_ms),
            relative,
            status,
        )

    console.print()
    console.print(table)


def print_saved(paths: list[str]) -> None:
    """Print list of written files."""
    console.print(f"\n[bold green]{SYM_OK} Saved[/bold green] {len(paths)} images")
    for path in paths:
        line = Text("  ")
        line.append(path)
        console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
