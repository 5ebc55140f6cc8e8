"""Command line entry point for GPX route tools.

Usage:
    python main.py summary ride.gpx           # Name, points, distance, climbing
    python main.py export ride.gpx "Evening"  # Rewrite as a clean GPX 1.1 file
"""

import logging
import sys
import time

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from routegpx.config import settings
from routegpx.models import SampleForExport
from routegpx.tools import compute_stats, generate_gpx, parse_gpx
from routegpx.utils import format_distance, read_gpx_file, save_gpx_file


console = Console()

USAGE = (
    "[bold]Usage:[/bold]\n"
    "  python main.py summary FILE\n"
    "  python main.py export FILE [NAME]"
)


def summary(filepath: str) -> None:
    """Print what a GPX file contains."""
    route = parse_gpx(read_gpx_file(filepath))
    stats = compute_stats(route.trackpoints)

    console.print(Panel(
        f"[bold]Trackpoints:[/bold] {len(route.trackpoints)}\n"
        f"[bold]Waypoints:[/bold] {len(route.waypoints)}\n"
        f"[bold]Distance:[/bold] {format_distance(stats.distance_m)}\n"
        f"[bold]Elevation gain:[/bold] {stats.elevation_gain_m} m",
        title=route.name,
        border_style="blue",
    ))


def export(filepath: str, name: str | None = None) -> None:
    """Re-emit a GPX file's trackpoints as a GPX 1.1 ride."""
    route = parse_gpx(read_gpx_file(filepath))
    name = name or route.name

    # Source points carry no usable time, space them one second apart
    start_ms = int(time.time() * 1000)
    samples = [
        SampleForExport(
            latitude=point.lat,
            longitude=point.lng,
            altitude=point.ele,
            timestamp_ms=start_ms + i * 1000,
        )
        for i, point in enumerate(route.trackpoints)
    ]

    safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in name)
    path = save_gpx_file(generate_gpx(samples, name), settings.output_dir / safe_name)

    console.print(f"[green]✓[/green] Wrote {len(samples)} trackpoints to {path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )

    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in ("summary", "export") or len(args) < 2:
        console.print(USAGE)
        return 1

    command, filepath = args[0], args[1]
    try:
        if command == "summary":
            summary(filepath)
        else:
            export(filepath, args[2] if len(args) > 2 else None)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
