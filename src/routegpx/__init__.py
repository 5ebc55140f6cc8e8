"""GPX route import, export and statistics."""

__version__ = "0.1.0"

from .tools import parse_gpx, generate_gpx, compute_stats

__all__ = [
    "parse_gpx",
    "generate_gpx",
    "compute_stats",
]
