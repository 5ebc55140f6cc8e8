"""Reading, writing and measuring GPX routes."""

from .parser import parse_gpx
from .serializer import generate_gpx, escape_xml
from .stats import compute_stats

__all__ = [
    "parse_gpx",
    "generate_gpx",
    "escape_xml",
    "compute_stats",
]
