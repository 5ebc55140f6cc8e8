"""Tolerant GPX reader.

Scans the document text with regular expressions instead of an XML parser,
so files that a strict parser would reject (unclosed trackpoints, stray
markup) still yield whatever points can be found. Nothing here raises for
missing or malformed content:

- the route name is the first <name> element anywhere, or "Unnamed Route"
- trackpoints come from <trkpt lat=".." lon="..">..</trkpt>, or when there
  are none of those, from bare <trkpt lat=".." lon=".."/> tags
- waypoints come from <wpt lat=".." lon="..">..</wpt>
- numbers that don't parse become NaN
"""

import logging
import math
import re

from routegpx.models import GeoPoint, ParsedRoute, Waypoint

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_NAME = "Unnamed Route"

NAME_RE = re.compile(r'<name>([^<]+)</name>')
TYPE_RE = re.compile(r'<type>([^<]+)</type>')
ELE_RE = re.compile(r'<ele>([^<]+)</ele>')
TRKPT_RE = re.compile(r'<trkpt lat="([^"]+)" lon="([^"]+)"[^>]*>(.*?)</trkpt>', re.DOTALL)
BARE_TRKPT_RE = re.compile(r'<trkpt lat="([^"]+)" lon="([^"]+)"[^>]*/?>')
WPT_RE = re.compile(r'<wpt lat="([^"]+)" lon="([^"]+)"[^>]*>(.*?)</wpt>', re.DOTALL)

# Leading decimal literal, the part a lenient float reader would consume
NUMBER_RE = re.compile(r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')


def parse_number(text: str) -> float:
    """Read the leading number in text, NaN if there is none."""
    match = NUMBER_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def _first(pattern: re.Pattern, text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_gpx(gpx_text: str) -> ParsedRoute:
    """
    Extract the route name, trackpoints and waypoints from GPX text.

    Args:
        gpx_text: The GPX document

    Returns:
        ParsedRoute with points in document order
    """
    name = _first(NAME_RE, gpx_text) or DEFAULT_ROUTE_NAME

    trackpoints = []
    for match in TRKPT_RE.finditer(gpx_text):
        ele = _first(ELE_RE, match.group(3))
        trackpoints.append(GeoPoint(
            lat=parse_number(match.group(1)),
            lng=parse_number(match.group(2)),
            ele=parse_number(ele) if ele is not None else None,
        ))

    # Some producers write trackpoints without children or closing tags
    if not trackpoints:
        for match in BARE_TRKPT_RE.finditer(gpx_text):
            trackpoints.append(GeoPoint(
                lat=parse_number(match.group(1)),
                lng=parse_number(match.group(2)),
            ))
        if trackpoints:
            logger.debug("Read %d trackpoints from bare <trkpt> tags", len(trackpoints))

    waypoints = []
    for match in WPT_RE.finditer(gpx_text):
        content = match.group(3)
        waypoints.append(Waypoint(
            lat=parse_number(match.group(1)),
            lng=parse_number(match.group(2)),
            name=_first(NAME_RE, content),
            type=_first(TYPE_RE, content),
        ))

    logger.debug(
        "Parsed route %r: %d trackpoints, %d waypoints",
        name, len(trackpoints), len(waypoints),
    )
    return ParsedRoute(name=name, trackpoints=trackpoints, waypoints=waypoints)
