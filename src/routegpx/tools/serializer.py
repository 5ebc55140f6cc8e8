"""GPX 1.1 export of recorded rides."""

import logging
import math
from datetime import date, datetime, timedelta, timezone
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Callable, Sequence

from routegpx.config import settings
from routegpx.models import SampleForExport

logger = logging.getLogger(__name__)

DEFAULT_RIDE_NAME = "Ride"

EPOCH_DATE = date(1970, 1, 1)
MS_PER_DAY = 86_400_000
# The Gregorian calendar repeats every 400 years
DAYS_PER_400_YEARS = 146_097

# Wide enough for the exact decimal expansion of any float
DECIMAL_CONTEXT = Context(prec=400)

XML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape text for use in element content or attribute values."""
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def format_fixed(value: float, places: int) -> str:
    """
    Format with a fixed number of decimals, exact ties rounded away from zero.

    NaN and infinities are written as NaN, Infinity and -Infinity.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0  # no "-0.0"
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT))


def _format_year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    return f"{'+' if year > 0 else '-'}{abs(year):06d}"


def format_epoch_ms(timestamp_ms: int) -> str:
    """
    ISO-8601 UTC for a Unix time in milliseconds.

    Years outside 0000-9999 use the expanded six digit form, e.g.
    +010000-01-01T00:00:00.000Z.
    """
    days, ms = divmod(timestamp_ms, MS_PER_DAY)
    cycles, days = divmod(days, DAYS_PER_400_YEARS)
    day = EPOCH_DATE + timedelta(days=days)
    seconds, millis = divmod(ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return (
        f"{_format_year(day.year + 400 * cycles)}-{day.month:02d}-{day.day:02d}"
        f"T{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}Z"
    )


def format_time(value: datetime) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-05-01T09:30:00.000Z."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _trackpoint(sample: SampleForExport) -> str:
    time = format_epoch_ms(sample.timestamp_ms)
    # Zero altitude is written as missing
    ele = ""
    if sample.altitude and not math.isnan(sample.altitude):
        ele = f"\n        <ele>{format_fixed(sample.altitude, 1)}</ele>"
    return (
        f'      <trkpt lat="{format_fixed(sample.latitude, 6)}" lon="{format_fixed(sample.longitude, 6)}">\n'
        f"        <time>{time}</time>{ele}\n"
        f"      </trkpt>"
    )


def generate_gpx(
    samples: Sequence[SampleForExport],
    name: str = DEFAULT_RIDE_NAME,
    now: Callable[[], datetime] | None = None,
) -> str:
    """
    Create a GPX 1.1 document from recorded samples.

    Args:
        samples: Location samples in recording order
        name: Route name, written to both metadata and track
        now: Clock for the metadata timestamp, defaults to the wall clock

    Returns:
        GPX XML string
    """
    created = format_time((now or _utc_now)())
    safe_name = escape_xml(name)
    trackpoints = "\n".join(_trackpoint(sample) for sample in samples)

    logger.debug("Generating GPX %r with %d trackpoints", name, len(samples))

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="{escape_xml(settings.gpx_creator)}"
  xmlns="http://www.topografix.com/GPX/1/1"
  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
  xsi:schemaLocation="http://www.topografix.com/GPX/1/1 http://www.topografix.com/GPX/1/1/gpx.xsd">
  <metadata>
    <name>{safe_name}</name>
    <time>{created}</time>
  </metadata>
  <trk>
    <name>{safe_name}</name>
    <trkseg>
{trackpoints}
    </trkseg>
  </trk>
</gpx>"""
