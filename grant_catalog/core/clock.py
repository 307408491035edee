"""
Reference time construction.

All deadline comparisons use an explicit, timezone-aware reference
time built once at the top level and passed down.
"""

from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

from dateutil import parser as date_parser
from dateutil import tz

DEFAULT_TIMEZONE = "Asia/Tokyo"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def resolve_zone(name: str) -> tzinfo:
    """
    Resolve an IANA zone name.

    Args:
        name: Zone identifier, e.g. "Asia/Tokyo" or "UTC"

    Returns:
        tzinfo for the zone

    Raises:
        ValueError: If the zone is unknown
    """
    zone = tz.gettz(name) if name else None
    if zone is None:
        raise ValueError(f"Unknown timezone: {name!r}")
    return zone


def now_in_zone(
    zone: str = DEFAULT_TIMEZONE,
    clock: Optional[Callable[[], datetime]] = None,
) -> datetime:
    """
    Current time as an aware datetime in the given zone.

    Args:
        zone: Zone identifier
        clock: Callable returning an aware datetime (defaults to UTC now)

    Returns:
        Aware datetime expressed in `zone`
    """
    current = (clock or _utcnow)()
    return current.astimezone(resolve_zone(zone))


def parse_reference_time(text: str, zone: str = DEFAULT_TIMEZONE) -> datetime:
    """
    Parse a user-supplied reference time.

    Naive values are interpreted in `zone`; aware values are converted to it.

    Raises:
        ValueError: If the text is not a recognizable timestamp
    """
    target = resolve_zone(zone)
    try:
        parsed = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid reference time {text!r}: {e}") from e

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=target)
    return parsed.astimezone(target)
