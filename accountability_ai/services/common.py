"""Small helpers shared by the services."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, so 2.5 -> 3 and 0.25 -> 0.3 (at one digit)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def percent(part: int, whole: int) -> int:
    """``part / whole`` as a whole percentage, 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return int(round_half_up(part / whole * 100))


def resolve_zone(name: str | None) -> ZoneInfo:
    """The named IANA zone, falling back to UTC for empty or unknown names."""
    try:
        return ZoneInfo(name or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {name!r}, using {DEFAULT_TIMEZONE}")
        return ZoneInfo(DEFAULT_TIMEZONE)


def to_local(now_utc: datetime, zone: ZoneInfo) -> datetime:
    """Convert a naive UTC timestamp into an aware datetime in ``zone``."""
    return now_utc.replace(tzinfo=timezone.utc).astimezone(zone)
