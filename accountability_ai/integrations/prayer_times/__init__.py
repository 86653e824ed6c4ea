"""Prayer-time API integration."""

from .client import PRAYER_NAMES, PrayerTimesClient, parse_timing

__all__ = ["PRAYER_NAMES", "PrayerTimesClient", "parse_timing"]
