"""Prayer-time API client (Aladhan-compatible ``/timings`` endpoint)."""

from __future__ import annotations

import re
from datetime import date as date_cls
from typing import Dict, Optional

import httpx

from ..base import AsyncApiClient
from ..errors import PrayerTimesApiError

PRAYER_NAMES = ("Fajr", "Dhuhr", "Asr", "Maghrib", "Isha")

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})")


def parse_timing(value: str) -> str:
    """Normalise an API timing such as ``"05:12 (EET)"`` to ``"05:12"``."""
    match = _TIME_RE.match(value or "")
    if not match:
        raise PrayerTimesApiError(f"Unparseable prayer time: {value!r}")
    return f"{int(match.group(1)):02d}:{match.group(2)}"


class PrayerTimesClient(AsyncApiClient):
    """Fetches daily prayer timings for a coordinate pair."""

    error_class = PrayerTimesApiError

    def __init__(
        self,
        base_url: str = "https://api.aladhan.com/v1",
        *,
        method: int = 2,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(base_url, timeout=timeout, client=client)
        self.method = method

    async def get_timings(
        self, latitude: float, longitude: float, on: Optional[date_cls] = None, method: Optional[int] = None
    ) -> Dict[str, str]:
        """Timings of the five daily prayers.

        API
        ---
        - Method/Path: ``GET /timings/{DD-MM-YYYY}``
        - Query: ``latitude``, ``longitude``, ``method``

        Returns:
            Mapping of prayer name to ``HH:MM``

        Raises:
            PrayerTimesApiError: On HTTP failure or a payload without the expected timings
        """
        day = (on or date_cls.today()).strftime("%d-%m-%Y")
        response = await self._request(
            "GET",
            self._url(f"timings/{day}"),
            what="Prayer times",
            params={"latitude": latitude, "longitude": longitude, "method": self.method if method is None else method},
        )
        data = self._json(response, what="Prayer times")
        try:
            raw = data["data"]["timings"]
            return {name: parse_timing(raw[name]) for name in PRAYER_NAMES}
        except (KeyError, TypeError) as e:
            raise PrayerTimesApiError(
                "Prayer times response missing timings", status_code=response.status_code, details=data
            ) from e
