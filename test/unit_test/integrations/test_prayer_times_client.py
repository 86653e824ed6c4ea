"""Unit tests for the prayer-time API client."""

from __future__ import annotations

from datetime import date

import httpx
import pytest

from accountability_ai.integrations.errors import PrayerTimesApiError
from accountability_ai.integrations.prayer_times import PrayerTimesClient, parse_timing

pytestmark = pytest.mark.asyncio

TIMINGS = {
    "Fajr": "05:12 (EET)",
    "Sunrise": "06:40 (EET)",
    "Dhuhr": "12:01 (EET)",
    "Asr": "15:20 (EET)",
    "Maghrib": "17:55 (EET)",
    "Isha": "19:15 (EET)",
}


@pytest.mark.parametrize(
    "raw, expected",
    [("05:12 (EET)", "05:12"), ("5:07", "05:07"), (" 19:15", "19:15")],
)
def test_parse_timing(raw, expected):
    assert parse_timing(raw) == expected


def test_parse_timing_rejects_garbage():
    with pytest.raises(PrayerTimesApiError):
        parse_timing("soon")


async def test_get_timings_builds_request_and_parses(mock_http):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        return httpx.Response(200, json={"code": 200, "data": {"timings": TIMINGS}})

    client = PrayerTimesClient("https://mock-aladhan/v1", method=3, client=mock_http(handler))
    timings = await client.get_timings(30.04, 31.24, on=date(2025, 3, 10))

    assert seen["url"].path == "/v1/timings/10-03-2025"
    assert seen["url"].params["latitude"] == "30.04"
    assert seen["url"].params["method"] == "3"
    assert timings == {"Fajr": "05:12", "Dhuhr": "12:01", "Asr": "15:20", "Maghrib": "17:55", "Isha": "19:15"}


async def test_method_override(mock_http):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.url.params["method"]
        return httpx.Response(200, json={"data": {"timings": TIMINGS}})

    client = PrayerTimesClient("https://mock-aladhan/v1", client=mock_http(handler))
    await client.get_timings(0, 0, on=date(2025, 1, 1), method=5)
    assert seen["method"] == "5"


async def test_method_zero_is_sent_as_given(mock_http):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.url.params["method"]
        return httpx.Response(200, json={"data": {"timings": TIMINGS}})

    client = PrayerTimesClient("https://mock-aladhan/v1", method=2, client=mock_http(handler))
    await client.get_timings(0, 0, on=date(2025, 1, 1), method=0)
    assert seen["method"] == "0"


async def test_missing_timings_raises(mock_http):
    client = PrayerTimesClient(
        "https://mock-aladhan/v1",
        client=mock_http(lambda request: httpx.Response(200, json={"data": {}})),
    )
    with pytest.raises(PrayerTimesApiError, match="missing timings"):
        await client.get_timings(0, 0, on=date(2025, 1, 1))


async def test_server_error_raises(mock_http):
    client = PrayerTimesClient(
        "https://mock-aladhan/v1",
        client=mock_http(lambda request: httpx.Response(500, text="boom")),
    )
    with pytest.raises(PrayerTimesApiError) as exc_info:
        await client.get_timings(0, 0, on=date(2025, 1, 1))
    assert exc_info.value.status_code == 500
