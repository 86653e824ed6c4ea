"""Unit tests for the Coqui TTS client."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from accountability_ai.integrations.errors import TTSServerError
from accountability_ai.integrations.tts import CoquiTTSClient

pytestmark = pytest.mark.asyncio

SERVER = "http://mock-coqui:5002"


async def test_synthesize_returns_wav_data_url(mock_http):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, content=b"RIFFdata", headers={"content-type": "audio/wav"})

    client = CoquiTTSClient(SERVER, client=mock_http(handler))
    audio = await client.synthesize("Hello", model="tts_models/en/ljspeech", speaker_id="p225")

    assert seen["path"] == "/api/tts"
    assert seen["body"] == {"text": "Hello", "model_name": "tts_models/en/ljspeech", "speaker_id": "p225"}
    assert audio == "data:audio/wav;base64," + base64.b64encode(b"RIFFdata").decode()


async def test_synthesize_empty_audio_raises(mock_http):
    client = CoquiTTSClient(SERVER, client=mock_http(lambda request: httpx.Response(200, content=b"")))
    with pytest.raises(TTSServerError, match="no audio"):
        await client.synthesize("Hello")


async def test_synthesize_server_error(mock_http):
    client = CoquiTTSClient(SERVER, client=mock_http(lambda request: httpx.Response(503)))
    with pytest.raises(TTSServerError) as exc_info:
        await client.synthesize("Hello")
    assert exc_info.value.status_code == 503


@pytest.mark.parametrize(
    "payload, expected",
    [({"models": ["a", "b"]}, ["a", "b"]), (["c"], ["c"]), ("odd", [])],
)
async def test_list_models_shapes(mock_http, payload, expected):
    client = CoquiTTSClient(SERVER, client=mock_http(lambda request: httpx.Response(200, json=payload)))
    assert await client.list_models() == expected


async def test_status_available(mock_http):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        return httpx.Response(200)

    client = CoquiTTSClient(SERVER, client=mock_http(handler))
    assert await client.status() == {"available": True, "status": 200}
    assert seen["method"] == "HEAD"


async def test_status_non_success(mock_http):
    client = CoquiTTSClient(SERVER, client=mock_http(lambda request: httpx.Response(405)))
    assert await client.status() == {"available": False, "status": 405}


async def test_status_unreachable(mock_http):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = CoquiTTSClient(SERVER, client=mock_http(handler))
    with pytest.raises(TTSServerError, match="unreachable"):
        await client.status()
