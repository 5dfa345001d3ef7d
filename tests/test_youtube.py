from __future__ import annotations

import asyncio

import httpx
import pytest

from videosense.errors import AnalysisFailed, MetadataFetchError
from videosense.youtube import extract_video_id, fetch_video_info, is_youtube_url, thumbnail_url


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abc",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
        "https://www.youtube.com/u/w/dQw4w9WgXcQ",
        "youtube.com/watch?v=dQw4w9WgXcQ#comments",
    ],
)
def test_extract_video_id_known_shapes(url: str):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/vLmbxLbQ3EM",
        "https://www.youtube.com/embed/vLmbxLbQ3EM",
        "https://www.youtube.com/v/vLmbxLbQ3EM",
        "https://www.youtube.com/watch?v=vLmbxLbQ3EM",
        "https://www.youtube.com/watch?feature=share&v=vLmbxLbQ3EM",
    ],
)
def test_extract_video_id_keeps_leading_v(url: str):
    assert extract_video_id(url) == "vLmbxLbQ3EM"


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXc",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQQ",
        "https://youtu.be/short",
        "https://example.com/video",
        "",
    ],
)
def test_extract_video_id_rejects_wrong_length_or_shape(url: str):
    assert extract_video_id(url) is None


def test_is_youtube_url_is_a_substring_gate():
    assert is_youtube_url("https://www.youtube.com/watch?v=x")
    assert is_youtube_url("youtu.be/abc")
    assert not is_youtube_url("https://vimeo.com/123")
    assert not is_youtube_url("youtube.com")


def _fetch(handler, video_id: str = "dQw4w9WgXcQ"):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_video_info(client, video_id)

    return asyncio.run(go())


def test_fetch_video_info_maps_oembed_fields():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={
                "title": "Never Gonna Give You Up",
                "author_name": "Rick Astley",
                "thumbnail_url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
            },
        )

    info = _fetch(handler)

    assert info.title == "Never Gonna Give You Up"
    assert info.creator == "Rick Astley"
    assert info.thumbnail_url == "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"
    assert info.duration == "N/A"

    assert len(requests) == 1
    assert requests[0].url.host == "www.youtube.com"
    assert requests[0].url.path == "/oembed"
    assert requests[0].url.params["url"] == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert requests[0].url.params["format"] == "json"


def test_fetch_video_info_falls_back_to_default_thumbnail():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"title": "T", "author_name": "A"})

    info = _fetch(handler)

    assert info.thumbnail_url == thumbnail_url("dQw4w9WgXcQ")


def test_fetch_video_info_raises_on_non_success():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Not Found")

    with pytest.raises(MetadataFetchError) as excinfo:
        _fetch(handler)

    assert isinstance(excinfo.value, AnalysisFailed)
    assert str(excinfo.value) == "Failed to fetch video metadata"
