"""YouTube URL handling and oEmbed metadata lookup."""

import logging
import re
from typing import Optional

import httpx

from videosense.config import Config
from videosense.errors import MetadataFetchError
from videosense.models import VideoInfo

logger = logging.getLogger(__name__)

VIDEO_ID_LENGTH = 11

# Greedy prefix so the last recognised marker wins; the id runs up to the next #, & or ?
VIDEO_ID_PATTERN = re.compile(
    r'^.*(?:youtu\.be/|v/|/u/\w/|embed/|watch\?v=|&v=)(?P<video_id>[^#&?]*).*'
)


def extract_video_id(url: str) -> Optional[str]:
    """
    Extract the video ID from various YouTube URL formats.

    Returns None when the URL carries no ID of exactly 11 characters.
    """
    match = VIDEO_ID_PATTERN.match(url or "")
    if not match:
        return None
    video_id = match.group('video_id')
    if len(video_id) != VIDEO_ID_LENGTH:
        return None
    return video_id


def is_youtube_url(url: str) -> bool:
    """Cheap check that the input looks like a YouTube link before it is submitted."""
    return "youtube.com/" in url or "youtu.be/" in url


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def thumbnail_url(video_id: str) -> str:
    return f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"


async def fetch_video_info(client: httpx.AsyncClient, video_id: str) -> VideoInfo:
    """
    Fetch title and author for a video from the oEmbed endpoint.

    Args:
        client: HTTP client used for the request
        video_id: 11-character YouTube video ID

    Returns:
        VideoInfo with oEmbed fields filled in and placeholders for the rest
    """
    response = await client.get(
        Config.OEMBED_ENDPOINT,
        params={"url": watch_url(video_id), "format": "json"},
    )
    if not response.is_success:
        logger.warning("oEmbed lookup for %s returned HTTP %s", video_id, response.status_code)
        raise MetadataFetchError()

    data = response.json()
    return VideoInfo(
        title=data.get("title") or "Untitled video",
        creator=data.get("author_name") or "Unknown creator",
        thumbnail_url=data.get("thumbnail_url") or thumbnail_url(video_id),
    )
