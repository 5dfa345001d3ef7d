"""Fetch, analyse and cache a video analysis for a URL."""

import asyncio
import logging
from typing import Optional

import httpx

from videosense.analyzer import create_client, request_analysis
from videosense.config import Config
from videosense.errors import AnalysisFailed, InvalidVideoUrl
from videosense.models import VideoAnalysisRecord
from videosense.shaping import shape_response
from videosense.store import AnalysisStore, create_store
from videosense.youtube import extract_video_id, fetch_video_info

logger = logging.getLogger(__name__)


class VideoAnalysisService:
    """
    Runs the analysis steps for one URL at a time.

    Steps are strictly sequential: cache lookup, id extraction, oEmbed metadata,
    completion request, response shaping, cache write. A cached record is
    returned as-is with no network calls.
    """

    def __init__(
        self,
        store: AnalysisStore,
        completion_client,
        http_client: httpx.AsyncClient,
        model: Optional[str] = None,
        rng=None
    ):
        self.store = store
        self.completion_client = completion_client
        self.http_client = http_client
        self.model = model
        self.rng = rng

    async def analyze(self, url: str) -> VideoAnalysisRecord:
        """
        Analyse a video, using the cache when possible.

        Raises:
            InvalidVideoUrl: no video id could be extracted from the URL
            MetadataFetchError: the oEmbed lookup failed
            AnalysisFailed: any other failure while fetching or analysing
        """
        cached = self.store.get(url)
        if cached is not None:
            logger.info("Using cached analysis for %s", url)
            return cached

        video_id = extract_video_id(url)
        if video_id is None:
            raise InvalidVideoUrl()

        try:
            video_info = await fetch_video_info(self.http_client, video_id)
            raw_text = await request_analysis(
                self.completion_client,
                video_info.title,
                video_info.creator,
                model=self.model,
            )
        except AnalysisFailed:
            raise
        except Exception as e:
            logger.exception("Analysis of %s failed", url)
            raise AnalysisFailed() from e

        shaped = shape_response(raw_text, rng=self.rng)
        record = VideoAnalysisRecord(
            video_url=url,
            video_info=video_info,
            transcript=shaped.segments,
            chapters=shaped.chapters,
            analysis=shaped.analysis,
        )

        if not self.store.put(url, record):
            logger.warning("Analysis for %s was not cached", url)
        logger.info("Analysed %s: %d segments, %d chapters", url, len(shaped.segments), len(shaped.chapters))
        return record


async def _analyze_with_default_clients(url: str, store: AnalysisStore) -> VideoAnalysisRecord:
    completion_client = create_client()
    try:
        async with httpx.AsyncClient() as http_client:
            service = VideoAnalysisService(
                store,
                completion_client,
                http_client,
                model=Config.ANALYSIS_MODEL,
            )
            return await service.analyze(url)
    finally:
        await completion_client.close()


def analyze_video(url: str, store: Optional[AnalysisStore] = None) -> VideoAnalysisRecord:
    """
    Analyse a video from synchronous code (Streamlit, CLI).

    Args:
        url: YouTube video URL
        store: Cache to use, defaults to the store selected by Config

    Returns:
        The cached or freshly computed VideoAnalysisRecord
    """
    if store is None:
        store = create_store()
    cached = store.get(url)
    if cached is not None:
        logger.info("Using cached analysis for %s", url)
        return cached
    return asyncio.run(_analyze_with_default_clients(url, store))
