from __future__ import annotations

import pytest
from pydantic import ValidationError

from videosense.validators import validate_record


def _record_dict() -> dict:
    return {
        "video_url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "video_info": {
            "title": "Title",
            "creator": "Creator",
            "thumbnailUrl": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
            "duration": "N/A",
            "publishedDate": "N/A",
            "viewCount": "N/A",
        },
        "transcript": [{"id": "1", "text": "hi", "startTime": 0, "endTime": 5}],
        "analysis": {
            "summary": "s",
            "keyPoints": ["k"],
            "topics": [{"name": "t", "relevance": 0.5}],
            "sentimentScore": 0.5,
            "questions": ["q"],
        },
    }


def test_valid_record_passes():
    validated = validate_record(_record_dict())

    assert validated.transcript[0].speaker is None
    assert validated.chapters is None


def test_video_url_must_be_a_url():
    data = _record_dict()
    data["video_url"] = "not a url"

    with pytest.raises(ValidationError):
        validate_record(data)


def test_sentiment_must_be_in_unit_range():
    data = _record_dict()
    data["analysis"]["sentimentScore"] = 1.5

    with pytest.raises(ValidationError):
        validate_record(data)


def test_unknown_top_level_fields_are_rejected():
    data = _record_dict()
    data["isLoading"] = False

    with pytest.raises(ValidationError):
        validate_record(data)
