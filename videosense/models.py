"""Data models for video analyses, transcripts and chapters."""

from dataclasses import dataclass, field
from typing import Optional


def clamp_unit(value: float) -> float:
    """Clamp a score into [0, 1]."""
    return max(0.0, min(1.0, float(value)))


@dataclass
class VideoInfo:
    """Display metadata for a video."""
    title: str
    creator: str
    thumbnail_url: str
    duration: str = "N/A"
    published_date: str = "N/A"
    view_count: str = "N/A"

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'creator': self.creator,
            'thumbnailUrl': self.thumbnail_url,
            'duration': self.duration,
            'publishedDate': self.published_date,
            'viewCount': self.view_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "VideoInfo":
        return cls(
            title=data.get('title', ''),
            creator=data.get('creator', ''),
            thumbnail_url=data.get('thumbnailUrl', ''),
            duration=data.get('duration', 'N/A'),
            published_date=data.get('publishedDate', 'N/A'),
            view_count=data.get('viewCount', 'N/A'),
        )


@dataclass(frozen=True)
class TranscriptSegment:
    """A single line of transcript with its time window."""
    id: int
    text: str
    start_time: float  # Start time in seconds
    end_time: float    # End time in seconds
    speaker: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            'id': str(self.id),
            'text': self.text,
            'startTime': self.start_time,
            'endTime': self.end_time,
        }
        if self.speaker is not None:
            data['speaker'] = self.speaker
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "TranscriptSegment":
        return cls(
            id=int(data['id']),
            text=data['text'],
            start_time=data['startTime'],
            end_time=data['endTime'],
            speaker=data.get('speaker'),
        )


@dataclass(frozen=True)
class TranscriptChapter:
    """A titled run of consecutive segments."""
    title: str
    start_time: float
    end_time: float
    segments: tuple[TranscriptSegment, ...] = ()

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'segments': [segment.to_dict() for segment in self.segments],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TranscriptChapter":
        return cls(
            title=data['title'],
            start_time=data['startTime'],
            end_time=data['endTime'],
            segments=tuple(TranscriptSegment.from_dict(s) for s in data.get('segments', [])),
        )


@dataclass(frozen=True)
class Topic:
    """A topic covered by the video, weighted by relevance."""
    name: str
    relevance: float

    def __post_init__(self):
        object.__setattr__(self, 'relevance', clamp_unit(self.relevance))


@dataclass(frozen=True)
class AnalysisResult:
    """Summary, key points, topics, sentiment and follow-up questions."""
    summary: str
    key_points: tuple[str, ...]
    topics: tuple[Topic, ...]
    sentiment_score: float
    questions: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'sentiment_score', clamp_unit(self.sentiment_score))

    def to_dict(self) -> dict:
        return {
            'summary': self.summary,
            'keyPoints': list(self.key_points),
            'topics': [{'name': t.name, 'relevance': t.relevance} for t in self.topics],
            'sentimentScore': self.sentiment_score,
            'questions': list(self.questions),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisResult":
        return cls(
            summary=data['summary'],
            key_points=tuple(data.get('keyPoints', [])),
            topics=tuple(Topic(t['name'], t['relevance']) for t in data.get('topics', [])),
            sentiment_score=data.get('sentimentScore', 0.5),
            questions=tuple(data.get('questions', [])),
        )


@dataclass
class VideoAnalysisRecord:
    """Complete analysis of one video, keyed by its URL."""
    video_url: str
    video_info: VideoInfo
    transcript: list[TranscriptSegment] = field(default_factory=list)
    chapters: Optional[list[TranscriptChapter]] = None
    analysis: Optional[AnalysisResult] = None
    is_loading: bool = False
    error: Optional[str] = None
    user_id: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialise to the persisted record shape."""
        data = {
            'video_url': self.video_url,
            'video_info': self.video_info.to_dict(),
            'transcript': [segment.to_dict() for segment in self.transcript],
        }
        if self.chapters is not None:
            data['chapters'] = [chapter.to_dict() for chapter in self.chapters]
        if self.analysis is not None:
            data['analysis'] = self.analysis.to_dict()
        if self.user_id is not None:
            data['user_id'] = self.user_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "VideoAnalysisRecord":
        chapters = data.get('chapters')
        analysis = data.get('analysis')
        return cls(
            video_url=data['video_url'],
            video_info=VideoInfo.from_dict(data['video_info']),
            transcript=[TranscriptSegment.from_dict(s) for s in data.get('transcript', [])],
            chapters=[TranscriptChapter.from_dict(c) for c in chapters] if chapters is not None else None,
            analysis=AnalysisResult.from_dict(analysis) if analysis is not None else None,
            user_id=data.get('user_id'),
        )
