"""Schema validation for analysis records before they are persisted."""

from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field


class VideoInfoSchema(BaseModel):
    title: str
    creator: str
    thumbnailUrl: AnyHttpUrl
    duration: str
    publishedDate: str
    viewCount: str


class TranscriptSegmentSchema(BaseModel):
    id: str
    text: str
    startTime: float
    endTime: float
    speaker: Optional[str] = None


class TranscriptChapterSchema(BaseModel):
    title: str
    startTime: float
    endTime: float
    segments: list[TranscriptSegmentSchema]


class TopicSchema(BaseModel):
    name: str
    relevance: float = Field(ge=0, le=1)


class AnalysisSchema(BaseModel):
    summary: str
    keyPoints: list[str]
    topics: list[TopicSchema]
    sentimentScore: float = Field(ge=0, le=1)
    questions: list[str]


class VideoAnalysisCreateSchema(BaseModel):
    """Shape of a stored video analysis record."""

    model_config = ConfigDict(extra='forbid')

    video_url: AnyHttpUrl
    video_info: VideoInfoSchema
    transcript: list[TranscriptSegmentSchema]
    chapters: Optional[list[TranscriptChapterSchema]] = None
    analysis: Optional[AnalysisSchema] = None
    user_id: Optional[str] = None


def validate_record(data: dict) -> VideoAnalysisCreateSchema:
    """
    Validate a serialised record.

    Raises:
        pydantic.ValidationError: if the record does not match the schema
    """
    return VideoAnalysisCreateSchema.model_validate(data)
