"""
Turn a free-text model completion into transcript segments, chapters and an analysis.

The completion is not guaranteed to follow the requested layout, so every step here
is line-oriented and forgiving: unrecognised lines are skipped and missing sections
are filled from fallbacks. Nothing in this module raises on odd input.
"""

import math
import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from videosense.models import AnalysisResult, Topic, TranscriptChapter, TranscriptSegment

SEGMENT_SECONDS = 5
DEFAULT_SPEAKER = "Speaker"
MAX_SPEAKER_LENGTH = 20

MIN_CHAPTER_SIZE = 3
TARGET_CHAPTERS = 4

MAX_FALLBACK_KEY_POINTS = 4

DEFAULT_SUMMARY = "No summary available"
DEFAULT_KEY_POINT = "No key points identified"
DEFAULT_TOPIC = "General Content"
DEFAULT_TOPIC_RELEVANCE = 0.5
DEFAULT_SENTIMENT = 0.5
DEFAULT_QUESTION = "What is the main message of this video?"

SENTIMENT_KEYWORDS = (
    ("positive", 0.75),
    ("negative", 0.25),
    ("neutral", 0.5),
)

SPEAKER_PATTERN = re.compile(r'^(?P<speaker>[^\W\d_][\w ]*?)\s*:\s*(?P<text>\S.*)$')
TOPIC_SCORE_PATTERN = re.compile(r'^(?P<name>.*?)\s*\(\s*(?P<score>\d+(?:\.\d+)?)\s*\)\s*$')
NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?')
SENTENCE_END_PATTERN = re.compile(r'[.!?]+')
SENTENCE_TERMINATORS = (".", "!", "?")

# A "*" directly followed by another "*" is bold markup, not a bullet
BULLET_PATTERN = re.compile(r'^(?:-|\*(?!\*))\s*')
QUESTION_MARKER_PATTERN = re.compile(r'^(?:-|\*(?!\*)|\?)\s*')

_rng = random.Random()


@dataclass(frozen=True)
class ShapedResponse:
    """Everything derived from a single completion."""
    segments: list[TranscriptSegment]
    chapters: list[TranscriptChapter]
    analysis: AnalysisResult


# ---------------------------------------------------------------------------
# Segments and chapters
# ---------------------------------------------------------------------------

def _is_transcript_header(line: str) -> bool:
    return '#' in line or 'Transcript' in line or 'Chapter' in line


def _split_speaker(line: str) -> tuple[str, str]:
    """Return (speaker, text), falling back to the default speaker and the whole line."""
    match = SPEAKER_PATTERN.match(line)
    if match and len(match.group('speaker')) < MAX_SPEAKER_LENGTH:
        return match.group('speaker'), match.group('text').strip()
    return DEFAULT_SPEAKER, line


def extract_segments(text: str) -> list[TranscriptSegment]:
    """
    Build one segment per content line, each a fixed 5 seconds long.

    Blank lines and header-looking lines are skipped. Ids start at 1 and the
    windows are gapless, so the timing is synthetic rather than real.
    """
    segments = []
    start_time = 0
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line or _is_transcript_header(line):
            continue
        speaker, content = _split_speaker(line)
        segments.append(TranscriptSegment(
            id=len(segments) + 1,
            text=content,
            start_time=start_time,
            end_time=start_time + SEGMENT_SECONDS,
            speaker=speaker,
        ))
        start_time += SEGMENT_SECONDS
    return segments


def chapter_size(segment_count: int) -> int:
    """Aim for four chapters, but never fewer than three segments in a full chapter."""
    return max(MIN_CHAPTER_SIZE, segment_count // TARGET_CHAPTERS)


def group_chapters(segments: list[TranscriptSegment]) -> list[TranscriptChapter]:
    """Partition segments into consecutive, equally sized chapters (the last may be short)."""
    if not segments:
        return []
    size = chapter_size(len(segments))
    chapters = []
    for index in range(math.ceil(len(segments) / size)):
        run = tuple(segments[index * size:(index + 1) * size])
        chapters.append(TranscriptChapter(
            title=f"Chapter {index + 1}",
            start_time=run[0].start_time,
            end_time=run[-1].end_time,
            segments=run,
        ))
    return chapters


# ---------------------------------------------------------------------------
# Analysis sections
# ---------------------------------------------------------------------------

class Section(Enum):
    """Which part of the completion the scanner is currently reading."""
    NONE = "none"
    SUMMARY = "summary"
    KEY_POINTS = "key_points"
    TOPICS = "topics"
    SENTIMENT = "sentiment"
    QUESTIONS = "questions"


# Checked in order; the first keyword found wins
SECTION_KEYWORDS = (
    ("summary", Section.SUMMARY),
    ("key points", Section.KEY_POINTS),
    ("topics", Section.TOPICS),
    ("sentiment", Section.SENTIMENT),
    ("questions", Section.QUESTIONS),
)


def _strip_markup(text: str) -> str:
    return text.replace('**', '').strip(' #*_:').strip()


def next_section(line: str, current: Section) -> tuple[Section, str]:
    """
    Decide the section after reading ``line``.

    Returns the new section and the content left on the line. A header is a
    non-list line whose heading part names a section and does not end like a
    sentence, e.g. "## Key Points" or "Main Topics Covered in This Video" or
    "Sentiment: positive (7)". Any text after the header's colon is returned
    as content for the new section. Other lines leave the section unchanged and
    are returned whole.
    """
    stripped = line.strip()
    if not stripped or QUESTION_MARKER_PATTERN.match(stripped):
        return current, stripped

    head, colon, rest = stripped.partition(':')
    heading = _strip_markup(head).lower()
    if heading.endswith(SENTENCE_TERMINATORS):
        return current, stripped

    for keyword, section in SECTION_KEYWORDS:
        if keyword in heading:
            return section, _strip_markup(rest) if colon else ""
    return current, stripped


def _parse_topic(item: str, rng) -> Optional[Topic]:
    match = TOPIC_SCORE_PATTERN.match(item)
    if match:
        name = match.group('name').strip()
        relevance = float(match.group('score')) / 10
    else:
        name = item
        relevance = 0.5 + rng.random() * 0.5
    if not name:
        return None
    return Topic(name=name, relevance=relevance)


def _parse_sentiment(line: str) -> Optional[float]:
    number = NUMBER_PATTERN.search(line)
    if number:
        score = float(number.group(0))
        if score > 1:
            score /= 10
        return score
    lowered = line.lower()
    for keyword, score in SENTIMENT_KEYWORDS:
        if keyword in lowered:
            return score
    return None


def _template_questions(summary: str) -> list[str]:
    subject = summary.rstrip('.!? ')
    return [
        f'What are the main implications of "{subject}"?',
        f'What evidence does the video give for "{subject}"?',
        f'What questions remain open after "{subject}"?',
    ]


def extract_analysis(text: str, rng=None) -> AnalysisResult:
    """
    Scan the completion section by section and build an AnalysisResult.

    Args:
        text: Raw completion text
        rng: Object with a ``random()`` method, used for relevance values the
            model did not supply. Defaults to a module-level ``random.Random``.

    Returns:
        AnalysisResult with every field populated
    """
    rng = rng or _rng

    summary = None
    key_points = []
    topics = []
    sentiment = None
    questions = []

    section = Section.NONE
    for raw_line in (text or "").splitlines():
        section, line = next_section(raw_line, section)
        if not line:
            continue

        if section is Section.SUMMARY:
            if summary is None:
                summary = BULLET_PATTERN.sub('', line, count=1).strip() or None
        elif section is Section.KEY_POINTS:
            if BULLET_PATTERN.match(line):
                point = BULLET_PATTERN.sub('', line, count=1).strip()
                if point:
                    key_points.append(point)
        elif section is Section.TOPICS:
            if BULLET_PATTERN.match(line):
                topic = _parse_topic(BULLET_PATTERN.sub('', line, count=1).strip(), rng)
                if topic:
                    topics.append(topic)
        elif section is Section.SENTIMENT:
            if sentiment is None:
                sentiment = _parse_sentiment(line)
        elif section is Section.QUESTIONS:
            if QUESTION_MARKER_PATTERN.match(line):
                question = QUESTION_MARKER_PATTERN.sub('', line, count=1).strip()
                if question:
                    questions.append(question)

    if not key_points and summary:
        sentences = [s.strip() for s in SENTENCE_END_PATTERN.split(summary)]
        key_points = [s for s in sentences if s][:MAX_FALLBACK_KEY_POINTS]

    if not topics and key_points:
        topics = [
            Topic(name=" ".join(point.split()[:2]), relevance=0.6 + rng.random() * 0.3)
            for point in key_points
        ]

    if not questions and summary:
        questions = _template_questions(summary)

    return AnalysisResult(
        summary=summary or DEFAULT_SUMMARY,
        key_points=tuple(key_points or [DEFAULT_KEY_POINT]),
        topics=tuple(topics or [Topic(DEFAULT_TOPIC, DEFAULT_TOPIC_RELEVANCE)]),
        sentiment_score=DEFAULT_SENTIMENT if sentiment is None else sentiment,
        questions=tuple(questions or [DEFAULT_QUESTION]),
    )


def shape_response(text: str, rng=None) -> ShapedResponse:
    """Derive segments, chapters and analysis from one completion."""
    segments = extract_segments(text)
    return ShapedResponse(
        segments=segments,
        chapters=group_chapters(segments),
        analysis=extract_analysis(text, rng=rng),
    )
