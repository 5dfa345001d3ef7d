"""Writer for the analysis report in Markdown."""

from pathlib import Path
from typing import Optional

from videosense.models import AnalysisResult, VideoInfo


def sentiment_label(score: float) -> str:
    """Describe a sentiment score in one word."""
    if score >= 0.6:
        return "Positive"
    if score >= 0.4:
        return "Neutral"
    return "Negative"


def render_analysis(analysis: AnalysisResult, video_info: Optional[VideoInfo] = None) -> str:
    """
    Render an analysis as a Markdown report.

    Args:
        analysis: The shaped analysis result
        video_info: Optional metadata used for the report heading

    Returns:
        Markdown text
    """
    lines = []
    if video_info:
        lines.append(f"# {video_info.title}")
        lines.append(f"_{video_info.creator}_")
        lines.append("")

    lines.append("## Summary")
    lines.append(analysis.summary)
    lines.append("")
    lines.append(
        f"**Sentiment:** {sentiment_label(analysis.sentiment_score)} "
        f"({round(analysis.sentiment_score * 100)}%)"
    )
    lines.append("")

    lines.append("## Key Points")
    lines.extend(f"- {point}" for point in analysis.key_points)
    lines.append("")

    lines.append("## Topics")
    lines.extend(f"- {topic.name} ({round(topic.relevance * 100)}%)" for topic in analysis.topics)
    lines.append("")

    lines.append("## Questions")
    lines.extend(f"- {question}" for question in analysis.questions)
    lines.append("")
    return "\n".join(lines)


def write_analysis(analysis: AnalysisResult, output_path: Path, video_info: Optional[VideoInfo] = None) -> None:
    """Write analysis report to file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_analysis(analysis, video_info))
