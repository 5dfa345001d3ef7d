"""Writer for TXT format with timestamps."""

from pathlib import Path
from videosense.models import TranscriptSegment


def format_seconds(seconds: float) -> str:
    """Format seconds as HH:MM:SS."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_clock(seconds: float) -> str:
    """Format seconds as M:SS for on-screen timestamps."""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def render_txt(segments: list[TranscriptSegment]) -> str:
    """
    Render transcript segments as text with timestamps.

    Format: [HH:MM:SS - HH:MM:SS] Speaker: text
    """
    lines = []
    for segment in segments:
        start_time = format_seconds(segment.start_time)
        end_time = format_seconds(segment.end_time)
        prefix = f"{segment.speaker}: " if segment.speaker else ""
        lines.append(f"[{start_time} - {end_time}] {prefix}{segment.text}\n")
    return "".join(lines)


def write_txt(segments: list[TranscriptSegment], output_path: Path) -> None:
    """Write transcript to TXT file with timestamps."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_txt(segments))
