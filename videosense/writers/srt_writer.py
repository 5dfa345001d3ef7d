"""Writer for SRT subtitle format."""

from pathlib import Path
from videosense.models import TranscriptSegment


def format_timestamp(seconds: float) -> str:
    """Format seconds as SRT timestamp: HH:MM:SS,mmm."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    millis = int(round((seconds % 1) * 1000))
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def render_srt(segments: list[TranscriptSegment]) -> str:
    """Render transcript segments as SRT cues."""
    cues = []
    for index, segment in enumerate(segments, start=1):
        start_time = format_timestamp(segment.start_time)
        end_time = format_timestamp(segment.end_time)

        # SRT format: index, timestamps, text, blank line between entries
        cues.append(f"{index}\n{start_time} --> {end_time}\n{segment.text}\n\n")
    return "".join(cues)


def write_srt(segments: list[TranscriptSegment], output_path: Path) -> None:
    """Write transcript to SRT subtitle file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_srt(segments))
