"""Writer for JSON format."""

import json
from pathlib import Path
from videosense.models import VideoAnalysisRecord


def render_json(record: VideoAnalysisRecord) -> str:
    """Render the full analysis record in its persisted shape."""
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)


def write_json(record: VideoAnalysisRecord, output_path: Path) -> None:
    """Write analysis record to JSON file."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_json(record))
