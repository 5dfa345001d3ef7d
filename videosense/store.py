"""Per-URL cache of finished video analyses."""

import hashlib
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from videosense.config import Config
from videosense.models import VideoAnalysisRecord
from videosense.validators import validate_record

logger = logging.getLogger(__name__)


class AnalysisStore:
    """
    Maps a video URL to its analysis record.

    Last write wins; entries never expire. Records are validated on the way in,
    and a record that fails validation is logged and not stored.
    """

    def get(self, url: str) -> Optional[VideoAnalysisRecord]:
        raise NotImplementedError

    def put(self, url: str, record: VideoAnalysisRecord) -> bool:
        data = record.to_dict()
        try:
            validate_record(data)
        except ValidationError as e:
            logger.error("Refusing to store invalid analysis for %s: %s", url, e)
            return False
        try:
            self._write(url, data)
        except OSError as e:
            logger.error("Could not store analysis for %s: %s", url, e)
            return False
        return True

    def _write(self, url: str, data: dict) -> None:
        raise NotImplementedError


class MemoryAnalysisStore(AnalysisStore):
    """Keeps records in a dict for the lifetime of the process."""

    def __init__(self):
        self._records: dict[str, dict] = {}

    def get(self, url: str) -> Optional[VideoAnalysisRecord]:
        data = self._records.get(url)
        if data is None:
            return None
        return VideoAnalysisRecord.from_dict(data)

    def _write(self, url: str, data: dict) -> None:
        self._records[url] = data

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, url: str) -> bool:
        return url in self._records


class JsonFileAnalysisStore(AnalysisStore):
    """Stores each record as a JSON file named after a hash of its URL."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, url: str) -> Path:
        digest = hashlib.sha256(url.encode('utf-8')).hexdigest()
        return self.directory / f"{digest}.json"

    def get(self, url: str) -> Optional[VideoAnalysisRecord]:
        path = self.path_for(url)
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return VideoAnalysisRecord.from_dict(data)
        except (ValueError, KeyError, TypeError, OSError) as e:
            logger.warning("Ignoring unreadable cached analysis %s: %s", path, e)
            return None

    def _write(self, url: str, data: dict) -> None:
        with open(self.path_for(url), 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


def create_store() -> AnalysisStore:
    """Build the store selected by STORE_DIR (in-memory when unset)."""
    if Config.STORE_DIR:
        directory = Path(Config.STORE_DIR).resolve()
        logger.info("Caching analyses in %s", directory)
        return JsonFileAnalysisStore(directory)
    return MemoryAnalysisStore()
