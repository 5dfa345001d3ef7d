from __future__ import annotations

import logging
from pathlib import Path

from videosense.config import Config
from videosense.models import VideoAnalysisRecord, VideoInfo
from videosense.shaping import shape_response
from videosense.store import JsonFileAnalysisStore, MemoryAnalysisStore, create_store

URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def _record(sample_completion: str, rng, url: str = URL) -> VideoAnalysisRecord:
    shaped = shape_response(sample_completion, rng=rng)
    return VideoAnalysisRecord(
        video_url=url,
        video_info=VideoInfo("Title", "Creator", "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"),
        transcript=shaped.segments,
        chapters=shaped.chapters,
        analysis=shaped.analysis,
    )


def test_memory_store_get_and_put(sample_completion: str, fixed_rng):
    store = MemoryAnalysisStore()
    record = _record(sample_completion, fixed_rng)

    assert store.get(URL) is None
    assert store.put(URL, record) is True
    assert store.get(URL) == record
    assert URL in store
    assert len(store) == 1


def test_memory_store_last_write_wins(sample_completion: str, fixed_rng):
    store = MemoryAnalysisStore()
    first = _record(sample_completion, fixed_rng)
    second = _record("Summary: Something else entirely.", fixed_rng)

    store.put(URL, first)
    store.put(URL, second)

    assert store.get(URL) == second
    assert len(store) == 1


def test_invalid_record_is_logged_and_not_stored(sample_completion: str, fixed_rng, caplog):
    store = MemoryAnalysisStore()
    record = _record(sample_completion, fixed_rng, url="youtube.com/watch?v=dQw4w9WgXcQ")

    with caplog.at_level(logging.ERROR, logger="videosense.store"):
        assert store.put(record.video_url, record) is False

    assert len(store) == 0
    assert "Refusing to store invalid analysis" in caplog.text


def test_json_store_persists_across_instances(tmp_path: Path, sample_completion: str, fixed_rng):
    record = _record(sample_completion, fixed_rng)

    assert JsonFileAnalysisStore(tmp_path).put(URL, record) is True

    reopened = JsonFileAnalysisStore(tmp_path)
    assert reopened.get(URL) == record
    assert reopened.get("https://youtu.be/other00000") is None
    assert len(list(tmp_path.glob("*.json"))) == 1


def test_json_store_treats_corrupt_file_as_missing(tmp_path: Path):
    store = JsonFileAnalysisStore(tmp_path)
    store.path_for(URL).write_text("{not json", encoding="utf-8")

    assert store.get(URL) is None


def test_create_store_follows_config(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(Config, "STORE_DIR", "")
    assert isinstance(create_store(), MemoryAnalysisStore)

    monkeypatch.setattr(Config, "STORE_DIR", str(tmp_path / "records"))
    store = create_store()
    assert isinstance(store, JsonFileAnalysisStore)
    assert (tmp_path / "records").is_dir()
