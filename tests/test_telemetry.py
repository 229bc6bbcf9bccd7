import json
import logging
from pathlib import Path

import humanorder.telemetry as telemetry
from humanorder.log import JsonlHandler, logger
from humanorder.telemetry import log_event


def test_log_event_records_size_and_duration(tmp_path: Path, monkeypatch) -> None:
    log_file = tmp_path / "telemetry.jsonl"
    handler = JsonlHandler(str(log_file))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    monkeypatch.setattr(telemetry.time, "monotonic", lambda: 2.0)
    payload = {"lines_in": 3, "sources": ["-"]}
    log_event("SORT_DONE", payload, start_time=1.0)
    handler.flush()
    entry = json.loads(log_file.read_text().splitlines()[0])
    expected_size = len(json.dumps(payload, ensure_ascii=False).encode("utf-8"))
    assert entry["event"] == "SORT_DONE"
    assert entry["message"] == "SORT_DONE"
    assert entry["payload"] == payload
    assert entry["size_bytes"] == expected_size
    assert entry["duration_ms"] == 1000


def test_log_event_without_payload(tmp_path: Path) -> None:
    log_file = tmp_path / "telemetry.jsonl"
    handler = JsonlHandler(log_file)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    log_event("EMPTY", level=logging.DEBUG)
    handler.flush()
    entry = json.loads(log_file.read_text().splitlines()[0])
    assert entry["payload"] == {}
    assert entry["size_bytes"] == 2
    assert entry["level"] == "DEBUG"
    assert "duration_ms" not in entry
