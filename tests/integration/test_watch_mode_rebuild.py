from __future__ import annotations

import json
import threading
import time
from collections.abc import Callable
from pathlib import Path

import pytest
from watchdog.observers.polling import PollingObserver

from project_index.api import start_watching
from project_index.config import CliOverrides, apply_cli_overrides, default_config
from project_index.index import IndexPersistenceError
from project_index.logging import JsonlEventLogger


def _wait_for(predicate: Callable[[], bool], timeout: float = 10.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return False


def _indexed_paths(output: Path) -> list[str]:
    if not output.exists():
        return []
    payload = json.loads(output.read_text(encoding="utf-8"))
    return sorted(payload["files"])


def test_watch_mode_rebuilds_after_a_source_change(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "util.ts").write_text("export function add() {}\n", encoding="utf-8")
    config = apply_cli_overrides(default_config(tmp_path), CliOverrides(debounce_ms=50))
    logger = JsonlEventLogger(config.event_log_path)
    stop_event = threading.Event()
    worker = threading.Thread(
        target=start_watching,
        args=(config, stop_event, lambda: PollingObserver(timeout=0.1)),
        kwargs={"event_logger": logger},
        daemon=True,
    )
    worker.start()

    def _event_names() -> list[str]:
        return [str(entry["event"]) for entry in logger.read(limit=200)]

    assert _wait_for(lambda: "watch_started" in _event_names())
    assert _indexed_paths(config.output_path) == ["src/util.ts"]
    time.sleep(0.3)

    (tmp_path / "src" / "index.ts").write_text('import "./util";\n', encoding="utf-8")
    assert _wait_for(
        lambda: _indexed_paths(config.output_path) == ["src/index.ts", "src/util.ts"]
    )

    stop_event.set()
    worker.join(timeout=5.0)

    assert not worker.is_alive()
    names = _event_names()
    assert names.count("index_built") >= 2
    assert names[-1] == "watch_stopped"


def test_first_build_failure_propagates_before_watching(tmp_path: Path) -> None:
    (tmp_path / "blocker").write_text("file", encoding="utf-8")
    config = apply_cli_overrides(
        default_config(tmp_path), CliOverrides(output=Path("blocker/out.json"))
    )
    started: list[bool] = []

    def factory() -> PollingObserver:
        started.append(True)
        return PollingObserver(timeout=0.1)

    with pytest.raises(IndexPersistenceError):
        start_watching(config, threading.Event(), factory)

    assert started == []
