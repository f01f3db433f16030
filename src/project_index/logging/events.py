"""Structured JSONL build event log."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO


@dataclass(slots=True, frozen=True)
class BuildEvent:
    """Single index build or watch lifecycle event."""

    timestamp: str
    event: str
    ok: bool
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonlEventLogger:
    """Append-only JSONL event logger and bounded reader."""

    def __init__(self, path: Path, echo: TextIO | None = None) -> None:
        self._path = path
        self._echo = echo
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def emit(self, event: str, *, ok: bool = True, **metadata: object) -> BuildEvent:
        """Build, append and return one event stamped with the current time."""
        record = BuildEvent(
            timestamp=utc_timestamp(),
            event=event,
            ok=ok,
            metadata=dict(sorted(metadata.items())),
        )
        self.append(record)
        return record

    def append(self, event: BuildEvent) -> None:
        """Append an event as one JSON object per line."""
        line = json.dumps(asdict(event), sort_keys=True, default=str)
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(line)
            handle.write("\n")
        if self._echo is not None:
            self._echo.write(f"{line}\n")
            self._echo.flush()

    def read(self, limit: int = 50) -> list[dict[str, object]]:
        """Read the most recent events, skipping malformed lines."""
        if limit < 1:
            return []
        entries: list[dict[str, object]] = []
        if not self._path.exists():
            return entries
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    continue
                entries.append(record)
        if len(entries) <= limit:
            return entries
        return entries[-limit:]
