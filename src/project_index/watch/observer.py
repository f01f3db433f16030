"""Filesystem change feed backed by watchdog."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from project_index.config import IndexerConfig
from project_index.index.discovery import has_allowed_extension
from project_index.index.ignore import IgnoreMatcher
from project_index.watch.scheduler import ChangeEvent

WATCHED_CONFIG_FILES = ("package.json", "tsconfig.json", "jsconfig.json", ".gitignore")


class ChangeFilter:
    """Decides which relative paths are worth a rebuild."""

    def __init__(
        self,
        config: IndexerConfig,
        internal: Callable[[str], bool] | None = None,
    ) -> None:
        self._config = config
        self._internal = internal
        self._allowed = {extension.lower() for extension in config.include_extensions}
        self._matcher = IgnoreMatcher.for_config(config)

    @property
    def ignore_file(self) -> str | None:
        return self._config.ignore_file

    def reload(self) -> None:
        """Re-read ignore patterns after the ignore file changed."""
        self._matcher = IgnoreMatcher.for_config(self._config)

    def accepts(self, relative_path: str, is_dir: bool = False) -> bool:
        if not relative_path or relative_path == ".":
            return False
        if self._internal is not None and self._internal(relative_path):
            return False
        if self._matcher.matches(relative_path, is_dir=is_dir):
            return False
        if is_dir:
            return True
        if relative_path.rsplit("/", 1)[-1] in WATCHED_CONFIG_FILES:
            return True
        return has_allowed_extension(relative_path, self._allowed)


class ChangeEventHandler(FileSystemEventHandler):
    """Translates watchdog events into scheduler change events."""

    def __init__(
        self,
        root: Path,
        change_filter: ChangeFilter,
        submit: Callable[[ChangeEvent], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self._root = root.resolve()
        self._filter = change_filter
        self._submit = submit
        self._clock = clock

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type == EVENT_TYPE_MOVED:
            self._forward(EVENT_TYPE_DELETED, event.src_path, event.is_directory)
            self._forward(EVENT_TYPE_CREATED, event.dest_path, event.is_directory)
            return
        if event.event_type in (EVENT_TYPE_CREATED, EVENT_TYPE_DELETED):
            self._forward(event.event_type, event.src_path, event.is_directory)
            return
        if event.event_type == EVENT_TYPE_MODIFIED and not event.is_directory:
            self._forward(event.event_type, event.src_path, False)

    def _forward(self, event_type: str, raw_path: bytes | str, is_dir: bool) -> None:
        relative = self._relative(raw_path)
        if relative is None:
            return
        if not is_dir and relative == self._filter.ignore_file:
            self._filter.reload()
        if not self._filter.accepts(relative, is_dir=is_dir):
            return
        kind = f"dir_{event_type}" if is_dir else event_type
        self._submit(ChangeEvent(kind=kind, path=relative, observed_at=self._clock()))

    def _relative(self, raw_path: bytes | str) -> str | None:
        if not raw_path:
            return None
        path = Path(os.fsdecode(raw_path))
        for candidate in (path.absolute(), path.resolve()):
            try:
                return candidate.relative_to(self._root).as_posix()
            except ValueError:
                continue
        return None


def start_observer(
    root: Path,
    change_filter: ChangeFilter,
    submit: Callable[[ChangeEvent], None],
    *,
    clock: Callable[[], float] = time.monotonic,
    observer_factory: Callable[[], BaseObserver] | None = None,
) -> BaseObserver:
    """Schedule a recursive watch on root and start the observer thread."""
    handler = ChangeEventHandler(root, change_filter, submit, clock)
    observer = (observer_factory or Observer)()
    observer.schedule(handler, str(root), recursive=True)
    observer.start()
    return observer
