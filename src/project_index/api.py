"""One-shot and watch-mode entry points."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import TextIO

from watchdog.observers.api import BaseObserver

from project_index.config import IndexerConfig
from project_index.extractors import ExtractorRegistry
from project_index.index import IndexAssembler, IndexDocument
from project_index.logging import JsonlEventLogger
from project_index.watch import ChangeFilter, RebuildScheduler, start_observer


def build_event_logger(
    config: IndexerConfig, echo: TextIO | None = None
) -> JsonlEventLogger | None:
    """Return the configured event logger, or None when disabled."""
    if not config.event_log_enabled:
        return None
    return JsonlEventLogger(path=config.event_log_path, echo=echo)


def run_once(
    config: IndexerConfig,
    *,
    registry: ExtractorRegistry | None = None,
    event_logger: JsonlEventLogger | None = None,
) -> IndexDocument:
    """Build and persist the index once."""
    logger = event_logger if event_logger is not None else build_event_logger(config)
    return IndexAssembler(config, registry=registry, event_logger=logger).build()


def start_watching(
    config: IndexerConfig,
    stop_event: threading.Event | None = None,
    observer_factory: Callable[[], BaseObserver] | None = None,
    *,
    event_logger: JsonlEventLogger | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> RebuildScheduler:
    """Build once, then rebuild on changes until stopped or interrupted.

    A failure of the first build propagates before anything is watched.
    Returns the scheduler after the observer has been stopped and joined.
    """
    logger = event_logger if event_logger is not None else build_event_logger(config)
    assembler = IndexAssembler(config, event_logger=logger)
    assembler.build()

    scheduler = RebuildScheduler(
        assembler.build,
        debounce_seconds=config.debounce_seconds,
        clock=clock,
        event_logger=logger,
        requeue_dropped=config.requeue_dropped,
    )
    change_filter = ChangeFilter(config, internal=assembler.is_internal_path)
    observer = start_observer(
        config.root,
        change_filter,
        scheduler.submit,
        clock=clock,
        observer_factory=observer_factory,
    )
    if logger is not None:
        logger.emit("watch_started", root=str(config.root), debounce_ms=config.debounce_ms)
    try:
        scheduler.run(stop_event)
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()
        if logger is not None:
            logger.emit(
                "watch_stopped",
                rebuilds=scheduler.rebuild_count,
                failures=scheduler.failure_count,
                dropped=scheduler.dropped_count,
            )
    return scheduler
