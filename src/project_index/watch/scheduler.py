"""Debounced, single-flight rebuild scheduling."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from project_index.logging import JsonlEventLogger

MAX_WAIT_SECONDS = 0.5


class SchedulerState(str, Enum):
    """Rebuild lifecycle states."""

    IDLE = "idle"
    PENDING = "pending"
    BUILDING = "building"


@dataclass(slots=True, frozen=True)
class ChangeEvent:
    """One filtered filesystem change, stamped with the scheduler clock."""

    kind: str
    path: str
    observed_at: float


_STOP = object()


class RebuildScheduler:
    """Coalesces change bursts and runs at most one rebuild at a time.

    All state transitions happen on the thread that calls `run` (or on the
    caller of `handle_event`/`poll` when driven directly). Other threads
    only post to the inbox through `submit` and `stop`.

    Events observed while a rebuild is running are dropped, including the
    ones that reach the inbox only after the rebuild returned. With
    `requeue_dropped` a dropped event instead schedules one more rebuild.
    """

    def __init__(
        self,
        rebuild: Callable[[], object],
        *,
        debounce_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        event_logger: JsonlEventLogger | None = None,
        requeue_dropped: bool = False,
    ) -> None:
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")
        self._rebuild = rebuild
        self._debounce_seconds = debounce_seconds
        self._clock = clock
        self._event_logger = event_logger
        self._requeue_dropped = requeue_dropped
        self._inbox: queue.Queue[object] = queue.Queue()
        self._state = SchedulerState.IDLE
        self._deadline: float | None = None
        self._last_build_window: tuple[float, float] | None = None
        self._rerun_requested = False
        self._rebuild_count = 0
        self._failure_count = 0
        self._dropped_count = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def rebuild_count(self) -> int:
        """Number of completed rebuild attempts, failed ones included."""
        return self._rebuild_count

    @property
    def failure_count(self) -> int:
        return self._failure_count

    @property
    def dropped_count(self) -> int:
        return self._dropped_count

    def submit(self, event: ChangeEvent) -> None:
        """Post a change event to the inbox; safe from any thread."""
        self._inbox.put(event)

    def stop(self) -> None:
        """Ask the run loop to exit after the current message."""
        self._inbox.put(_STOP)

    def handle_event(self, event: ChangeEvent) -> None:
        """Apply one change event to the state machine."""
        if self._state is SchedulerState.BUILDING or self._observed_during_last_build(event):
            self._drop(event)
            return
        self._arm()

    def poll(self) -> bool:
        """Run the rebuild when the debounce deadline has passed."""
        if self._state is not SchedulerState.PENDING or self._deadline is None:
            return False
        if self._clock() < self._deadline:
            return False
        self._run_rebuild()
        return True

    def run(self, stop_event: threading.Event | None = None) -> None:
        """Process inbox messages and deadlines until stopped."""
        while stop_event is None or not stop_event.is_set():
            try:
                message = self._inbox.get(timeout=self._wait_timeout())
            except queue.Empty:
                message = None
            if message is _STOP:
                return
            if isinstance(message, ChangeEvent):
                self.handle_event(message)
            self.poll()

    def _arm(self) -> None:
        self._state = SchedulerState.PENDING
        self._deadline = self._clock() + self._debounce_seconds

    def _observed_during_last_build(self, event: ChangeEvent) -> bool:
        if self._last_build_window is None:
            return False
        started, finished = self._last_build_window
        return started <= event.observed_at <= finished

    def _drop(self, event: ChangeEvent) -> None:
        self._dropped_count += 1
        self._emit("change_dropped", ok=True, kind=event.kind, path=event.path)
        if not self._requeue_dropped:
            return
        if self._state is SchedulerState.BUILDING:
            self._rerun_requested = True
        else:
            self._arm()

    def _run_rebuild(self) -> None:
        self._state = SchedulerState.BUILDING
        self._deadline = None
        started = self._clock()
        try:
            self._rebuild()
        except Exception as exc:
            self._failure_count += 1
            self._emit("rebuild_failed", ok=False, error=f"{type(exc).__name__}: {exc}")
        finally:
            self._last_build_window = (started, self._clock())
            self._rebuild_count += 1
            self._state = SchedulerState.IDLE
            if self._rerun_requested:
                self._rerun_requested = False
                self._arm()

    def _wait_timeout(self) -> float:
        if self._state is SchedulerState.PENDING and self._deadline is not None:
            remaining = self._deadline - self._clock()
            return min(max(remaining, 0.0), MAX_WAIT_SECONDS)
        return MAX_WAIT_SECONDS

    def _emit(self, event: str, *, ok: bool, **metadata: object) -> None:
        if self._event_logger is not None:
            self._event_logger.emit(event, ok=ok, **metadata)
