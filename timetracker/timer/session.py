"""Task timer state machine.

Each task label is either Idle or Running::

    Idle ──toggle──▶ Running ──toggle──▶ Idle   (elapsed added)

At most one label is Running across the whole session.  There is no
background tick: elapsed time is computed at stop time from the recorded
start instant and the current wall clock.

Known gaps, kept on purpose
---------------------------
- ``apply_preset``, ``remove_task`` and ``reset_all`` drop a running
  timer's in-progress time instead of flushing it.
- ``elapsed_of`` does not include the in-progress time of the running
  task; its value is stale until the task is stopped.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from .correction import NoCorrection, TimeCorrector

logger = logging.getLogger(__name__)

DEFAULT_TASK_PREFIX = "Tâche"


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for display or serialization."""

    timers: Mapping[str, int]
    running: str | None
    started_at: int | None
    log: tuple[str, ...]


class TimerSession(QObject):
    """Accumulates per-task durations with a single active timer.

    Signals
    -------
    timers_changed()
        Emitted when the set of tasks or any accumulator changes.
    running_changed(label: str | None)
        Emitted when a task starts (its label) or stops (``None``).
    log_appended(entry: str)
        Emitted after a start/stop record is added to the session log.
    """

    timers_changed = pyqtSignal()
    running_changed = pyqtSignal(object)
    log_appended = pyqtSignal(str)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: Callable[[], int] | None = None,
        corrector: TimeCorrector | None = None,
        time_format: str = "%H:%M:%S",
    ) -> None:
        super().__init__(parent)
        self._clock = clock or wall_clock_ms
        self._corrector: TimeCorrector = corrector or NoCorrection()
        self._time_format = time_format

        self._timers: dict[str, int] = {}
        self._running: str | None = None
        self._started_at: int | None = None
        self._log: list[str] = []

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def timers(self) -> dict[str, int]:
        """Copy of the label → accumulated milliseconds mapping."""
        return dict(self._timers)

    @property
    def labels(self) -> list[str]:
        return list(self._timers)

    @property
    def running_task(self) -> str | None:
        return self._running

    @property
    def is_running(self) -> bool:
        return self._running is not None

    @property
    def started_at(self) -> int | None:
        """Epoch milliseconds at which the running task started."""
        return self._started_at

    @property
    def log(self) -> list[str]:
        return list(self._log)

    def elapsed_of(self, label: str) -> int:
        """Accumulated milliseconds for *label* (0 if unknown)."""
        return self._timers.get(label, 0)

    def in_progress_ms(self) -> int:
        """Milliseconds the running task has accrued since it started."""
        if self._started_at is None:
            return 0
        return max(0, self._clock() - self._started_at)

    def format_elapsed(self, label: str) -> str:
        return f"{label}: {self.elapsed_of(label) // 1000} sec"

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            timers=MappingProxyType(dict(self._timers)),
            running=self._running,
            started_at=self._started_at,
            log=tuple(self._log),
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def apply_preset(self, task_labels: Iterable[str]) -> None:
        """Replace every timer with a zeroed entry per label."""
        self._discard_running()
        self._timers = {label: 0 for label in task_labels}
        self.timers_changed.emit()

    def add_task(self, label: str | None = None) -> str:
        """Insert a zeroed timer and return the label actually used.

        Without *label* the task is named ``"Tâche <n+1>"``; an existing
        label gets a ``" (<n+1>)"`` suffix.  *n* is the current task count,
        bumped until the result is unused.
        """
        n = len(self._timers) + 1
        if label is None:
            candidate = f"{DEFAULT_TASK_PREFIX} {n}"
            while candidate in self._timers:
                n += 1
                candidate = f"{DEFAULT_TASK_PREFIX} {n}"
        else:
            candidate = label
            while candidate in self._timers:
                candidate = f"{label} ({n})"
                n += 1
        self._timers[candidate] = 0
        self.timers_changed.emit()
        return candidate

    def remove_task(self, label: str) -> None:
        """Drop *label*; a running timer loses its in-progress time."""
        if label not in self._timers:
            logger.debug("remove_task(%r): no such task", label)
            return
        if self._running == label:
            self._discard_running()
        del self._timers[label]
        self.timers_changed.emit()

    def toggle(self, label: str) -> None:
        """Start *label*, or stop it if it is the running task.

        Starting while another task runs is silently ignored.
        """
        if self._running == label:
            self._stop()
        elif self._running is not None:
            logger.debug(
                "toggle(%r) ignored: %r is already running", label, self._running,
            )
        elif label not in self._timers:
            logger.debug("toggle(%r) ignored: no such task", label)
        else:
            self._start(label)

    def reset_all(self) -> None:
        """Clear every timer and the session log."""
        self._discard_running()
        self._timers.clear()
        self._log.clear()
        self.timers_changed.emit()

    def correct(self, *args: Any, **kwargs: Any) -> None:
        """Manual time adjustment, delegated to the configured corrector."""
        self._corrector.correct(self, *args, **kwargs)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _start(self, label: str) -> None:
        now = self._clock()
        self._running = label
        self._started_at = now
        self._append_log(f"Start {label} at {self._format_instant(now)}")
        self.running_changed.emit(label)

    def _stop(self) -> None:
        label = self._running
        now = self._clock()
        elapsed = max(0, now - self._started_at)
        self._timers[label] += elapsed
        self._running = None
        self._started_at = None
        self._append_log(
            f"Stop {label} at {self._format_instant(now)} "
            f"(Duration: {elapsed // 1000} sec)"
        )
        self.running_changed.emit(None)
        self.timers_changed.emit()

    def _discard_running(self) -> None:
        if self._running is None:
            return
        logger.info("Discarding running timer %r without flushing", self._running)
        self._running = None
        self._started_at = None
        self.running_changed.emit(None)

    def _append_log(self, entry: str) -> None:
        self._log.append(entry)
        self.log_appended.emit(entry)

    def _format_instant(self, epoch_ms: int) -> str:
        return datetime.fromtimestamp(epoch_ms / 1000).strftime(self._time_format)
