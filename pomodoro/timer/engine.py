"""Interval state machine for Pomodoro.

A session is a fixed run of seven intervals::

    WORK → BREAK → WORK → BREAK → WORK → BREAK → WORK

The engine walks that sequence one second at a time.  It owns no timer:
a ``TickSource`` (or a test) calls ``tick()`` while ``running`` is true
and starts/stops itself from the ``running_changed`` signal.

Transitions
-----------
reset                 → position 0, full work duration, stopped
start                 → running (resumes mid-interval if paused)
pause                 → stopped, remaining time kept
tick, remaining → 0   → next interval, still running
last interval done    → cycle_finished, then reset
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .formatting import minutes_and_seconds

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class IntervalKind(Enum):
    WORK = "work"
    BREAK = "break"


class MessageKey(Enum):
    READY = "ready"                        # first work interval, never started
    WORK_PENDING = "work_pending"          # later work interval, not started
    WORK_ACTIVE = "work_active"
    BREAK_ACTIVE = "break_active"
    PAUSED = "paused"
    SESSION_COMPLETE = "session_complete"


# ── constants ─────────────────────────────────────────────────────────────

SESSION: tuple[IntervalKind, ...] = (
    IntervalKind.WORK,
    IntervalKind.BREAK,
    IntervalKind.WORK,
    IntervalKind.BREAK,
    IntervalKind.WORK,
    IntervalKind.BREAK,
    IntervalKind.WORK,
)

TOMATOES_PER_SESSION = SESSION.count(IntervalKind.WORK)

DEFAULT_WORK_DURATION = 25 * 60
DEFAULT_BREAK_DURATION = 5 * 60


def _is_positive_seconds(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def tomatoes_for(position: int) -> int:
    """Work intervals reached at *position*, counting the current one.

    Work sits on even positions 0, 2, 4, 6 → 1, 2, 3, 4.  A break shows
    the count of the work interval before it.
    """
    return min((position + 2) // 2, TOMATOES_PER_SESSION)


@dataclass
class EngineState:
    position: int
    remaining: int
    running: bool = False
    started: bool = False      # start() called since the last reset


# ── engine ────────────────────────────────────────────────────────────────


class IntervalEngine(QObject):
    """Qt-signalling countdown through the fixed Pomodoro session.

    Signals
    -------
    time_updated(minutes: int, seconds: int)
        Emitted whenever the remaining time changes or is reloaded.
    interval_changed(kind: IntervalKind | None, tomatoes: int, message: MessageKey)
        Emitted on reset (READY), on start/resume and on entering a new
        interval (WORK_ACTIVE / BREAK_ACTIVE), and once with kind None and
        SESSION_COMPLETE just before ``cycle_finished``.  PAUSED and
        WORK_PENDING are not carried here: after ``paused()`` read
        ``message_key``.
    paused()
        Emitted when a running countdown is paused.
    cycle_finished()
        Emitted once when the last interval of the session completes,
        just before the engine resets itself.
    running_changed(running: bool)
        Emitted whenever the countdown starts or stops; drives the clock.
    """

    time_updated = pyqtSignal(int, int)
    interval_changed = pyqtSignal(object, int, object)
    paused = pyqtSignal()
    cycle_finished = pyqtSignal()
    running_changed = pyqtSignal(bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        work_duration: int = DEFAULT_WORK_DURATION,
        break_duration: int = DEFAULT_BREAK_DURATION,
    ) -> None:
        super().__init__(parent)

        if not (_is_positive_seconds(work_duration)
                and _is_positive_seconds(break_duration)):
            raise ValueError(
                f"durations must be positive whole seconds "
                f"(work={work_duration}, break={break_duration})"
            )

        self._durations: dict[IntervalKind, int] = {
            IntervalKind.WORK: work_duration,
            IntervalKind.BREAK: break_duration,
        }
        self._state = self._fresh_state()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def position(self) -> int:
        """Index of the active interval; ``len(SESSION)`` once complete."""
        return self._state.position

    @property
    def remaining(self) -> int:
        """Seconds left in the active interval."""
        return self._state.remaining

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def length(self) -> int:
        return len(SESSION)

    @property
    def work_duration(self) -> int:
        return self._durations[IntervalKind.WORK]

    @property
    def break_duration(self) -> int:
        return self._durations[IntervalKind.BREAK]

    @property
    def session_duration(self) -> int:
        """Seconds of ticking needed to finish a whole session."""
        return sum(self._durations[kind] for kind in SESSION)

    @property
    def kind(self) -> IntervalKind | None:
        """Kind of the active interval (None once the session is done)."""
        if self._state.position >= len(SESSION):
            return None
        return SESSION[self._state.position]

    @property
    def tomatoes(self) -> int:
        return tomatoes_for(self._state.position)

    @property
    def is_fresh(self) -> bool:
        """True after a reset, before ``start()`` has been called."""
        return (
            not self._state.started
            and self._state.position == 0
            and self._state.remaining == self.work_duration
        )

    @property
    def message_key(self) -> MessageKey:
        kind = self.kind
        if kind is None:
            return MessageKey.SESSION_COMPLETE
        if self._state.running:
            if kind == IntervalKind.WORK:
                return MessageKey.WORK_ACTIVE
            return MessageKey.BREAK_ACTIVE
        if self.is_fresh:
            return MessageKey.READY
        if (
            kind == IntervalKind.WORK
            and self._state.position > 0
            and self._state.remaining == self.duration_for(kind)
        ):
            return MessageKey.WORK_PENDING
        return MessageKey.PAUSED

    def duration_for(self, kind: IntervalKind) -> int:
        return self._durations[kind]

    def snapshot(self) -> EngineState:
        """Copy of the current state, safe to keep around."""
        return EngineState(
            position=self._state.position,
            remaining=self._state.remaining,
            running=self._state.running,
            started=self._state.started,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def reset(self) -> None:
        """Throw the current session away and wait at the first interval."""
        was_running = self._state.running
        self._state = self._fresh_state()
        if was_running:
            self.running_changed.emit(False)
        self._emit_interval()
        self._emit_time()

    def start(self) -> None:
        """Start a fresh session or resume where ``pause()`` left off."""
        if self._state.running or self.kind is None:
            return
        if self.is_fresh:
            logger.debug("Session started (%ss work)", self.work_duration)
        self._state.running = True
        self._state.started = True
        self.running_changed.emit(True)
        self._emit_interval()

    def pause(self) -> None:
        if not self._state.running:
            return
        self._state.running = False
        self.running_changed.emit(False)
        self.paused.emit()

    def tick(self) -> None:
        """Count one second off the active interval."""
        if not self._state.running:
            return
        if self._state.remaining > 0:
            self._state.remaining -= 1
            self._emit_time()
        if self._state.remaining == 0:
            self._advance()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _fresh_state(self) -> EngineState:
        return EngineState(position=0, remaining=self.work_duration)

    def _advance(self) -> None:
        self._state.position += 1
        kind = self.kind

        if kind is not None:
            self._state.remaining = self._durations[kind]
            logger.debug(
                "Interval %d/%d: %s (%ss)",
                self._state.position + 1, len(SESSION),
                kind.value, self._state.remaining,
            )
            self._emit_interval()
            self._emit_time()
            return

        # Whole session done: stop, report, start over.
        self._state.remaining = 0
        self._state.running = False
        self.running_changed.emit(False)
        logger.info("Pomodoro session complete")
        self._emit_interval()
        self.cycle_finished.emit()
        self.reset()

    def _emit_interval(self) -> None:
        self.interval_changed.emit(self.kind, self.tomatoes, self.message_key)

    def _emit_time(self) -> None:
        self.time_updated.emit(*minutes_and_seconds(self._state.remaining))
