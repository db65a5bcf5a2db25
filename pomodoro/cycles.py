"""Completed-cycle counter.

The counter is handed the engine explicitly (``attach``) instead of
listening for a global notification, so the timer screen and the
cycles screen only share this object.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from .timer.engine import IntervalEngine

logger = logging.getLogger(__name__)


class CycleCounter(QObject):
    """Counts finished Pomodoro sessions and records them in the database.

    Signals
    -------
    count_changed(count: int)
        Emitted after every recorded cycle.
    """

    count_changed = pyqtSignal(int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        db_enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._db_enabled = db_enabled
        self._engine: IntervalEngine | None = None
        self._count = self._load_count() if db_enabled else 0

    @property
    def count(self) -> int:
        return self._count

    def attach(self, engine: IntervalEngine) -> None:
        """Count every session *engine* finishes."""
        if self._engine is not None:
            self._engine.cycle_finished.disconnect(self._on_cycle_finished)
        self._engine = engine
        engine.cycle_finished.connect(self._on_cycle_finished)

    def record_cycle(self, work_duration: int, break_duration: int) -> int:
        """Add one finished cycle and return the new total."""
        if self._db_enabled:
            self._persist(work_duration, break_duration)
        self._count += 1
        logger.info("Completed cycles: %d", self._count)
        self.count_changed.emit(self._count)
        return self._count

    def _on_cycle_finished(self) -> None:
        engine = self._engine
        self.record_cycle(engine.work_duration, engine.break_duration)

    # ── database ──────────────────────────────────────────────────────

    def _load_count(self) -> int:
        from .database.db import get_session
        from .database.models import CompletedCycle

        with get_session() as db:
            return db.query(CompletedCycle).count()

    def _persist(self, work_duration: int, break_duration: int) -> None:
        from .database.db import get_session
        from .database.models import CompletedCycle

        with get_session() as db:
            db.add(CompletedCycle(
                work_duration=work_duration,
                break_duration=break_duration,
            ))
