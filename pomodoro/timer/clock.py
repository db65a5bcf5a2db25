"""The one-second clock that drives an ``IntervalEngine``.

A single ``QTimer`` lives for as long as the clock does.  It is started
and stopped from the engine's ``running_changed`` signal, so moving from
one interval to the next never creates or discards a timer.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from .engine import IntervalEngine

TICK_INTERVAL_MS = 1000


class TickSource(QObject):
    """Deliver ``engine.tick()`` once per interval while the engine runs."""

    def __init__(
        self,
        engine: IntervalEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self._engine = engine
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(engine.tick)
        engine.running_changed.connect(self._on_running_changed)

        if engine.running:
            self._qt_timer.start()

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def _on_running_changed(self, running: bool) -> None:
        if running:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        else:
            self._qt_timer.stop()
