"""Main application window for Pomodoro."""

from __future__ import annotations

from PyQt6.QtWidgets import QMainWindow, QDialog, QVBoxLayout

from .timer.engine import IntervalEngine
from .timer.clock import TickSource
from .cycles import CycleCounter
from .ui.timer_widget import TimerWidget
from .ui.cycles_widget import CyclesWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings


class TimerDialog(QDialog):
    """Timer screen shown over the main window; Close dismisses it."""

    def __init__(self, engine: IntervalEngine, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Pomodoro")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.timer_widget = TimerWidget(engine, self)
        self.timer_widget.close_requested.connect(self.accept)
        layout.addWidget(self.timer_widget)


class PomodoroApp(QMainWindow):
    """Main window: completed-cycles screen plus the timer dialog."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        db_enabled: bool = True,
    ) -> None:
        super().__init__()
        self._settings: Settings = settings or load_settings()
        self.setWindowTitle("Pomodoro")
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet(get_palette()))

        # ── engine, clock, counter ────────────────────────────────────
        self.engine = IntervalEngine(
            parent=self,
            work_duration=self._settings.work_duration,
            break_duration=self._settings.break_duration,
        )
        self.clock = TickSource(
            self.engine, parent=self,
            interval_ms=self._settings.tick_interval_ms,
        )
        self.counter = CycleCounter(parent=self, db_enabled=db_enabled)
        self.counter.attach(self.engine)

        # ── screens ───────────────────────────────────────────────────
        self.cycles_widget = CyclesWidget(self.counter, self)
        self.setCentralWidget(self.cycles_widget)

        self.timer_dialog = TimerDialog(self.engine, self)
        self.cycles_widget.open_timer_requested.connect(self.open_timer)

        self.engine.reset()

    def open_timer(self) -> None:
        self.timer_dialog.show()
        self.timer_dialog.raise_()
        self.timer_dialog.activateWindow()
