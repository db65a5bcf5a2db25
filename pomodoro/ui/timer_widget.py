"""The Pomodoro timer screen.

Layout (top → bottom):
    - Message label ("Ready to work", "Taking a break", ...)
    - Countdown (MM:SS)
    - Four tomatoes, lit for each work interval reached
    - Reset / Start-Pause-Continue buttons
    - Close button
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QGraphicsOpacityEffect,
)

from ..timer.engine import (
    IntervalEngine, IntervalKind, MessageKey, TOMATOES_PER_SESSION,
)
from ..timer.formatting import format_number, minutes_and_seconds, tomato_opacities


MESSAGE_TEXT: dict[MessageKey, str] = {
    MessageKey.READY:            "Ready to work",
    MessageKey.WORK_PENDING:     "Back to work",
    MessageKey.WORK_ACTIVE:      "Pomodoro session. Do not disturb.",
    MessageKey.BREAK_ACTIVE:     "Taking a break",
    MessageKey.PAUSED:           "Paused",
    MessageKey.SESSION_COMPLETE: "Session complete",
}

TOMATO_ICON = "\N{TOMATO}"


class TimerWidget(QWidget):
    """Buttons and labels bound to an ``IntervalEngine``."""

    close_requested = pyqtSignal()

    def __init__(self, engine: IntervalEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._show_time(*minutes_and_seconds(engine.remaining))
        self._show_interval(engine.kind, engine.tomatoes, engine.message_key)
        self._update_buttons()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._message_label = QLabel(self)
        self._message_label.setObjectName("messageLabel")
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._message_label)

        self._time_label = QLabel(self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        # ── tomato indicators ────────────────────────────────────────
        tomato_row = QHBoxLayout()
        tomato_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        tomato_row.setSpacing(10)
        self._tomatoes: list[QLabel] = []
        self._tomato_effects: list[QGraphicsOpacityEffect] = []
        for _ in range(TOMATOES_PER_SESSION):
            icon = QLabel(TOMATO_ICON, self)
            icon.setStyleSheet("font-size: 28px;")
            effect = QGraphicsOpacityEffect(icon)
            icon.setGraphicsEffect(effect)
            self._tomatoes.append(icon)
            self._tomato_effects.append(effect)
            tomato_row.addWidget(icon)
        layout.addLayout(tomato_row)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("dangerButton")

        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

        self._close_btn = QPushButton("Close", self)
        layout.addWidget(self._close_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._close_btn.clicked.connect(self.close_requested)

        self._engine.time_updated.connect(self._show_time)
        self._engine.interval_changed.connect(self._show_interval)
        self._engine.paused.connect(self._on_paused)
        self._engine.running_changed.connect(lambda _running: self._update_buttons())

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._engine.running:
            self._engine.pause()
        else:
            self._engine.start()

    def _on_paused(self) -> None:
        self._message_label.setText(MESSAGE_TEXT[self._engine.message_key])

    def _show_time(self, minutes: int, seconds: int) -> None:
        self._time_label.setText(f"{format_number(minutes)}:{format_number(seconds)}")

    def _show_interval(
        self, kind: IntervalKind | None, tomatoes: int, message: MessageKey,
    ) -> None:
        self._message_label.setText(MESSAGE_TEXT[message])
        opacities = tomato_opacities(tomatoes, TOMATOES_PER_SESSION)
        for effect, opacity in zip(self._tomato_effects, opacities):
            effect.setOpacity(opacity)
        self._update_buttons()

    def _update_buttons(self) -> None:
        """Pause while running, Continue once paused, Start otherwise."""
        if self._engine.running:
            self._start_pause_btn.setText("Pause")
            self._reset_btn.setEnabled(False)
        elif self._engine.is_fresh:
            self._start_pause_btn.setText("Start")
            self._reset_btn.setEnabled(False)
        else:
            self._start_pause_btn.setText("Continue")
            self._reset_btn.setEnabled(True)

    # ── inspection (tests, accessibility) ─────────────────────────────────

    @property
    def time_text(self) -> str:
        return self._time_label.text()

    @property
    def message_text(self) -> str:
        return self._message_label.text()

    @property
    def start_pause_text(self) -> str:
        return self._start_pause_btn.text()

    @property
    def reset_enabled(self) -> bool:
        return self._reset_btn.isEnabled()

    def tomato_opacity_values(self) -> list[float]:
        return [effect.opacity() for effect in self._tomato_effects]
