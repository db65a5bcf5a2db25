"""Screen showing how many full Pomodoro sessions have been finished."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton

from ..cycles import CycleCounter


class CyclesWidget(QWidget):
    """Completed-cycles counter plus the button that opens the timer."""

    open_timer_requested = pyqtSignal()

    def __init__(self, counter: CycleCounter, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._counter = counter

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 48, 24, 48)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        caption = QLabel("Completed cycles", self)
        caption.setObjectName("messageLabel")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(caption)

        self._count_label = QLabel(str(counter.count), self)
        self._count_label.setObjectName("cyclesLabel")
        self._count_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._count_label)

        self._open_btn = QPushButton("Start Pomodoro", self)
        self._open_btn.setObjectName("primaryButton")
        self._open_btn.clicked.connect(self.open_timer_requested)
        layout.addWidget(self._open_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        counter.count_changed.connect(self._on_count_changed)

    @property
    def count_text(self) -> str:
        return self._count_label.text()

    def _on_count_changed(self, count: int) -> None:
        self._count_label.setText(str(count))
