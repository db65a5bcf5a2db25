"""UI package."""

from .timer_widget import TimerWidget, MESSAGE_TEXT
from .cycles_widget import CyclesWidget
from .styles import build_stylesheet, get_palette

__all__ = [
    "TimerWidget",
    "MESSAGE_TEXT",
    "CyclesWidget",
    "build_stylesheet",
    "get_palette",
]
