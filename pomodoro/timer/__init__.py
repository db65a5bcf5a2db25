"""Timer package."""

from .engine import (
    IntervalEngine,
    IntervalKind,
    MessageKey,
    EngineState,
    SESSION,
    TOMATOES_PER_SESSION,
    DEFAULT_WORK_DURATION,
    DEFAULT_BREAK_DURATION,
    tomatoes_for,
)
from .clock import TickSource, TICK_INTERVAL_MS
from .formatting import format_time, minutes_and_seconds, tomato_opacities

__all__ = [
    "IntervalEngine",
    "IntervalKind",
    "MessageKey",
    "EngineState",
    "SESSION",
    "TOMATOES_PER_SESSION",
    "DEFAULT_WORK_DURATION",
    "DEFAULT_BREAK_DURATION",
    "tomatoes_for",
    "TickSource",
    "TICK_INTERVAL_MS",
    "format_time",
    "minutes_and_seconds",
    "tomato_opacities",
]
