"""Display helpers for the countdown and the tomato indicator."""

from __future__ import annotations

FILLED_OPACITY = 1.0
DIM_OPACITY = 0.2


def minutes_and_seconds(seconds: int) -> tuple[int, int]:
    """Split a number of seconds into ``(minutes, seconds)``."""
    return divmod(max(0, seconds), 60)


def format_number(number: int) -> str:
    """Two digits, zero padded: ``5`` → ``"05"``."""
    return f"{number:02d}"


def format_time(seconds: int) -> str:
    minutes, secs = minutes_and_seconds(seconds)
    return f"{format_number(minutes)}:{format_number(secs)}"


def tomato_opacities(filled: int, total: int = 4) -> list[float]:
    """Opacity for each tomato icon: the first *filled* are lit, the rest dim."""
    return [
        FILLED_OPACITY if index <= filled else DIM_OPACITY
        for index in range(1, total + 1)
    ]
