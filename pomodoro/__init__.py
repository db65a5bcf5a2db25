"""Pomodoro: four work intervals, three breaks, one tomato per interval."""

__version__ = "0.1.0"
