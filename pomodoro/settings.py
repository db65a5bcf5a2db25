"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Pomodoro/settings.json

Usage::

    settings = load_settings()
    settings.work_duration = 50 * 60
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

# Reuse the app-support directory from db.py
APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Pomodoro"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

_POSITIVE_FIELDS = ("work_duration", "break_duration", "tick_interval_ms")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = 25 * 60           # seconds
    break_duration: int = 5 * 60
    tick_interval_ms: int = 1000

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 360
    window_height: int = 560


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, error)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", SETTINGS_PATH)
        return Settings()

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    defaults = Settings()
    for key in _POSITIVE_FIELDS:
        if key not in filtered:
            continue
        value = filtered[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning("Invalid %s=%r in settings, using default", key, value)
            filtered[key] = getattr(defaults, key)
    return Settings(**filtered)


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
