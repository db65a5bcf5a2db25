"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodoro.database.db import configure_engine, init_db
from pomodoro.timer.engine import IntervalEngine

from helpers import WORK, BREAK


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def engine(qapp):
    """Fresh IntervalEngine with short durations (10 s work, 5 s break)."""
    eng = IntervalEngine(parent=None, work_duration=WORK, break_duration=BREAK)
    eng.reset()
    return eng
