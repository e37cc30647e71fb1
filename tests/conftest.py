"""Shared pytest fixtures for PomoTick tests."""

import os
import sys
import pytest

# Headless CI has no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomotick.timer.driver import TimerDriver
from pomotick.timer.engine import Configuration, TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def engine():
    """Fresh TimerEngine with the default 25/5/15 configuration."""
    return TimerEngine()


@pytest.fixture
def short_engine():
    """Engine with tiny durations so full phases can be ticked through."""
    return TimerEngine(Configuration(
        work_duration=5,
        short_break_duration=2,
        long_break_duration=3,
    ))


@pytest.fixture
def driver(qapp):
    """TimerDriver around a fresh default engine."""
    return TimerDriver(TimerEngine())
