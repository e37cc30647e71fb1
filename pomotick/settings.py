"""Application settings.

Settings live in memory only; every launch starts from the defaults
below.

Usage::

    settings = Settings(sound_volume=50)
    engine = TimerEngine(settings.to_configuration())
"""

from __future__ import annotations

from dataclasses import dataclass

from .timer.engine import (
    Configuration,
    DEFAULT_WORK_DURATION,
    DEFAULT_SHORT_BREAK_DURATION,
    DEFAULT_LONG_BREAK_DURATION,
)


def minutes_to_seconds(minutes: int) -> int:
    return minutes * 60


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: int = DEFAULT_WORK_DURATION           # seconds
    short_break_duration: int = DEFAULT_SHORT_BREAK_DURATION
    long_break_duration: int = DEFAULT_LONG_BREAK_DURATION

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 360
    window_height: int = 480

    def to_configuration(self) -> Configuration:
        """Raises ``InvalidConfiguration`` for non-positive durations."""
        return Configuration(
            work_duration=self.work_duration,
            short_break_duration=self.short_break_duration,
            long_break_duration=self.long_break_duration,
        )
