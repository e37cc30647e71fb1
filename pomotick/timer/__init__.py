"""Timer package."""

from .engine import (
    TimerEngine,
    TimerSnapshot,
    Configuration,
    Phase,
    Notification,
    SESSIONS_PER_CYCLE,
)
from .display import (
    format_time,
    phase_label,
    cycle_progress,
    cycle_slots,
    percent_complete,
)

__all__ = [
    "TimerEngine",
    "TimerSnapshot",
    "Configuration",
    "Phase",
    "Notification",
    "SESSIONS_PER_CYCLE",
    "format_time",
    "phase_label",
    "cycle_progress",
    "cycle_slots",
    "percent_complete",
]
