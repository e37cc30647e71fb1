"""Pure helpers that turn engine state into display values."""

from __future__ import annotations

from .engine import Phase, SESSIONS_PER_CYCLE


PHASE_LABELS: dict[Phase, str] = {
    Phase.WORK:        "Work",
    Phase.SHORT_BREAK: "Short Break",
    Phase.LONG_BREAK:  "Long Break",
}


def format_time(seconds: int) -> str:
    """``65`` → ``"01:05"``.  Minutes are not wrapped into hours."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def phase_label(phase: Phase) -> str:
    return PHASE_LABELS[phase]


def cycle_progress(completed_work_sessions: int) -> int:
    """Filled slots in the current cycle, 0 to ``SESSIONS_PER_CYCLE - 1``."""
    return completed_work_sessions % SESSIONS_PER_CYCLE


def cycle_slots(completed_work_sessions: int) -> tuple[bool, ...]:
    filled = cycle_progress(completed_work_sessions)
    return tuple(i < filled for i in range(SESSIONS_PER_CYCLE))


def percent_complete(remaining: int, total: int) -> float:
    """0.0 → 1.0 progress through a countdown of *total* seconds."""
    if total <= 0:
        return 0.0
    elapsed = total - remaining
    return max(0.0, min(1.0, elapsed / total))
