"""Timer state machine for PomoTick.

Phases
------
WORK          Focus interval.
SHORT_BREAK   Break after a work session that does not close a cycle.
LONG_BREAK    Break after every fourth completed work session.

``running`` is an orthogonal flag over every phase.

Transitions
-----------
WORK → SHORT_BREAK | LONG_BREAK   (countdown reaches 0)
{break} → WORK                    (countdown reaches 0)

The engine never advances into the next countdown on its own: every
completion leaves it paused.  It has no Qt or I/O dependencies; the
one-second tick source lives in ``driver.py``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from ..errors import InvalidConfiguration

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Phase(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


class Notification(Enum):
    """Cue requests for whatever sink is listening (sound, toast, ...)."""

    START = "start"
    PAUSE = "pause"
    COMPLETE = "complete"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_WORK_DURATION = 25 * 60
DEFAULT_SHORT_BREAK_DURATION = 5 * 60
DEFAULT_LONG_BREAK_DURATION = 15 * 60

SESSIONS_PER_CYCLE = 4

Listener = Callable[[Notification], None]


# ── value objects ─────────────────────────────────────────────────────────


def _check_duration(field: str, value: object) -> int:
    # bool is an int subclass; True must not sneak through as 1 second.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(field, value, "must be an integer")
    if value <= 0:
        raise InvalidConfiguration(field, value, "must be positive")
    return value


@dataclass(frozen=True)
class Configuration:
    """Interval lengths in seconds.  Validated on construction."""

    work_duration: int = DEFAULT_WORK_DURATION
    short_break_duration: int = DEFAULT_SHORT_BREAK_DURATION
    long_break_duration: int = DEFAULT_LONG_BREAK_DURATION

    def __post_init__(self) -> None:
        _check_duration("work_duration", self.work_duration)
        _check_duration("short_break_duration", self.short_break_duration)
        _check_duration("long_break_duration", self.long_break_duration)

    def duration_for(self, phase: Phase) -> int:
        if phase is Phase.WORK:
            return self.work_duration
        if phase is Phase.LONG_BREAK:
            return self.long_break_duration
        return self.short_break_duration


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable view of the engine handed to drivers and renderers."""

    phase: Phase
    remaining_seconds: int
    running: bool
    completed_work_sessions: int
    total_seconds: int


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Pomodoro state machine.

    Drive it with ``tick()`` once per second while ``running`` is true,
    and with ``toggle()`` / ``reset()`` / ``set_configuration()`` from
    user input.  Calls must be serialized by the caller; the engine does
    no locking.

    Every cue the engine wants played is returned from the operation
    that produced it and also delivered to each registered listener.
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        # ── configuration ─────────────────────────────────────────────
        self._config: Configuration = configuration or Configuration()

        # ── cycle / countdown state ───────────────────────────────────
        self._phase: Phase = Phase.WORK
        self._remaining: int = self._config.work_duration
        self._running: bool = False
        self._completed: int = 0

        self._listeners: list[Listener] = []

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def running(self) -> bool:
        """True while the countdown is actively decrementing."""
        return self._running

    @property
    def completed_work_sessions(self) -> int:
        """Pomodoros finished since the engine was created."""
        return self._completed

    @property
    def configuration(self) -> Configuration:
        return self._config

    def duration_for(self, phase: Phase) -> int:
        return self._config.duration_for(phase)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining,
            running=self._running,
            completed_work_sessions=self._completed,
            total_seconds=self._config.duration_for(self._phase),
        )

    # ══════════════════════════════════════════════════════════════════
    #  LISTENERS
    # ══════════════════════════════════════════════════════════════════

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> Notification | None:
        """Advance the countdown by one second.

        No-op while paused.  Reaching zero completes the phase within
        the same call, so callers never observe a running clock at 0.
        """
        if not self._running:
            return None
        self._remaining = max(0, self._remaining - 1)
        if self._remaining == 0:
            return self._complete_phase()
        return None

    def toggle(self) -> Notification:
        """Start when paused, pause when running."""
        self._running = not self._running
        logger.debug(
            "%s %s at %ds",
            "Started" if self._running else "Paused",
            self._phase.value,
            self._remaining,
        )
        return self._emit(
            Notification.START if self._running else Notification.PAUSE
        )

    def reset(self) -> None:
        """Pause and refill the clock for the current phase."""
        self._running = False
        self._remaining = self._config.duration_for(self._phase)

    def set_configuration(
        self,
        work_duration: int | None = None,
        short_break_duration: int | None = None,
        long_break_duration: int | None = None,
    ) -> Configuration:
        """Replace any subset of the durations, then ``reset()``.

        Raises ``InvalidConfiguration`` if any supplied value is not a
        positive integer; nothing is changed in that case.  A successful
        update always pauses the timer, even mid-countdown.
        """
        changes: dict[str, int] = {}
        if work_duration is not None:
            changes["work_duration"] = work_duration
        if short_break_duration is not None:
            changes["short_break_duration"] = short_break_duration
        if long_break_duration is not None:
            changes["long_break_duration"] = long_break_duration

        # replace() re-runs __post_init__, so a bad field raises here
        # before anything on self is touched.
        new_config = replace(self._config, **changes)
        self._config = new_config
        logger.debug("Configuration updated: %s", new_config)
        self.reset()
        return new_config

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_phase(self) -> Notification:
        finished = self._phase
        if finished is Phase.WORK:
            self._completed += 1
            if self._completed % SESSIONS_PER_CYCLE == 0:
                self._phase = Phase.LONG_BREAK
            else:
                self._phase = Phase.SHORT_BREAK
        else:
            self._phase = Phase.WORK
        self._remaining = self._config.duration_for(self._phase)
        self._running = False
        logger.info(
            "Finished %s; next up %s (%d pomodoros done)",
            finished.value,
            self._phase.value,
            self._completed,
        )
        return self._emit(Notification.COMPLETE)

    def _emit(self, notification: Notification) -> Notification:
        for listener in list(self._listeners):
            listener(notification)
        return notification
