"""Qt tick source and command entry point for the timer engine.

``TimerDriver`` owns the engine and a one-second ``QTimer``.  Every
tick and every user command arrives on the Qt event loop, so they are
processed one at a time without locks.  The QTimer only runs while the
engine reports ``running``.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..errors import InvalidConfiguration
from ..settings import minutes_to_seconds
from .engine import Notification, Phase, TimerEngine, TimerSnapshot

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000

_PHASE_TO_FIELD: dict[Phase, str] = {
    Phase.WORK: "work_duration",
    Phase.SHORT_BREAK: "short_break_duration",
    Phase.LONG_BREAK: "long_break_duration",
}


class TimerDriver(QObject):
    """Connects a ``TimerEngine`` to Qt.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every processed tick.
    state_changed(snapshot: TimerSnapshot)
        Emitted after every command and after a phase completes.
    notified(notification: Notification)
        Re-emits each cue the engine requests.
    configuration_rejected(message: str)
        Emitted when ``set_configuration`` refuses an update.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    notified = pyqtSignal(object)
    configuration_rejected = pyqtSignal(str)

    def __init__(
        self,
        engine: TimerEngine | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine or TimerEngine()
        self._engine.add_listener(self._on_notification)

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ── properties ────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def is_ticking(self) -> bool:
        """True while the underlying QTimer is scheduled."""
        return self._qt_timer.isActive()

    def snapshot(self) -> TimerSnapshot:
        return self._engine.snapshot()

    # ── commands ──────────────────────────────────────────────────────

    def toggle(self) -> None:
        self._engine.toggle()
        self._sync()

    def reset(self) -> None:
        self._engine.reset()
        self._sync()

    def set_configuration(
        self,
        work_duration: int | None = None,
        short_break_duration: int | None = None,
        long_break_duration: int | None = None,
    ) -> bool:
        """Apply new durations.  Returns False (and emits
        ``configuration_rejected``) if the engine refuses them."""
        try:
            self._engine.set_configuration(
                work_duration=work_duration,
                short_break_duration=short_break_duration,
                long_break_duration=long_break_duration,
            )
        except InvalidConfiguration as exc:
            logger.warning("Rejected configuration update: %s", exc)
            self.configuration_rejected.emit(str(exc))
            return False
        self._sync()
        return True

    def set_minutes(self, phase: Phase, minutes: int) -> bool:
        """Set one phase's duration from a minute-denominated input."""
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            # Let the engine produce the rejection with the right field.
            seconds = minutes
        else:
            seconds = minutes_to_seconds(minutes)
        return self.set_configuration(**{_PHASE_TO_FIELD[phase]: seconds})

    # ── internal ──────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        self._engine.tick()
        self.tick.emit(self._engine.remaining_seconds)
        if not self._engine.running:
            # Phase completed during this tick.
            self._sync()

    def _on_notification(self, notification: Notification) -> None:
        self.notified.emit(notification)

    def _sync(self) -> None:
        if self._engine.running:
            if not self._qt_timer.isActive():
                self._qt_timer.start()
        else:
            self._qt_timer.stop()
        self.state_changed.emit(self._engine.snapshot())
