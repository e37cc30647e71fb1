"""Main application window for PomoTick.

Composes the timer driver, the sound manager and the timer widget, and
routes engine notifications to the sound manager.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QMessageBox, QWidget

from .audio.sounds import SoundManager
from .settings import Settings
from .timer.driver import TimerDriver
from .timer.engine import TimerEngine
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class PomoTickApp(QMainWindow):
    """Top-level window.  One engine per window, discarded on close."""

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()

        self.setWindowTitle("Pomodoro Timer")
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── timer ─────────────────────────────────────────────────────
        self._driver = TimerDriver(
            TimerEngine(self._settings.to_configuration()),
            parent=self,
        )

        # ── sound manager ─────────────────────────────────────────────
        self._sound_manager = SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        # ── UI ────────────────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._driver, self)
        self.setCentralWidget(self._timer_widget)

        self._connect_signals()

    # ══════════════════════════════════════════════════════════════════
    #  WIRING
    # ══════════════════════════════════════════════════════════════════

    def _connect_signals(self) -> None:
        self._driver.notified.connect(self._sound_manager.notify)
        self._driver.configuration_rejected.connect(self._on_config_rejected)

    def _on_config_rejected(self, message: str) -> None:
        QMessageBox.warning(self, "Invalid duration", message)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        self._driver.toggle()

    def _on_escape(self) -> None:
        """Reset the current phase."""
        self._driver.reset()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
