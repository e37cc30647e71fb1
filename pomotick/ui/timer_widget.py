"""Main timer display widget.

Layout (top → bottom):
    - Phase label
    - Large MM:SS countdown
    - Progress bar through the current phase
    - Start/Pause + Reset buttons
    - Cycle dots (4 = one cycle)
    - Duration spin boxes (minutes)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QPushButton, QSpinBox, QFrame, QProgressBar,
)

from ..timer.display import cycle_slots, format_time, percent_complete, phase_label
from ..timer.driver import TimerDriver
from ..timer.engine import Phase, TimerSnapshot


DOT_FILLED = "●"
DOT_EMPTY = "○"

PROGRESS_STEPS = 1000

SPIN_RANGES: dict[Phase, tuple[int, int]] = {
    Phase.WORK:        (1, 120),
    Phase.SHORT_BREAK: (1, 60),
    Phase.LONG_BREAK:  (1, 60),
}

SPIN_LABELS: dict[Phase, str] = {
    Phase.WORK:        "Work time:",
    Phase.SHORT_BREAK: "Short break:",
    Phase.LONG_BREAK:  "Long break:",
}


class TimerWidget(QWidget):
    """The timer card.  Reads state only through driver signals.

    Spin boxes edit whole minutes.  A configured duration that is not a
    whole number of minutes shows rounded down (minimum 1) until the
    user edits it; the range widens to fit durations above the default
    maximum.
    """

    def __init__(self, driver: TimerDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._driver = driver
        self._total: int = 0
        self._build_ui()
        self._populate_spins()
        self._connect_signals()
        self._on_state_changed(driver.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._phase_label = QLabel(card)
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._phase_label.setStyleSheet("font-size: 18px; font-weight: 600;")
        layout.addWidget(self._phase_label)

        self._time_label = QLabel(card)
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._time_label.setStyleSheet("font-size: 64px; font-weight: 700;")
        layout.addWidget(self._time_label)

        self._progress = QProgressBar(card)
        self._progress.setRange(0, PROGRESS_STEPS)
        self._progress.setTextVisible(False)
        self._progress.setFixedHeight(6)
        layout.addWidget(self._progress)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._toggle_btn = QPushButton("Start", card)
        self._toggle_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")

        btn_row.addWidget(self._toggle_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        # ── cycle dots ───────────────────────────────────────────────
        dot_row = QHBoxLayout()
        dot_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        dot_row.setSpacing(10)
        self._dots: list[QLabel] = []
        for _ in cycle_slots(0):
            dot = QLabel(DOT_EMPTY, card)
            dot.setAlignment(Qt.AlignmentFlag.AlignCenter)
            dot.setStyleSheet("font-size: 18px;")
            self._dots.append(dot)
            dot_row.addWidget(dot)
        layout.addLayout(dot_row)

        # ── durations ────────────────────────────────────────────────
        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)
        self._spins: dict[Phase, QSpinBox] = {}
        for phase in Phase:
            spin = QSpinBox(card)
            spin.setRange(*SPIN_RANGES[phase])
            spin.setSuffix(" min")
            self._spins[phase] = spin
            form.addRow(SPIN_LABELS[phase], spin)
        layout.addLayout(form)

    def _populate_spins(self) -> None:
        engine = self._driver.engine
        for phase, spin in self._spins.items():
            minutes = max(1, engine.duration_for(phase) // 60)
            spin.blockSignals(True)
            spin.setMaximum(max(SPIN_RANGES[phase][1], minutes))
            spin.setValue(minutes)
            spin.blockSignals(False)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(self._driver.toggle)
        self._reset_btn.clicked.connect(self._driver.reset)
        for phase, spin in self._spins.items():
            spin.valueChanged.connect(
                lambda value, p=phase: self._driver.set_minutes(p, value)
            )

        self._driver.tick.connect(self._refresh_time)
        self._driver.state_changed.connect(self._on_state_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, snapshot: TimerSnapshot) -> None:
        self._toggle_btn.setText("Pause" if snapshot.running else "Start")
        self._phase_label.setText(phase_label(snapshot.phase))
        for dot, filled in zip(self._dots, cycle_slots(snapshot.completed_work_sessions)):
            dot.setText(DOT_FILLED if filled else DOT_EMPTY)
        self._total = snapshot.total_seconds
        self._refresh_time(snapshot.remaining_seconds)

    def _refresh_time(self, remaining: int) -> None:
        self._time_label.setText(format_time(remaining))
        pct = percent_complete(remaining, self._total)
        self._progress.setValue(round(pct * PROGRESS_STEPS))
