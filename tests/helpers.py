"""Shared test helpers for PomoTick."""

from pomotick.timer.engine import Notification, TimerEngine


class SignalCollector:
    """Captures pyqtSignal emissions or listener calls into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(engine: TimerEngine, n: int) -> list[Notification]:
    """Call ``tick()`` *n* times and return the notifications produced."""
    produced = []
    for _ in range(n):
        note = engine.tick()
        if note is not None:
            produced.append(note)
    return produced


def complete_phase(engine: TimerEngine) -> Notification | None:
    """Fast-complete the current phase by jumping to the last tick."""
    if not engine.running:
        engine.toggle()
    engine._remaining = 1
    return engine.tick()
