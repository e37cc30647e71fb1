"""PomoTick — a single-session Pomodoro timer."""

__version__ = "0.1.0"
