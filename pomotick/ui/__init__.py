"""UI package."""

from .timer_widget import TimerWidget

__all__ = [
    "TimerWidget",
]
