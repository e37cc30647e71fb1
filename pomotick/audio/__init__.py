"""Audio package."""

from .sounds import SoundManager, CUES, render_cue

__all__ = [
    "SoundManager",
    "CUES",
    "render_cue",
]
