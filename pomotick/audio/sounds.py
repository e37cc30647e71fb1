"""Timer cue sounds: numpy synthesis, played through QSoundEffect.

Each ``Notification`` the engine emits has one cue, described as a
short list of notes.  Cues are rendered to 16-bit mono WAV at startup
and cached in the per-user cache directory.

Cues
----
- START     three rising notes (C5 E5 G5)
- PAUSE     two falling notes (G4 D4)
- COMPLETE  rising arpeggio resolving on a held C6
"""

from __future__ import annotations

import io
import logging
import os
import wave
from pathlib import Path
from typing import NamedTuple

import numpy as np

from PyQt6.QtCore import QObject, QStandardPaths, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..timer.engine import Notification

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


class Note(NamedTuple):
    freq: float       # Hz
    length: float     # seconds of tone
    gap: float = 0.0  # seconds of silence after the tone


CUES: dict[Notification, tuple[Note, ...]] = {
    Notification.START: (
        Note(523.25, 0.12, 0.03),
        Note(659.25, 0.12, 0.03),
        Note(783.99, 0.12, 0.08),
    ),
    Notification.PAUSE: (
        Note(392.00, 0.14, 0.04),
        Note(293.66, 0.20, 0.05),
    ),
    Notification.COMPLETE: (
        Note(523.25, 0.10, 0.02),
        Note(659.25, 0.10, 0.02),
        Note(783.99, 0.10, 0.02),
        Note(1046.50, 0.35),
    ),
}


def default_sounds_dir() -> Path:
    base = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.CacheLocation
    )
    return Path(base or Path.home() / ".cache" / "pomotick") / "sounds"


# ═══════════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _tone(note: Note, volume: float = 0.5) -> np.ndarray:
    """One enveloped sine note followed by its trailing silence.

    The envelope ramps up over the first 10% of the tone and fades out
    over the last 40%, so consecutive notes never click.
    """
    n = int(SAMPLE_RATE * note.length)
    t = np.arange(n) / SAMPLE_RATE
    rise = max(1, n // 10)
    fall = max(1, (n * 2) // 5)
    env = np.minimum(
        np.minimum(np.arange(n) / rise, 1.0),
        np.minimum((n - 1 - np.arange(n)) / fall, 1.0),
    )
    samples = np.sin(2 * np.pi * note.freq * t) * env * volume
    return np.concatenate([samples, np.zeros(int(SAMPLE_RATE * note.gap))])


def render_cue(notification: Notification) -> bytes:
    """WAV bytes for the cue played on *notification*."""
    samples = np.concatenate([_tone(note) for note in CUES[notification]])
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


def _write_atomic(path: Path, data: bytes) -> None:
    tmp = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    tmp.write_bytes(data)
    os.replace(tmp, path)


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Notification sink: one ``QSoundEffect`` per cue.

    If the cache directory cannot be written the manager stays silent
    instead of failing; the timer works the same without sound.

    Usage::

        mgr = SoundManager(parent=self)
        driver.notified.connect(mgr.notify)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self.enabled = True
        self._volume = 70
        self._effects: dict[Notification, QSoundEffect] = {}

        sounds_dir = sounds_dir or default_sounds_dir()
        for notification in CUES:
            path = self._cache_cue(sounds_dir, notification)
            if path is not None:
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                self._effects[notification] = effect
        self.set_volume(self._volume)

    @property
    def volume(self) -> int:
        return self._volume

    def set_volume(self, level: int) -> None:
        """0-100, clamped."""
        self._volume = max(0, min(level, 100))
        for effect in self._effects.values():
            effect.setVolume(self._volume / 100.0)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def notify(self, notification: Notification) -> None:
        """Play the cue for *notification*; unknown cues are ignored."""
        effect = self._effects.get(notification)
        if self.enabled and effect is not None:
            effect.play()

    @staticmethod
    def _cache_cue(sounds_dir: Path, notification: Notification) -> Path | None:
        # Rendered every launch; a cached file that differs is overwritten.
        path = sounds_dir / f"{notification.value}.wav"
        data = render_cue(notification)
        try:
            sounds_dir.mkdir(parents=True, exist_ok=True)
            if not path.is_file() or path.read_bytes() != data:
                _write_atomic(path, data)
        except OSError as exc:
            logger.warning("Sound cue %s unavailable: %s", notification.value, exc)
            return None
        return path
