"""Tests for settings defaults and the sound notification sink.

Covers:
- Settings dataclass defaults and conversion to a Configuration
- WAV rendering for each cue
- SoundManager per-user caching, unwritable caches, volume and routing
"""

from __future__ import annotations

import io
import wave

import numpy as np
import pytest
from PyQt6.QtCore import QStandardPaths

from pomotick.errors import InvalidConfiguration
from pomotick.settings import Settings, minutes_to_seconds
from pomotick.audio.sounds import (
    SoundManager,
    CUES,
    Note,
    SAMPLE_RATE,
    default_sounds_dir,
    render_cue,
    _tone,
)
from pomotick.timer.engine import Notification


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettings:
    def test_timer_defaults(self):
        s = Settings()
        assert s.work_duration == 25 * 60
        assert s.short_break_duration == 5 * 60
        assert s.long_break_duration == 15 * 60

    def test_audio_defaults(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_to_configuration(self):
        cfg = Settings(work_duration=minutes_to_seconds(50)).to_configuration()
        assert cfg.work_duration == 3000
        assert cfg.long_break_duration == 900

    def test_to_configuration_rejects_bad_duration(self):
        with pytest.raises(InvalidConfiguration):
            Settings(short_break_duration=0).to_configuration()

    def test_minutes_to_seconds(self):
        assert minutes_to_seconds(25) == 1500


# ═══════════════════════════════════════════════════════════════════════
#  SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


def _read_wav(data: bytes):
    with wave.open(io.BytesIO(data), "rb") as wf:
        return (
            wf.getnchannels(), wf.getsampwidth(), wf.getframerate(),
            np.frombuffer(wf.readframes(wf.getnframes()), dtype=np.int16),
        )


class TestSynthesis:
    @pytest.mark.parametrize("notification", list(Notification))
    def test_valid_mono_pcm(self, notification):
        channels, width, rate, pcm = _read_wav(render_cue(notification))
        assert channels == 1
        assert width == 2
        assert rate == SAMPLE_RATE
        assert len(pcm) > 0

    def test_every_notification_has_a_cue(self):
        assert set(CUES) == set(Notification)

    def test_length_matches_notes(self):
        _, _, _, pcm = _read_wav(render_cue(Notification.PAUSE))
        expected = sum(
            int(SAMPLE_RATE * n.length) + int(SAMPLE_RATE * n.gap)
            for n in CUES[Notification.PAUSE]
        )
        assert len(pcm) == expected

    def test_tone_fades_in_and_out(self):
        tone = _tone(Note(440.0, 0.1))
        assert tone[0] == pytest.approx(0.0)
        assert tone[-1] == pytest.approx(0.0, abs=1e-9)
        assert np.abs(tone).max() <= 0.5

    def test_tone_appends_gap(self):
        tone = _tone(Note(440.0, 0.1, 0.05))
        gap = int(SAMPLE_RATE * 0.05)
        assert not tone[-gap:].any()


# ═══════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════


def _record_plays(mgr: SoundManager, monkeypatch) -> list:
    """Replace each effect's play() with a recorder."""
    played: list = []
    for notification, effect in mgr._effects.items():
        monkeypatch.setattr(
            effect, "play", lambda n=notification: played.append(n),
        )
    return played


@pytest.mark.usefixtures("qapp")
class TestSoundManager:
    def test_wav_files_cached(self, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        for notification in Notification:
            path = tmp_path / f"{notification.value}.wav"
            assert path.read_bytes() == render_cue(notification)

    def test_identical_files_not_rewritten(self, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        path = tmp_path / "start.wav"
        mtime = path.stat().st_mtime_ns
        SoundManager(sounds_dir=tmp_path)
        assert path.stat().st_mtime_ns == mtime

    def test_stale_file_replaced(self, tmp_path):
        path = tmp_path / "complete.wav"
        path.write_bytes(b"truncated")
        SoundManager(sounds_dir=tmp_path)
        assert path.read_bytes() == render_cue(Notification.COMPLETE)

    def test_no_temp_files_left(self, tmp_path):
        SoundManager(sounds_dir=tmp_path)
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "complete.wav", "pause.wav", "start.wav",
        ]

    def test_unwritable_cache_runs_silent(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        mgr = SoundManager(sounds_dir=blocker / "sounds")
        assert mgr._effects == {}
        mgr.notify(Notification.START)

    def test_default_dir_is_per_user_cache(self, tmp_path, monkeypatch):
        class FakePaths:
            StandardLocation = QStandardPaths.StandardLocation

            @staticmethod
            def writableLocation(location):
                assert location == QStandardPaths.StandardLocation.CacheLocation
                return str(tmp_path / "user-cache")

        monkeypatch.setattr("pomotick.audio.sounds.QStandardPaths", FakePaths)
        assert default_sounds_dir() == tmp_path / "user-cache" / "sounds"

    def test_volume_clamped(self, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_volume(150)
        assert mgr.volume == 100
        mgr.set_volume(-10)
        assert mgr.volume == 0

    def test_volume_applied_to_effects(self, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_volume(40)
        for effect in mgr._effects.values():
            assert effect.volume() == pytest.approx(0.4, abs=0.01)

    def test_notify_plays_matching_effect(self, tmp_path, monkeypatch):
        mgr = SoundManager(sounds_dir=tmp_path)
        played = _record_plays(mgr, monkeypatch)
        mgr.notify(Notification.COMPLETE)
        mgr.notify(Notification.START)
        assert played == [Notification.COMPLETE, Notification.START]

    def test_unknown_notification_plays_nothing(self, tmp_path, monkeypatch):
        mgr = SoundManager(sounds_dir=tmp_path)
        played = _record_plays(mgr, monkeypatch)
        mgr.notify("does_not_exist")
        assert played == []

    def test_disabled_plays_nothing(self, tmp_path, monkeypatch):
        mgr = SoundManager(sounds_dir=tmp_path)
        played = _record_plays(mgr, monkeypatch)
        mgr.set_enabled(False)
        mgr.notify(Notification.START)
        assert played == []
        mgr.set_enabled(True)
        mgr.notify(Notification.START)
        assert played == [Notification.START]
