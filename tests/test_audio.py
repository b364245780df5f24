"""
Tests for snake.audio tone synthesis. No audio device is opened.
"""

import numpy as np

from snake.audio import CuePlayer, synth_tone
from snake.game import Transition


def test_tone_length_and_dtype():
    tone = synth_tone(440.0, 100, sample_rate=8000)
    assert tone.dtype == np.int16
    assert tone.shape == (800,)


def test_tone_fades_out():
    tone = synth_tone(440.0, 200, sample_rate=8000)
    assert np.abs(tone[:200]).max() > np.abs(tone[-200:]).max()


def test_volume_is_clipped():
    tone = synth_tone(440.0, 50, sample_rate=8000, volume=5.0)
    assert np.abs(tone.astype(np.int32)).max() <= np.iinfo(np.int16).max


def test_sweep():
    tone = synth_tone(220.0, 50, sample_rate=8000, end_freq_hz=80.0)
    assert tone.shape == (400,)


def test_disabled_player_is_silent():
    cues = CuePlayer(enabled=False)
    assert not cues.enabled
    cues.play(Transition.ATE)
    cues.play(Transition.CRASHED)


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_each_cue_plays_its_own_sound():
    cues = CuePlayer(enabled=False)
    eat, crash = FakeSound(), FakeSound()
    cues.sounds = {Transition.ATE: eat, Transition.CRASHED: crash}
    assert cues.enabled

    cues.play(Transition.ATE)
    assert (eat.plays, crash.plays) == (1, 0)
    cues.play(Transition.CRASHED)
    assert (eat.plays, crash.plays) == (1, 1)
    cues.play(Transition.MOVED)
    cues.play(Transition.NOOP)
    assert (eat.plays, crash.plays) == (1, 1)
