# audio.py
from __future__ import annotations

import logging

import numpy as np  # type: ignore
import pygame       # type: ignore

from .game import Transition

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# (start Hz, end Hz, duration ms)
EAT_TONE = (660.0, 990.0, 90)
CRASH_TONE = (220.0, 80.0, 320)


def synth_tone(
    freq_hz: float,
    duration_ms: int,
    sample_rate: int = SAMPLE_RATE,
    volume: float = 0.4,
    end_freq_hz: float | None = None,
) -> np.ndarray:
    """
    Mono int16 sine sweep from freq_hz to end_freq_hz with a linear fade-out.
    """
    n = max(int(sample_rate * duration_ms / 1000), 1)
    end = freq_hz if end_freq_hz is None else end_freq_hz
    freqs = np.linspace(freq_hz, end, n, dtype=np.float64)
    # integrate frequency so the sweep has no phase jumps
    phase = 2.0 * np.pi * np.cumsum(freqs) / sample_rate
    envelope = np.linspace(1.0, 0.0, n)
    wave = np.sin(phase) * envelope * np.clip(volume, 0.0, 1.0)
    return (wave * np.iinfo(np.int16).max).astype(np.int16)


class CuePlayer:
    """Plays a short tone for ATE and CRASHED transitions; silent otherwise."""

    def __init__(self, enabled: bool = True):
        self.sounds: dict[Transition, pygame.mixer.Sound] = {}
        if not enabled:
            return
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("Audio unavailable, sound disabled: %s", exc)
            return

        rate, _size, channels = pygame.mixer.get_init()
        for transition, (start, end, ms) in (
            (Transition.ATE, EAT_TONE),
            (Transition.CRASHED, CRASH_TONE),
        ):
            samples = synth_tone(start, ms, sample_rate=rate, end_freq_hz=end)
            if channels > 1:
                samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
            self.sounds[transition] = pygame.sndarray.make_sound(samples)

    @property
    def enabled(self) -> bool:
        return bool(self.sounds)

    def play(self, transition: Transition) -> None:
        sound = self.sounds.get(transition)
        if sound is not None:
            sound.play()
