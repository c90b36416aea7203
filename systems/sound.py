import logging
from enum import Enum

import numpy as np
import pygame

from systems.system import GameListener, System

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050


class Volume(Enum):
    MUTE = 0.0
    LOW = 0.25
    MEDIUM = 0.5
    HIGH = 1.0


class SoundEffect(Enum):
    # (start frequency in Hz, end frequency in Hz, duration in seconds)
    EAT = (660, 990, 0.08)
    DIE = (440, 110, 0.5)
    CLICK = (1500, 1500, 0.02)


def synthesize(start_hz: float, end_hz: float, duration: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Sine sweep with a linear fade out, as 16 bit mono samples."""
    n_samples = max(int(sample_rate * duration), 1)
    frequencies = np.linspace(start_hz, end_hz, n_samples)
    phase = 2 * np.pi * np.cumsum(frequencies) / sample_rate
    envelope = np.linspace(1.0, 0.0, n_samples)
    wave = np.sin(phase) * envelope * 0.5 * np.iinfo(np.int16).max
    return wave.astype(np.int16)


class SoundSystem(System, GameListener):
    """Plays short feedback sounds. Muting is owned here, not by the game."""

    def __init__(self, volume: Volume = Volume.LOW):
        if not isinstance(volume, Volume):
            raise ValueError(f"Volume must be of type {Volume.__name__}")
        self.volume = volume
        self.enabled = False
        self._sounds: dict[SoundEffect, pygame.mixer.Sound] = {}

    def setup(self):
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            sample_rate, _, channels = pygame.mixer.get_init()
            for effect in SoundEffect:
                samples = synthesize(*effect.value, sample_rate=sample_rate)
                if channels > 1:
                    samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
                self._sounds[effect] = pygame.sndarray.make_sound(samples)
        except pygame.error as e:
            logger.warning(f"Sound disabled, audio device not available: {e}")
            self._sounds.clear()
            return

        self.enabled = True

    def close(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False

    @property
    def muted(self) -> bool:
        return self.volume == Volume.MUTE

    def toggle_mute(self) -> Volume:
        self.volume = Volume.LOW if self.muted else Volume.MUTE
        logger.info(f"Sound volume set to {self.volume.name}")
        self.play(SoundEffect.CLICK)
        return self.volume

    def play(self, effect: SoundEffect):
        if not self.enabled or self.muted:
            return

        sound = self._sounds[effect]
        sound.set_volume(self.volume.value)
        sound.play()

    # Listener hooks
    def on_eat(self):
        self.play(SoundEffect.EAT)

    def on_die(self):
        self.play(SoundEffect.DIE)

    def on_control_click(self):
        self.play(SoundEffect.CLICK)
