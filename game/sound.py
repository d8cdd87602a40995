"""
Audio cues - short synthesized tones played through pygame.mixer
"""

import logging
import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


class ToneCue:
    """
    A sine tone, optionally sweeping to end_frequency

    The pygame Sound is built on first play. play() raises pygame.error when
    the mixer is not available; callers treat that as non-fatal.
    """
    def __init__(self, frequency, duration, volume=0.2, end_frequency=None):
        self.frequency = frequency
        self.duration = duration  # seconds
        self.volume = volume
        self.end_frequency = end_frequency
        self._sound = None

    def samples(self, channels=2, sample_rate=SAMPLE_RATE):
        """16-bit samples for this tone, one column per channel"""
        n_samples = int(sample_rate * self.duration)

        end = self.end_frequency if self.end_frequency is not None else self.frequency
        freq = np.linspace(self.frequency, end, n_samples)
        phase = 2 * np.pi * np.cumsum(freq) / sample_rate
        wave = np.sin(phase)

        # Short release to avoid clicks
        release = min(n_samples, int(0.02 * sample_rate))
        if release:
            wave[-release:] *= np.linspace(1, 0, release)

        wave = (wave * self.volume * 32767).astype(np.int16)
        if channels == 1:
            return wave
        return np.column_stack([wave] * channels)

    def play(self):
        mixer_state = pygame.mixer.get_init()
        if mixer_state is None:
            raise pygame.error("mixer not initialized")
        if self._sound is None:
            self._sound = pygame.sndarray.make_sound(self.samples(mixer_state[2], mixer_state[0]))
        self._sound.play()


class SilentCue:
    """Cue that plays nothing"""
    def play(self):
        pass


def default_sounds():
    """Cues for bug kills, reaching the exit and dying"""
    return {
        'kill': ToneCue(800, 0.1, volume=0.1),
        'exit': ToneCue(440, 0.5, volume=0.2, end_frequency=880),
        'death': ToneCue(220, 0.4, volume=0.2, end_frequency=110),
    }


def silent_sounds():
    return {'kill': SilentCue(), 'exit': SilentCue(), 'death': SilentCue()}


def play_cue(sound, event):
    """
    Play a cue without letting audio failures interrupt gameplay

    Returns:
        True if the cue started
    """
    if sound is None:
        return False
    try:
        sound.play()
        return True
    except Exception as e:
        logger.warning("Sound for %s failed: %s", event, e)
        return False
