# audio.py
import logging
import os

import pygame

from constants import MUSIC_PATH, SAMPLE_RATE
from support import AudioLoadError

log = logging.getLogger(__name__)


class MusicLoop:
    """Background track replayed whenever it finishes.

    Looping is done by polling once per frame rather than by the mixer, so a
    short gap at the loop point is expected.
    """
    def __init__(self, path: str = MUSIC_PATH, sample_rate: int = SAMPLE_RATE, volume: float = 1.0):
        self.path = path
        self.sample_rate = sample_rate
        self.volume = volume
        self.enabled = False

    def _open(self) -> None:
        if not os.path.isfile(self.path):
            raise AudioLoadError(f"music not found: {self.path}")
        try:
            current = pygame.mixer.get_init()
            if current is not None and current[0] != self.sample_rate:
                # pygame.init() opens the mixer at its default rate
                pygame.mixer.quit()
                current = None
            if current is None:
                pygame.mixer.init(frequency=self.sample_rate)
        except pygame.error as e:
            raise AudioLoadError(f"failed to open audio device: {e}") from e
        try:
            pygame.mixer.music.load(self.path)
        except pygame.error as e:
            raise AudioLoadError(f"failed to decode music {self.path}: {e}") from e

    def start(self) -> bool:
        """Load and play the track; on any audio failure warn and stay silent."""
        try:
            self._open()
            pygame.mixer.music.set_volume(self.volume)
            pygame.mixer.music.play()
        except (AudioLoadError, pygame.error) as e:
            log.warning("audio disabled: %s", e)
            self.enabled = False
            return False
        self.enabled = True
        log.info("Playing %s at %d Hz", self.path, self.sample_rate)
        return True

    def poll(self) -> None:
        if not self.enabled:
            return
        if not pygame.mixer.music.get_busy():
            pygame.mixer.music.rewind()
            pygame.mixer.music.play()

    def stop(self) -> None:
        if self.enabled:
            pygame.mixer.music.stop()
            self.enabled = False
