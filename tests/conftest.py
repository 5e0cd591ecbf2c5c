import os

# headless SDL so pygame works without a window or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


@pytest.fixture
def make_surface():
    def _make(w, h, colour=(40, 120, 60, 255)):
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        surf.fill(colour)
        return surf
    return _make
