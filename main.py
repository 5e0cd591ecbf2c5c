import logging
import sys

import pygame

import camera
from audio import MusicLoop
from constants import (
    SCREEN_W, SCREEN_H, WINDOW_TITLE,
    BACKGROUND_PATH, PLAYER_SPRITE_PATH, MUSIC_PATH, SAMPLE_RATE,
)
from game import Game
from support import FatalAssetError, load_image

log = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    pygame.mixer.pre_init(frequency=SAMPLE_RATE)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    # for fullscreen
    # screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.FULLSCREEN | pygame.SCALED)

    try:
        background = load_image(BACKGROUND_PATH)
        sprite = load_image(PLAYER_SPRITE_PATH)
    except FatalAssetError as e:
        log.critical("%s", e)
        pygame.quit()
        sys.exit(1)

    size = camera.player_size(screen.get_size())
    music = MusicLoop(MUSIC_PATH, SAMPLE_RATE)
    music.start()

    game = Game(screen, background, sprite, (size, size), music)
    running = True
    while running:
        running = game.run_step()

    music.stop()
    log.info("Exiting.")
    pygame.quit()


if __name__ == "__main__":
    main()
