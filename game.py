import logging
from typing import Dict, FrozenSet, Optional, Tuple

import pygame

import camera
from audio import MusicLoop
from camera import DrawCommand, WorldState
from constants import FPS, CLEAR_COLOUR, CAMERA_FOLLOW
from support import scale_image, make_shadow

log = logging.getLogger(__name__)

# pygame key -> name understood by camera.update
KEY_NAMES = {
    pygame.K_UP: "up", pygame.K_DOWN: "down",
    pygame.K_LEFT: "left", pygame.K_RIGHT: "right",
    pygame.K_w: "w", pygame.K_a: "a", pygame.K_s: "s", pygame.K_d: "d",
}


def held_keys(pressed) -> FrozenSet[str]:
    """Names of the movement keys currently down in a ``pygame.key.get_pressed()`` result."""
    return frozenset(name for key, name in KEY_NAMES.items() if pressed[key])


class Game:
    def __init__(self, screen: pygame.Surface, background: pygame.Surface,
                 sprite: pygame.Surface, player_wh: Tuple[int, int],
                 music: Optional[MusicLoop] = None):
        self.screen = screen
        self.clock = pygame.time.Clock()
        self.music = music
        self.follow = CAMERA_FOLLOW

        self.bg = background
        self.bg_size = background.get_size()
        tile = camera.derive_tile_size(*self.bg_size)
        pw, ph = player_wh

        # static assets, never modified after this point
        self.sprite = scale_image(sprite, pw, ph)
        self.shadow = make_shadow(*camera.shadow_size(pw, ph))
        self._scaled: Dict[Tuple[str, float], pygame.Surface] = {}

        self.state: WorldState = camera.initial_state(self.bg_size, tile, (pw, ph))
        log.info("Map %dx%d, tile %dx%d, player %dx%d",
                 self.bg_size[0], self.bg_size[1], tile[0], tile[1], pw, ph)

    # ---------- engine hooks ----------
    def update(self, held: FrozenSet[str]) -> None:
        self.state = camera.update(self.state, held, self.bg_size, follow=self.follow)

    def draw(self, screen: pygame.Surface) -> None:
        screen.fill(CLEAR_COLOUR)
        for cmd in camera.draw_commands(self.state, screen.get_size()):
            if cmd.asset == "background":
                self._draw_background(screen, cmd)
            else:
                self._draw_sprite(screen, cmd)

    def layout(self, outside_w: int, outside_h: int) -> Tuple[int, int]:
        return outside_w, outside_h

    def run_step(self) -> bool:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                return False
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                return False
            if ev.type == pygame.VIDEORESIZE:
                log.debug("Window resized to %dx%d", *self.layout(ev.w, ev.h))
        if self.music:
            self.music.poll()
        self.update(held_keys(pygame.key.get_pressed()))
        self.screen = pygame.display.get_surface() or self.screen
        self.draw(self.screen)
        pygame.display.flip()
        self.clock.tick(FPS)
        return True

    # ---------- drawing helpers ----------
    def _draw_background(self, screen: pygame.Surface, cmd: DrawCommand) -> None:
        # only the viewport is scaled; it already covers the whole screen
        sx, sy, sw, sh = cmd.source
        region = self.bg.subsurface(pygame.Rect(sx, sy, sw, sh).clip(self.bg.get_rect()))
        scaled = pygame.transform.scale(
            region, (round(region.get_width() * cmd.scale), round(region.get_height() * cmd.scale)))
        screen.blit(scaled, (round(cmd.x + sx * cmd.scale), round(cmd.y + sy * cmd.scale)))

    def _draw_sprite(self, screen: pygame.Surface, cmd: DrawCommand) -> None:
        key = (cmd.asset, cmd.scale)
        img = self._scaled.get(key)
        if img is None:
            src = self.sprite if cmd.asset == "player" else self.shadow
            img = pygame.transform.scale(
                src, (max(1, round(src.get_width() * cmd.scale)),
                      max(1, round(src.get_height() * cmd.scale))))
            if cmd.alpha < 1.0:
                img.set_alpha(round(255 * cmd.alpha))
            # a new scale means the window changed; drop the old sizes
            self._scaled = {k: v for k, v in self._scaled.items() if k[1] == cmd.scale}
            self._scaled[key] = img
        screen.blit(img, (round(cmd.x), round(cmd.y)))
