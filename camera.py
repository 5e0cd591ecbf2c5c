# camera.py
"""Camera/player controller.

Everything here is plain arithmetic on a ``WorldState``; nothing touches
pygame, so the frame loop in ``game.py`` is the only place that knows about
surfaces and keys.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from math import ceil
from typing import FrozenSet, List, NamedTuple, Optional, Tuple

from constants import (
    TARGET_TILE, PLAYER_SPEED, PAN_TILES, PLAYER_SCREEN_FRACTION,
    SHADOW_W_FRACTION, SHADOW_H_FRACTION, SHADOW_OFFSET_Y, SHADOW_OPACITY,
)

# key name -> (dx, dy) in player speed units
MOVE_KEYS = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}
# key name -> (dx, dy) in tiles
PAN_KEYS = {"right": (1, 0), "left": (-1, 0), "down": (0, 1), "up": (0, -1)}


@dataclass(frozen=True)
class WorldState:
    player_x: float
    player_y: float
    viewport_x: int
    viewport_y: int
    tile_w: int
    tile_h: int
    player_w: int
    player_h: int


class DrawTransform(NamedTuple):
    scale: float
    offset_x: float
    offset_y: float


class DrawCommand(NamedTuple):
    asset: str                  # "background" | "shadow" | "player"
    x: float
    y: float
    scale: float
    alpha: float = 1.0
    source: Optional[Tuple[int, int, int, int]] = None


def _clamp(v, lo, hi):
    # hi below lo means the thing is bigger than the map: pin it to 0
    hi = max(lo, hi)
    return min(max(v, lo), hi)


# ---------- startup ----------
def derive_tile_size(bg_w: int, bg_h: int, target: int = TARGET_TILE) -> Tuple[int, int]:
    """Split the map into a grid of roughly ``target``-sized tiles and return one tile's size."""
    cols = max(1, ceil(bg_w / target))
    rows = max(1, ceil(bg_h / target))
    tile_w = bg_w // cols
    tile_h = bg_h // rows
    if tile_w <= 0:
        tile_w = bg_w
    if tile_h <= 0:
        tile_h = bg_h
    return tile_w, tile_h


def player_size(window_size: Tuple[int, int], fraction: float = PLAYER_SCREEN_FRACTION) -> int:
    return max(1, int(min(window_size) * fraction))


def initial_state(bg_size: Tuple[int, int], tile_size: Tuple[int, int],
                  player_wh: Tuple[int, int]) -> WorldState:
    """Player in the middle of the first tile, camera already following it."""
    tile_w, tile_h = tile_size
    pw, ph = player_wh
    state = WorldState(
        player_x=float(tile_w // 2 - pw // 2),
        player_y=float(tile_h // 2 - ph // 2),
        viewport_x=0, viewport_y=0,
        tile_w=tile_w, tile_h=tile_h,
        player_w=pw, player_h=ph,
    )
    return update(state, frozenset(), bg_size)


# ---------- per frame ----------
def follow_target(state: WorldState) -> Tuple[int, int]:
    """Viewport top-left that puts the player's centre in the middle of the view."""
    # round() is half-to-even: a centre exactly on a half pixel may go either way
    vx = round(state.player_x + state.player_w / 2 - state.tile_w / 2)
    vy = round(state.player_y + state.player_h / 2 - state.tile_h / 2)
    return vx, vy


def update(state: WorldState, held: FrozenSet[str], bg_size: Tuple[int, int],
           follow: bool = True) -> WorldState:
    bg_w, bg_h = bg_size

    # player movement (diagonals add up, no normalisation)
    px, py = state.player_x, state.player_y
    for key, (dx, dy) in MOVE_KEYS.items():
        if key in held:
            px += dx * PLAYER_SPEED
            py += dy * PLAYER_SPEED
    px = _clamp(px, 0.0, float(bg_w - state.player_w))
    py = _clamp(py, 0.0, float(bg_h - state.player_h))

    # arrow-key panning; camera follow overwrites it on the same frame
    vx, vy = state.viewport_x, state.viewport_y
    for key, (dx, dy) in PAN_KEYS.items():
        if key in held:
            vx += dx * PAN_TILES * state.tile_w
            vy += dy * PAN_TILES * state.tile_h

    moved = replace(state, player_x=px, player_y=py)
    if follow:
        vx, vy = follow_target(moved)

    vx = _clamp(vx, 0, bg_w - state.tile_w)
    vy = _clamp(vy, 0, bg_h - state.tile_h)
    return replace(moved, viewport_x=vx, viewport_y=vy)


# ---------- drawing ----------
def compute_draw_transform(tile_size: Tuple[int, int], screen_size: Tuple[int, int]) -> DrawTransform:
    """Scale the viewport so it covers the whole screen (no bars), centred.

    One axis may overflow the screen; its offset is then negative.
    """
    tile_w, tile_h = tile_size
    sw, sh = screen_size
    scale = max(sw / tile_w, sh / tile_h)
    ox = (sw - tile_w * scale) / 2
    oy = (sh - tile_h * scale) / 2
    return DrawTransform(scale, ox, oy)


def background_position(state: WorldState, t: DrawTransform) -> Tuple[float, float]:
    return (-state.viewport_x * t.scale + t.offset_x,
            -state.viewport_y * t.scale + t.offset_y)


def player_screen_position(state: WorldState, t: DrawTransform) -> Tuple[float, float]:
    return ((state.player_x - state.viewport_x) * t.scale + t.offset_x,
            (state.player_y - state.viewport_y) * t.scale + t.offset_y)


def shadow_size(player_w: int, player_h: int) -> Tuple[int, int]:
    return int(player_w * SHADOW_W_FRACTION), int(player_h * SHADOW_H_FRACTION)


def draw_commands(state: WorldState, screen_size: Tuple[int, int]) -> List[DrawCommand]:
    """Background, shadow, player; back to front."""
    t = compute_draw_transform((state.tile_w, state.tile_h), screen_size)
    bx, by = background_position(state, t)
    px, py = player_screen_position(state, t)
    shw, _ = shadow_size(state.player_w, state.player_h)

    viewport = (state.viewport_x, state.viewport_y, state.tile_w, state.tile_h)
    return [
        DrawCommand("background", bx, by, t.scale, source=viewport),
        DrawCommand("shadow",
                    px + (state.player_w - shw) / 2 * t.scale,
                    py + state.player_h * SHADOW_OFFSET_Y * t.scale,
                    t.scale, alpha=SHADOW_OPACITY),
        DrawCommand("player", px, py, t.scale),
    ]
