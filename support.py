# support.py
import logging
import os

import numpy as np
import pygame

from constants import SHADOW_ALPHA

log = logging.getLogger(__name__)


class AssetError(Exception):
    """Base for everything that can go wrong while loading assets."""


class FatalAssetError(AssetError):
    """A required image is missing or cannot be decoded."""


class AudioLoadError(AssetError):
    """Music could not be opened, decoded or played."""


def load_image(path: str) -> pygame.Surface:
    """Load an image, converted to the display format once a window exists."""
    if not os.path.isfile(path):
        raise FatalAssetError(f"image not found: {path}")
    try:
        surf = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        raise FatalAssetError(f"failed to decode image {path}: {e}") from e
    if pygame.display.get_surface() is not None:
        surf = surf.convert_alpha()
    log.info("Loaded %s (%dx%d)", path, surf.get_width(), surf.get_height())
    return surf


def scale_image(surf: pygame.Surface, w: int, h: int) -> pygame.Surface:
    """Return a copy of ``surf`` resized to exactly w x h (keeps per-pixel alpha)."""
    w, h = max(1, int(w)), max(1, int(h))
    if surf.get_size() == (w, h):
        return surf.copy()
    if surf.get_bitsize() not in (24, 32):
        # smoothscale only takes 24/32-bit surfaces (e.g. palette PNGs)
        return pygame.transform.scale(surf, (w, h))
    return pygame.transform.smoothscale(surf, (w, h))


def rounded_rect_mask(w: int, h: int, radius: int, alpha: int = 255) -> np.ndarray:
    """Alpha mask of a w x h rectangle with its four corners rounded off.

    Indexed ``[x, y]`` like ``pygame.surfarray``. Inside each radius x radius
    corner block, pixels further than ``radius`` from the block's inner corner
    are 0; everything else is ``alpha``.
    """
    mask = np.full((w, h), alpha, dtype=np.uint8)
    r = max(0, min(radius, w, h))
    if r == 0:
        return mask
    d = np.arange(r) - r
    outside = (d[:, None] ** 2 + d[None, :] ** 2) > r * r
    # the flipped views write through to mask: one per corner
    for view in (mask, mask[::-1, :], mask[:, ::-1], mask[::-1, ::-1]):
        view[:r, :r][outside] = 0
    return mask


def make_shadow(w: int, h: int) -> pygame.Surface:
    """Semi-transparent black pill used as the player's drop shadow."""
    w, h = max(1, w), max(1, h)
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    surf.fill((0, 0, 0, SHADOW_ALPHA))
    alpha = pygame.surfarray.pixels_alpha(surf)
    alpha[:, :] = rounded_rect_mask(w, h, h // 2, SHADOW_ALPHA)
    del alpha  # unlock the surface
    return surf
