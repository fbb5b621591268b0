"""
Seeding - Build the initial Voronoi grid from texture data
"""

import numpy as np

from .grid import VoronoiGrid


def seed_from_mask(mask: np.ndarray) -> VoronoiGrid:
    """Seed every True cell of a (height, width) mask with its own coordinate"""
    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise ValueError(f"Seed mask must be 2D, got shape {mask.shape}")

    height, width = mask.shape
    grid = VoronoiGrid(width, height)

    ys, xs = np.indices(mask.shape, dtype=np.int64)
    flat = mask.ravel()
    grid.closest[flat, 0] = xs.ravel()[flat]
    grid.closest[flat, 1] = ys.ravel()[flat]
    return grid


def seed_from_alpha(pixels: np.ndarray, preserve_above: int = 0) -> VoronoiGrid:
    """
    Seed the pixels that are opaque enough to keep.

    Args:
        pixels: RGBA array (height, width, 4)
        preserve_above: Alpha threshold; pixels with alpha strictly greater
            are seeds, everything else gets filled in

    Returns:
        Seeded VoronoiGrid
    """
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"Expected an RGBA array (H, W, 4), got shape {pixels.shape}")

    if not 0 <= int(preserve_above) <= 255:
        raise ValueError(f"preserve_above must be 0-255, got {preserve_above}")

    return seed_from_mask(pixels[:, :, 3] > int(preserve_above))
