"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from pixel_bleed.core.grid import VoronoiGrid


def make_rgba(width: int, height: int, opaque: dict | None = None) -> np.ndarray:
    """Transparent RGBA array with the given {(x, y): (r, g, b, a)} pixels set."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for (x, y), colour in (opaque or {}).items():
        pixels[y, x] = colour
    return pixels


def make_grid(width: int, height: int, seeds) -> VoronoiGrid:
    """Grid with each listed coordinate seeded with itself."""
    grid = VoronoiGrid(width, height)
    for seed in seeds:
        grid.set_closest(seed, seed)
    return grid


def brute_force_distances(width: int, height: int, seeds) -> np.ndarray:
    """Exact distance from every cell to its nearest seed."""
    ys, xs = np.indices((height, width))
    best = np.full((height, width), np.inf)
    for sx, sy in seeds:
        best = np.minimum(best, np.sqrt((xs - sx) ** 2 + (ys - sy) ** 2))
    return best


@pytest.fixture
def red_dot_png(tmp_path):
    """9x7 transparent PNG with a single opaque red pixel at (4, 3)."""
    pixels = make_rgba(9, 7, {(4, 3): (255, 0, 0, 255)})
    path = tmp_path / "red_dot.png"
    Image.fromarray(pixels).save(path, "PNG")
    return path


@pytest.fixture
def two_colour_png(tmp_path):
    """16x4 PNG: red pixel on the left, blue pixel on the right, rest transparent."""
    pixels = make_rgba(16, 4, {
        (1, 1): (255, 0, 0, 255),
        (14, 2): (0, 0, 255, 255),
    })
    path = tmp_path / "two_colour.png"
    Image.fromarray(pixels).save(path, "PNG")
    return path
