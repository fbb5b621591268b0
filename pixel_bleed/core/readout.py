"""
Readout - Paint an output texture from a flooded Voronoi grid

Output modes:
- bleed:    every pixel takes the colour of its nearest seed, fully opaque
- coverage: white where a seed was found, black elsewhere
- uv:       nearest seed position encoded into red (x) and green (y)
- distance: 255 at a seed, fading to 0 at 255 pixels away
"""

import numpy as np
from enum import Enum
from typing import Tuple

from .edges import EdgeMode, resolve_array
from .grid import NO_SEED, VoronoiGrid


class OutputMode(Enum):
    """What to paint from the flooded grid"""
    BLEED = "bleed"
    COVERAGE = "coverage"
    UV = "uv"
    DISTANCE = "distance"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: 'str | OutputMode') -> 'OutputMode':
        """Parse an output mode name (case-insensitive)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown output mode: {value!r} (expected one of: {valid})") from None


READOUT_MESSAGES = {
    OutputMode.BLEED: "Bleeding pixels...",
    OutputMode.UV: "Plotting closest UVs...",
    OutputMode.COVERAGE: "Plotting Voronoi coverage...",
    OutputMode.DISTANCE: "Plotting distance field...",
}


def _round(values: np.ndarray) -> np.ndarray:
    """Round half away from zero (inputs are never negative)"""
    return np.floor(values + 0.5)


def resolved_seeds(
    grid: VoronoiGrid,
    edge_mode: EdgeMode = EdgeMode.ZERO
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Look up every cell's seed through the edge resolver.

    Returns:
        (seed_x, seed_y, resolved) arrays of shape (height, width);
        seed coordinates are NO_SEED where resolved is False
    """
    ys, xs = np.indices(grid.shape, dtype=np.int64)
    rx, ry, valid = resolve_array(xs, ys, grid.width, grid.height, EdgeMode.parse(edge_mode))

    seed_x = np.where(valid, grid.seed_x[ry, rx], NO_SEED)
    seed_y = np.where(valid, grid.seed_y[ry, rx], NO_SEED)
    return seed_x, seed_y, seed_x != NO_SEED


def distance_field(grid: VoronoiGrid, edge_mode: EdgeMode = EdgeMode.ZERO) -> np.ndarray:
    """Euclidean distance from each cell to its seed (NaN where there is none)"""
    seed_x, seed_y, resolved = resolved_seeds(grid, edge_mode)
    ys, xs = np.indices(grid.shape, dtype=np.int64)

    distance_x = (seed_x - xs).astype(np.float64)
    distance_y = (seed_y - ys).astype(np.float64)
    distance = np.sqrt(distance_x * distance_x + distance_y * distance_y)
    return np.where(resolved, distance, np.nan)


def render(
    pixels: np.ndarray,
    grid: VoronoiGrid,
    mode: OutputMode = OutputMode.BLEED,
    edge_mode: EdgeMode = EdgeMode.ZERO
) -> np.ndarray:
    """
    Paint the output texture.

    Args:
        pixels: Source RGBA array (height, width, 4); only read in bleed mode
        grid: Flooded grid of the same size
        mode: Output mode
        edge_mode: The edge mode the grid was flooded with

    Returns:
        New RGBA uint8 array
    """
    mode = OutputMode.parse(mode)

    if pixels.shape[:2] != grid.shape:
        raise ValueError(
            f"Pixel array {pixels.shape[1]}x{pixels.shape[0]} does not match "
            f"grid {grid.width}x{grid.height}"
        )

    seed_x, seed_y, resolved = resolved_seeds(grid, edge_mode)
    output = np.zeros((grid.height, grid.width, 4), dtype=np.uint8)

    if mode is OutputMode.BLEED:
        output[resolved, :3] = pixels[seed_y[resolved], seed_x[resolved], :3]
        output[resolved, 3] = 255
        return output

    # The remaining modes are fully opaque, black where nothing was found
    output[:, :, 3] = 255

    if mode is OutputMode.COVERAGE:
        output[resolved, :3] = 255

    elif mode is OutputMode.UV:
        u = _round(seed_x * 255.0 / grid.width)
        v = _round(seed_y * 255.0 / grid.height)
        output[resolved, 0] = u[resolved].astype(np.uint8)
        output[resolved, 1] = v[resolved].astype(np.uint8)

    elif mode is OutputMode.DISTANCE:
        distance = distance_field(grid, edge_mode)
        value = 255 - _round(np.clip(distance[resolved], 0.0, 255.0))
        output[resolved, :3] = value.astype(np.uint8)[:, None]

    return output
