"""
Jump Flooding - Approximate discrete Voronoi diagram over a pixel grid

Each round every cell looks at itself and at 8 neighbours `radius` cells
away, keeps the closest seed any of them knows about, and the radius halves
until it reaches 1. After log2(size) + 1 rounds almost every cell knows its
nearest seed; the result can differ from an exact nearest-seed search on a
few pixels near Voronoi boundaries.

Rounds read a frozen grid and write into a second one, so all cells of a
round are computed together as numpy array operations.
"""

import math
import numpy as np
from typing import Callable, List, Optional, Tuple

from .edges import EdgeMode, resolve_array
from .grid import NO_SEED, Coord, VoronoiGrid


# =============================================================================
# Sample pattern
# =============================================================================

CARDINAL_MULT = 1.0
DIAGONAL_MULT = 1.41421356

# (dx, dy, distance multiplier) in radius units. Order decides ties: the
# first candidate with the smallest scaled distance wins.
SAMPLE_OFFSETS: Tuple[Tuple[int, int, float], ...] = (
    (0, 0, 1.0),
    (0, -1, CARDINAL_MULT),
    (0, 1, CARDINAL_MULT),
    (-1, 0, CARDINAL_MULT),
    (1, 0, CARDINAL_MULT),
    (-1, -1, DIAGONAL_MULT),
    (-1, 1, DIAGONAL_MULT),
    (1, -1, DIAGONAL_MULT),
    (1, 1, DIAGONAL_MULT),
)


# =============================================================================
# Radius schedule
# =============================================================================

def initial_search_radius(width: int, height: int) -> int:
    """Half of the smallest power of two >= max(width, height)"""
    size = max(int(width), int(height))
    return (1 << (size - 1).bit_length()) // 2


def search_radii(width: int, height: int) -> List[int]:
    """Every radius the flood will use, in order (e.g. [4, 2, 1] for 5x5)"""
    radius = initial_search_radius(width, height)
    radii = [radius]
    while radius > 1:
        radius //= 2
        radii.append(radius)
    return radii


# =============================================================================
# Propagation
# =============================================================================

def nearest_candidate(
    read: VoronoiGrid,
    position: Coord,
    radius: int,
    edge_mode: EdgeMode
) -> Optional[Tuple[Coord, float]]:
    """
    Pick the best seed for a single cell from one round's samples.

    Returns:
        (seed, scaled distance) of the winner, or None if no sample had a seed
    """
    x, y = position
    best = None

    for dx, dy, multiplier in SAMPLE_OFFSETS:
        seed = read.lookup((x + dx * radius, y + dy * radius), edge_mode)
        if seed is None:
            continue

        distance_x = float(seed[0]) - float(x)
        distance_y = float(seed[1]) - float(y)
        distance = math.sqrt(distance_x * distance_x + distance_y * distance_y) * multiplier

        if best is None or distance < best[1]:
            best = (seed, distance)

    return best


def propagate_round(
    read: VoronoiGrid,
    write: VoronoiGrid,
    radius: int,
    edge_mode: EdgeMode
) -> None:
    """
    Run one jump-flood round from `read` into `write`.

    Cells for which no sample holds a seed are left untouched in `write`.
    """
    if not read.same_shape(write):
        raise ValueError(
            f"Grid size mismatch: read is {read.width}x{read.height}, "
            f"write is {write.width}x{write.height}"
        )

    width, height = read.width, read.height
    ys, xs = np.indices(read.shape, dtype=np.int64)
    read_x = read.seed_x
    read_y = read.seed_y

    best_x = np.full(read.shape, NO_SEED, dtype=np.int64)
    best_y = np.full(read.shape, NO_SEED, dtype=np.int64)
    best_distance = np.full(read.shape, np.inf)

    for dx, dy, multiplier in SAMPLE_OFFSETS:
        rx, ry, valid = resolve_array(xs + dx * radius, ys + dy * radius, width, height, edge_mode)
        candidate_x = np.where(valid, read_x[ry, rx], NO_SEED)
        candidate_y = read_y[ry, rx]
        present = candidate_x != NO_SEED

        distance_x = (candidate_x - xs).astype(np.float64)
        distance_y = (candidate_y - ys).astype(np.float64)
        distance = np.sqrt(distance_x * distance_x + distance_y * distance_y) * multiplier

        better = present & (distance < best_distance)
        best_x = np.where(better, candidate_x, best_x)
        best_y = np.where(better, candidate_y, best_y)
        best_distance = np.where(better, distance, best_distance)

    found = (best_x != NO_SEED).ravel()
    winners = np.stack([best_x.ravel(), best_y.ravel()], axis=1)
    write.closest[found] = winners[found]


def jump_flood(
    grid: VoronoiGrid,
    edge_mode: EdgeMode = EdgeMode.ZERO,
    on_round: Optional[Callable[[int, int], None]] = None
) -> VoronoiGrid:
    """
    Flood seeds across the whole grid.

    Args:
        grid: Seeded grid (left unmodified)
        edge_mode: Border behaviour used for every sample
        on_round: Optional callback(round_index, radius) before each round

    Returns:
        Grid holding each cell's best-found nearest seed
    """
    edge_mode = EdgeMode.parse(edge_mode)
    read = grid.copy()
    write = VoronoiGrid(grid.width, grid.height)

    radius = initial_search_radius(grid.width, grid.height)
    round_index = 0

    while True:
        if on_round is not None:
            on_round(round_index, radius)

        propagate_round(read, write, radius, edge_mode)
        read, write = write, read
        round_index += 1

        if radius <= 1:
            break
        radius //= 2

    return read
