"""
Voronoi Grid - Per-pixel "closest seed" storage

Holds, for every cell of a width x height texture, the coordinate of the
seed it currently believes is nearest, or nothing. No colour data lives here.
"""

import numpy as np
from typing import Optional, Tuple

from .edges import EdgeMode, resolve

Coord = Tuple[int, int]

NO_SEED = -1


class VoronoiGrid:
    """Flat array of optional seed coordinates, indexed by y * width + x"""

    def __init__(self, width: int, height: int):
        if int(width) <= 0 or int(height) <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        # Column 0 = seed x, column 1 = seed y; NO_SEED marks an empty cell
        self.closest = np.full((self.width * self.height, 2), NO_SEED, dtype=np.int64)

    def __repr__(self) -> str:
        return f"VoronoiGrid({self.width}x{self.height}, seeded={self.seeded_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VoronoiGrid):
            return NotImplemented
        return self.same_shape(other) and np.array_equal(self.closest, other.closest)

    def _index(self, position: Coord) -> int:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell {position} outside {self.width}x{self.height} grid")
        return y * self.width + x

    def get_closest(self, position: Coord) -> Optional[Coord]:
        """Seed stored at an in-bounds cell, or None"""
        sx, sy = self.closest[self._index(position)]
        if sx == NO_SEED:
            return None
        return (int(sx), int(sy))

    def set_closest(self, position: Coord, seed: Optional[Coord]) -> None:
        """Store a seed (or clear the cell) at an in-bounds cell"""
        index = self._index(position)
        if seed is None:
            self.closest[index] = (NO_SEED, NO_SEED)
            return

        # A stored seed must itself be a real cell
        self._index(seed)
        self.closest[index] = seed

    def lookup(self, position: Coord, edge_mode: EdgeMode) -> Optional[Coord]:
        """Read through the edge resolver with a possibly out-of-bounds coordinate"""
        resolved = resolve(position, self.width, self.height, edge_mode)
        if resolved is None:
            return None
        return self.get_closest(resolved)

    # -------------------------------------------------------------------------
    # Whole-grid views
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), matching numpy image layout"""
        return (self.height, self.width)

    @property
    def seed_x(self) -> np.ndarray:
        return self.closest[:, 0].reshape(self.shape)

    @property
    def seed_y(self) -> np.ndarray:
        return self.closest[:, 1].reshape(self.shape)

    @property
    def has_seed(self) -> np.ndarray:
        """Boolean (height, width) mask of cells holding a seed"""
        return self.seed_x != NO_SEED

    @property
    def seeded_count(self) -> int:
        return int(np.count_nonzero(self.closest[:, 0] != NO_SEED))

    def same_shape(self, other: 'VoronoiGrid') -> bool:
        return self.width == other.width and self.height == other.height

    def copy(self) -> 'VoronoiGrid':
        """Deep copy of the grid"""
        clone = VoronoiGrid(self.width, self.height)
        clone.closest[:] = self.closest
        return clone
