"""
Edge Modes - How out-of-bounds lookups behave at the texture border

Every lookup made while flooding and while painting the output goes through
the same edge mode for the whole run:
- clamp:  coordinates are pinned to the nearest border cell
- repeat: coordinates wrap around (tiling textures)
- zero:   anything outside the texture reads as "no seed"
"""

import numpy as np
from enum import Enum
from typing import Optional, Tuple


class EdgeMode(Enum):
    """Border behaviour for grid lookups"""
    CLAMP = "clamp"
    REPEAT = "repeat"
    ZERO = "zero"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: 'str | EdgeMode') -> 'EdgeMode':
        """Parse an edge mode name (case-insensitive)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown edge mode: {value!r} (expected one of: {valid})") from None


def resolve(
    position: Tuple[int, int],
    width: int,
    height: int,
    edge_mode: EdgeMode
) -> Optional[Tuple[int, int]]:
    """
    Map a signed query coordinate onto the grid.

    Args:
        position: (x, y), may be negative or past the far edge
        width: Grid width
        height: Grid height
        edge_mode: Border behaviour

    Returns:
        In-bounds (x, y), or None when the zero mode rejects the query
    """
    x, y = position

    if edge_mode is EdgeMode.CLAMP:
        return (min(max(x, 0), width - 1), min(max(y, 0), height - 1))

    if edge_mode is EdgeMode.REPEAT:
        # Python's % is already a Euclidean remainder for positive divisors
        return (x % width, y % height)

    if 0 <= x < width and 0 <= y < height:
        return (x, y)
    return None


def resolve_array(
    xs: np.ndarray,
    ys: np.ndarray,
    width: int,
    height: int,
    edge_mode: EdgeMode
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorized resolve() over whole coordinate arrays.

    Returns:
        (rx, ry, valid). Where valid is False the rx/ry entries are 0 and
        must not be treated as a real cell.
    """
    xs = np.asarray(xs, dtype=np.int64)
    ys = np.asarray(ys, dtype=np.int64)

    if edge_mode is EdgeMode.CLAMP:
        rx = np.clip(xs, 0, width - 1)
        ry = np.clip(ys, 0, height - 1)
        return rx, ry, np.ones(rx.shape, dtype=bool)

    if edge_mode is EdgeMode.REPEAT:
        rx = np.mod(xs, width)
        ry = np.mod(ys, height)
        return rx, ry, np.ones(rx.shape, dtype=bool)

    valid = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    rx = np.where(valid, xs, 0)
    ry = np.where(valid, ys, 0)
    return rx, ry, valid
