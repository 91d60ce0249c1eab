"""Blue noise threshold lookup, tiled with period 16 on both axes."""

import numpy as np
from typing import Tuple

from utils.constants import NOISE_TILE, NOISE_TILE_SIZE


def noise_at(x: int, y: int) -> float:
    """Threshold in [0, 1) for pixel (x, y)."""
    return float(NOISE_TILE[y % NOISE_TILE_SIZE, x % NOISE_TILE_SIZE])


def tile_noise(height: int, width: int, origin: Tuple[int, int] = (0, 0)) -> np.ndarray:
    """(height, width) threshold map for a region whose top-left is origin=(x0, y0)."""
    x0, y0 = origin
    rows = (np.arange(height) + y0) % NOISE_TILE_SIZE
    cols = (np.arange(width) + x0) % NOISE_TILE_SIZE
    return NOISE_TILE[np.ix_(rows, cols)]
