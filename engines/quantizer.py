"""Quantization grid: lossiness clamping and bracket search."""

import numpy as np
from typing import Tuple

from utils.constants import EXPANSION_TABLES, MAX_LOSSINESS


def clamp_lossiness(lossiness: int) -> int:
    """Clamp lossiness to [0, 7]."""
    return int(np.clip(lossiness, 0, MAX_LOSSINESS))


def quantization_levels(lossiness: int) -> np.ndarray:
    """Sorted distinct output values for a lossiness level."""
    return np.unique(EXPANSION_TABLES[clamp_lossiness(lossiness)])


def reduce_to_8bit(samples: np.ndarray) -> np.ndarray:
    """Truncate 16-bit samples to 8 bits."""
    return (np.asarray(samples, dtype=np.uint16) >> 8).astype(np.uint8)


def find_bracket(samples: np.ndarray, lossiness: int) -> Tuple[np.ndarray, np.ndarray]:
    """Grid values (lower, upper) with lower <= sample < upper.

    The first guess comes from the shifted sample; when it undershoots, the
    bracket advances one step. Samples of 255 have no upper neighbour and
    get the bracket of 254.
    """
    lossiness = clamp_lossiness(lossiness)
    table = EXPANSION_TABLES[lossiness].astype(np.int32)
    s = np.minimum(np.asarray(samples, dtype=np.int32), 254)

    low_index = np.maximum((s >> lossiness) - 1, 0)
    lower = table[low_index]
    upper = table[low_index + 1]

    advance = s >= upper
    lower = np.where(advance, upper, lower)
    upper = np.where(advance, table[np.minimum(low_index + 2, 255)], upper)
    return lower, upper
