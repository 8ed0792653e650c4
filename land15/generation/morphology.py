"""Morphological opening of the land mask.

Erosion followed by dilation over the 4-neighbourhood strips single-cell
specks and one-cell-wide spits while leaving the bulk of the island in
place.  Both passes touch interior cells only; the border stays water.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def erode(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Keep interior cells that are land along with all four neighbours.

    Args:
        mask: Boolean land mask.

    Returns:
        A new mask; border cells are always False.
    """
    out = np.zeros_like(mask, dtype=np.bool_)
    out[1:-1, 1:-1] = (
        mask[1:-1, 1:-1]
        & mask[:-2, 1:-1]  # north
        & mask[1:-1, 2:]  # east
        & mask[2:, 1:-1]  # south
        & mask[1:-1, :-2]  # west
    )
    return out


def dilate(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Mark interior cells that are land or touch land on any side.

    Args:
        mask: Boolean land mask.

    Returns:
        A new mask; border cells are always False.
    """
    out = np.zeros_like(mask, dtype=np.bool_)
    out[1:-1, 1:-1] = (
        mask[1:-1, 1:-1]
        | mask[:-2, 1:-1]
        | mask[1:-1, 2:]
        | mask[2:, 1:-1]
        | mask[1:-1, :-2]
    )
    return out


def open_mask(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Return the morphological opening (erode, then dilate) of ``mask``."""
    return dilate(erode(mask))
