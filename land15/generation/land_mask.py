"""Land mask — the warped-disc island outline with a river cut through it.

The mask is a transient boolean array; it only lives until the cover
seeder has turned it into Sand and Grass.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from land15.common.random import RandomSource

logger = logging.getLogger(__name__)


def generate_land_mask(
    width: int,
    height: int,
    rng: RandomSource,
    *,
    radius: float,
    river_width: float,
    harmonics: int,
    decay: float,
    amplitude: float,
) -> NDArray[np.bool_]:
    """Synthesise the raw land/water mask.

    Each cell's position is normalised to ``[-1, 1]²`` and displaced by a
    sum of sine harmonics; it is land if the displaced point lies inside
    a disc of ``radius`` and outside a straight river channel.  The
    channel runs through a random point within half a radius of the
    centre, at a random angle.

    Args:
        width: Grid columns.
        height: Grid rows.
        rng: Random source; consumes ``2 + 2 * harmonics`` values.
        radius: Disc radius in normalised units.  ``<= 0`` gives no land.
        river_width: Half-width of the river channel, measured with the
            aspect correction applied.
        harmonics: Number of warp harmonics; 0 disables warping.
        decay: Amplitude ratio between successive harmonics.
        amplitude: Amplitude of the first harmonic.

    Returns:
        A ``(height, width)`` boolean array, False on the border.
    """
    river_angle = rng.next_unit() * math.pi
    river_dir = np.array([math.cos(river_angle), math.sin(river_angle)])
    river_offset = (rng.next_unit() * 2.0 - 1.0) * radius * 0.5
    river_origin = np.array([river_dir[1], -river_dir[0]]) * river_offset
    aspect = np.array([width, height], dtype=np.float64) / min(width, height)

    # (x phase, y phase, amplitude) per harmonic, in draw order
    phases: list[tuple[float, float, float]] = []
    for i in range(harmonics):
        x_phase = rng.next_unit() * math.pi * 2.0
        y_phase = rng.next_unit() * math.pi * 2.0
        phases.append((x_phase, y_phase, amplitude * decay**i))

    ys, xs = np.mgrid[0:height, 0:width]
    nx = xs / width * 2.0 - 1.0
    ny = ys / height * 2.0 - 1.0

    # Harmonics see the aspect-corrected position so waves stay round
    hx = nx * aspect[0] * math.pi * 2.0
    hy = ny * aspect[1] * math.pi * 2.0
    dx = np.zeros_like(nx)
    dy = np.zeros_like(ny)
    for i, (x_phase, y_phase, amp) in enumerate(phases):
        freq = i * 0.5 + 1.0
        dx += np.sin(hx * freq + x_phase) * amp
        dy += np.sin(hy * freq + y_phase) * amp
    nx = nx + dx
    ny = ny + dy

    if radius > 0:
        land = nx * nx + ny * ny <= radius * radius
    else:
        land = np.zeros((height, width), dtype=np.bool_)

    # Perpendicular offset from the river line, aspect-scaled
    rx = nx - river_origin[0]
    ry = ny - river_origin[1]
    along = rx * river_dir[0] + ry * river_dir[1]
    px = (nx - (along * river_dir[0] + river_origin[0])) * aspect[0]
    py = (ny - (along * river_dir[1] + river_origin[1])) * aspect[1]
    land &= np.hypot(px, py) > river_width

    mask = np.zeros((height, width), dtype=np.bool_)
    mask[1:-1, 1:-1] = land[1:-1, 1:-1]

    logger.debug(
        f"Land mask: {int(mask.sum())} of {(width - 2) * (height - 2)} interior "
        f"cells are land (river angle {river_angle:.3f} rad)",
    )
    return mask
