"""Board — one generation of cell state for the whole grid.

Each field is stored as its own 2D NumPy array indexed ``[y, x]`` so
that generation stages and day rules can update the board with whole-array
operations.  The flat row-major cell sequence (index ``y * width + x``)
is exposed through ``square_at``, indexing, and iteration.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from land15.world.square import Lulc, Square

# Float-valued per-cell fields, in ``Square`` order.
FLOAT_FIELDS: tuple[str, ...] = (
    "elevation",
    "temperature",
    "humidity",
    "inundation",
    "nutrients",
    "pollution",
    "biomass",
)
FIELDS: tuple[str, ...] = ("cover", "burning", *FLOAT_FIELDS)


@dataclass(eq=False)
class Board:
    """Structure-of-arrays storage for ``width * height`` cells.

    A fresh board is all Water with every other field zeroed.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cover: ``Lulc`` values as ``int8``.
        burning: Fire flags.
        elevation: Metres.
        temperature: Degrees Celsius.
        humidity: g/m³.
        inundation: Soil water, g/m³.
        nutrients: ppm.
        pollution: ppm.
        biomass: g/m².
    """

    width: int
    height: int
    cover: NDArray[np.int8] = field(init=False, repr=False)
    burning: NDArray[np.bool_] = field(init=False, repr=False)
    elevation: NDArray[np.float64] = field(init=False, repr=False)
    temperature: NDArray[np.float64] = field(init=False, repr=False)
    humidity: NDArray[np.float64] = field(init=False, repr=False)
    inundation: NDArray[np.float64] = field(init=False, repr=False)
    nutrients: NDArray[np.float64] = field(init=False, repr=False)
    pollution: NDArray[np.float64] = field(init=False, repr=False)
    biomass: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate every field array."""
        shape = (self.height, self.width)
        self.cover = np.full(shape, Lulc.WATER, dtype=np.int8)
        self.burning = np.zeros(shape, dtype=np.bool_)
        for name in FLOAT_FIELDS:
            setattr(self, name, np.zeros(shape, dtype=np.float64))

    def __len__(self) -> int:
        return self.width * self.height

    def __getitem__(self, index: int) -> Square:
        """Return the cell at row-major ``index``."""
        if not 0 <= index < len(self):
            msg = f"index {index} out of range for {self.width}x{self.height} board"
            raise IndexError(msg)
        y, x = divmod(index, self.width)
        return self._square(x, y)

    def __iter__(self) -> Iterator[Square]:
        for y in range(self.height):
            for x in range(self.width):
                yield self._square(x, y)

    def square_at(self, x: int, y: int) -> Square:
        """Return a snapshot of the cell at ``(x, y)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self._square(x, y)

    def get_field(self, name: str) -> NDArray:
        """Return the raw array for a field name.

        Raises:
            KeyError: If ``name`` is not a board field.
        """
        if name not in FIELDS:
            msg = f"unknown board field {name!r}"
            raise KeyError(msg)
        return getattr(self, name)

    def copy_from(self, other: Board) -> None:
        """Overwrite every field with the contents of ``other``."""
        for name in FIELDS:
            np.copyto(getattr(self, name), getattr(other, name))

    def _square(self, x: int, y: int) -> Square:
        return Square(
            cover=Lulc(int(self.cover[y, x])),
            burning=bool(self.burning[y, x]),
            **{name: float(getattr(self, name)[y, x]) for name in FLOAT_FIELDS},
        )
