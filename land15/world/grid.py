"""Grid — the pair of boards behind the day-stepping simulation.

The Grid owns two ``Board`` generations and a parity bit selecting which
one is current.  Stepping reads the current board and writes the other;
``flip`` then promotes the freshly written board.  Readers outside the
simulation see the grid only through a ``BoardView``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from land15.world.board import Board
from land15.world.square import Lulc, Square

# Cardinal neighbour offsets (dx, dy): north, east, south, west.
NEIGHBOURS_4: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


class BoardNotReadyError(RuntimeError):
    """Raised when the grid is stepped or read before it has been built."""


@dataclass
class Grid:
    """Two fixed boards plus the parity bit that orders them.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        boards: The ``(A, B)`` board pair, allocated once.
        parity: 0 when ``A`` is current, 1 when ``B`` is current.
    """

    width: int
    height: int
    boards: tuple[Board, Board] = field(init=False, repr=False)
    parity: int = 0

    def __post_init__(self) -> None:
        """Allocate both boards as all-water."""
        self.boards = (
            Board(width=self.width, height=self.height),
            Board(width=self.width, height=self.height),
        )

    @property
    def current(self) -> Board:
        """The board read by the next step and shown to observers."""
        return self.boards[self.parity]

    @property
    def next(self) -> Board:
        """The board the next step writes into."""
        return self.boards[1 - self.parity]

    def flip(self) -> None:
        """Swap the roles of the two boards."""
        self.parity = 1 - self.parity

    def sync(self) -> None:
        """Copy the current board over the next one.

        Day steps only write interior cells, so both generations must
        start from the same border.
        """
        self.next.copy_from(self.current)


class BoardView:
    """Read-only window onto a grid's current board.

    The view resolves the current board on every access, so a renderer
    can hold one view for the lifetime of the simulation.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def parity(self) -> int:
        return self._grid.parity

    def __len__(self) -> int:
        return self._grid.width * self._grid.height

    def __getitem__(self, index: int) -> Square:
        return self._grid.current[index]

    def __iter__(self) -> Iterator[Square]:
        return iter(self._grid.current)

    def square_at(self, x: int, y: int) -> Square:
        """Return a snapshot of the cell at ``(x, y)``."""
        return self._grid.current.square_at(x, y)

    def cover_at(self, x: int, y: int) -> Lulc:
        """Return the cover type at ``(x, y)``, used to pick a tile."""
        return self.square_at(x, y).cover

    def field(self, name: str) -> NDArray:
        """Return a non-writeable array view of a whole field.

        Args:
            name: Any board field, e.g. ``"cover"`` or ``"temperature"``.

        Returns:
            A ``(height, width)`` array sharing memory with the board.
        """
        arr = np.asarray(self._grid.current.get_field(name)).view()
        arr.flags.writeable = False
        return arr
