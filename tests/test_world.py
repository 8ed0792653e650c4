"""Tests for land15.world — squares, boards, grid and view."""

import numpy as np
import pytest

from land15.world.board import FIELDS, Board
from land15.world.grid import BoardView, Grid
from land15.world.square import Lulc, Square


class TestSquare:
    """Tests for the Square snapshot."""

    def test_default_values(self) -> None:
        square = Square()
        assert square.cover == Lulc.WATER
        assert square.burning is False
        assert square.biomass == 0.0

    def test_lulc_has_eleven_values(self) -> None:
        assert len(Lulc) == 11
        assert Lulc.UNKNOWN == 0
        assert Lulc.BARE == 10


class TestBoard:
    """Tests for the structure-of-arrays board."""

    def test_fresh_board_is_water(self) -> None:
        board = Board(width=6, height=4)
        assert board.cover.shape == (4, 6)
        assert (board.cover == Lulc.WATER).all()
        assert len(board) == 24

    def test_row_major_indexing(self) -> None:
        board = Board(width=5, height=3)
        board.cover[2, 1] = Lulc.ROCK
        board.elevation[2, 1] = 12.5
        square = board[2 * 5 + 1]
        assert square.cover == Lulc.ROCK
        assert square.elevation == 12.5
        assert board.square_at(1, 2) == square

    def test_iteration_order(self) -> None:
        board = Board(width=3, height=2)
        board.biomass[:] = np.arange(6, dtype=np.float64).reshape(2, 3)
        assert [s.biomass for s in board] == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]

    def test_out_of_bounds(self) -> None:
        board = Board(width=4, height=4)
        with pytest.raises(IndexError):
            board.square_at(4, 0)
        with pytest.raises(IndexError):
            board[16]

    def test_copy_from(self) -> None:
        a = Board(width=4, height=4)
        b = Board(width=4, height=4)
        a.cover[1, 1] = Lulc.TREES
        a.humidity[:] = 7.0
        b.copy_from(a)
        for name in FIELDS:
            assert np.array_equal(a.get_field(name), b.get_field(name))
        assert b.cover is not a.cover

    def test_unknown_field(self) -> None:
        with pytest.raises(KeyError):
            Board(width=3, height=3).get_field("magic")


class TestGrid:
    """Tests for the double-buffered grid."""

    def test_boards_are_distinct(self) -> None:
        grid = Grid(width=4, height=4)
        assert grid.current is not grid.next

    def test_flip_swaps_roles(self) -> None:
        grid = Grid(width=4, height=4)
        a, b = grid.boards
        assert grid.current is a
        grid.flip()
        assert grid.parity == 1
        assert grid.current is b
        assert grid.next is a
        grid.flip()
        assert grid.parity == 0

    def test_sync_copies_current(self) -> None:
        grid = Grid(width=4, height=4)
        grid.current.cover[1, 1] = Lulc.GRASS
        grid.sync()
        assert grid.next.cover[1, 1] == Lulc.GRASS


class TestBoardView:
    """Tests for the read-only view."""

    def test_dimensions(self) -> None:
        view = BoardView(Grid(width=7, height=5))
        assert (view.width, view.height) == (7, 5)
        assert len(view) == 35

    def test_fields_are_read_only(self) -> None:
        view = BoardView(Grid(width=4, height=4))
        cover = view.field("cover")
        with pytest.raises(ValueError):
            cover[1, 1] = Lulc.ROCK

    def test_follows_parity(self) -> None:
        grid = Grid(width=4, height=4)
        view = BoardView(grid)
        grid.next.cover[2, 2] = Lulc.SAND
        assert view.cover_at(2, 2) == Lulc.WATER
        grid.flip()
        assert view.cover_at(2, 2) == Lulc.SAND
        assert view[2 * 4 + 2].cover == Lulc.SAND
        assert view.parity == 1

    def test_iterates_current_board(self) -> None:
        grid = Grid(width=3, height=3)
        grid.current.temperature[:] = 21.0
        assert all(s.temperature == 21.0 for s in BoardView(grid))
