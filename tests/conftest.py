"""Shared fixtures for board tests."""
from __future__ import annotations

import pytest

from labyrinth_board.game import Board, Direction, Footprint, Orientation, Tile


@pytest.fixture
def row_board() -> Board:
    """5x5 board whose middle row reads ⊤⊥-⊣⊢, everything else empty."""
    board = Board(5, 5)
    board[2, 0] = Tile.intersection(Direction.NORTH)
    board[2, 1] = Tile.intersection(Direction.SOUTH)
    board[2, 2] = Tile.linear(Orientation.HORIZONTAL)
    board[2, 3] = Tile.intersection(Direction.EAST)
    board[2, 4] = Tile.intersection(Direction.WEST)
    return board


@pytest.fixture
def blocked_row_board(row_board: Board) -> Board:
    row_board.blocks.add_movable(Footprint(row=1, col=2, width=3, height=3))
    row_board.blocks.add_non_movable(Footprint(row=4, col=2, width=1, height=1))
    return row_board
