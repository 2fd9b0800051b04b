from __future__ import annotations

import numpy as np

from labyrinth_board.game import ALL_TILES, Board, Direction
from labyrinth_board.game.pathfinding import distances, shortest_path

from helpers import board_from_text

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def test_path_records_entered_side(row_board):
    assert row_board.shortest_path((2, 0), (2, 3)) == [W, W, W]
    assert row_board.shortest_path((2, 3), (2, 0)) == [E, E, E]


def test_unreachable_cells_have_no_path(row_board):
    assert row_board.shortest_path((2, 0), (2, 4)) is None
    assert Board(3, 3).shortest_path((0, 0), (2, 2)) is None


def test_path_to_self_is_empty(row_board):
    assert row_board.shortest_path(12, 12) == []
    assert Board(2, 2).shortest_path(0, 0) == []


def test_path_accepts_positions_and_coordinates(row_board):
    assert row_board.shortest_path(10, (2, 2)) == [W, W]


def test_path_turns_corners():
    board = board_from_text(
        """
>⊣x
|x|
⊢-⊥
"""
    )
    # down the left column then along the bottom row and up the right edge
    assert board.shortest_path((0, 0), (1, 2)) == [N, N, W, W, S]


def test_shortest_of_several_routes():
    board = board_from_text("+++\n+x+\n+++\n")
    path = board.shortest_path((0, 0), (2, 2))
    assert len(path) == 4
    # neighbours are expanded north, east, south, west
    assert path == [W, W, N, N]


def test_path_is_deterministic():
    board = board_from_text("+++\n+++\n+++\n")
    first = board.shortest_path((0, 0), (2, 2))
    assert all(board.shortest_path((0, 0), (2, 2)) == first for _ in range(5))


def test_path_length_matches_graph_distance():
    rng = np.random.default_rng(7)
    for _ in range(20):
        rows, columns = (int(v) for v in rng.integers(2, 7, size=2))
        codes = rng.integers(0, len(ALL_TILES), size=rows * columns)
        board = Board(rows, columns, [ALL_TILES[int(c)] for c in codes])
        source = int(rng.integers(0, board.size))
        dist = distances(board, source)
        for target in range(board.size):
            path = shortest_path(board, source, target)
            if target in dist:
                assert path is not None and len(path) == dist[target]
            else:
                assert path is None


def test_following_path_lands_on_target():
    board = board_from_text(">>∨\n⊢+⊣\n∧-<\n")
    path = board.shortest_path((0, 0), (2, 2))
    assert path is not None
    pos = board.position(0, 0)
    for entered_through in path:
        pos = board.neighbor(pos, entered_through.opposite())
    assert pos == board.position(2, 2)
