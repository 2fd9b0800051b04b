from __future__ import annotations

from labyrinth_board.game import Board, Direction, Footprint
from labyrinth_board.game.movement import can_move, line_span

from helpers import board_from_text


GRID = """
∧>∨
<⊤⊣
⊥⊢+
"""


def test_move_east_shifts_whole_movable_footprint(blocked_row_board):
    before = str(blocked_row_board).splitlines()

    assert blocked_row_board.move((1, 2), Direction.EAST) is True

    after = str(blocked_row_board).splitlines()
    assert after[2] == "⊢⊤⊥-⊣"
    assert after[0] == before[0]
    assert after[4] == before[4]


def test_move_rebuilds_edges(blocked_row_board):
    blocked_row_board.move((1, 2), Direction.EAST)
    # ⊢ wrapped to column 0 and now connects east into ⊤
    assert blocked_row_board.edges[10] == [11]
    assert blocked_row_board.edges[11] == [12, 10]
    assert blocked_row_board.edges[14] == [13]


def test_blocked_move_leaves_board_untouched(row_board):
    row_board.blocks.add_movable(Footprint(row=1, col=2, width=3, height=4))
    row_board.blocks.add_non_movable(Footprint(row=4, col=2, width=1, height=1))
    rendered = str(row_board)
    edges = [list(e) for e in row_board.edges]

    assert row_board.move((1, 2), Direction.EAST) is False
    assert str(row_board) == rendered
    assert row_board.edges == edges


def test_single_line_moves_without_footprints():
    board = board_from_text(GRID)
    assert board.move((0, 1), Direction.SOUTH)
    assert str(board) == "∧⊢∨\n<>⊣\n⊥⊤+\n"


def test_north_and_west_shift_toward_origin_end():
    board = board_from_text(GRID)
    assert board.move((2, 1), Direction.NORTH)
    assert str(board) == "∧⊤∨\n<⊢⊣\n⊥>+\n"

    board = board_from_text(GRID)
    assert board.move((1, 0), Direction.WEST)
    assert str(board) == "∧>∨\n⊤⊣<\n⊥⊢+\n"


def test_move_by_position_uses_columns_stride():
    board = board_from_text("∧>∨<\n⊤⊣⊥⊢\n")
    assert board.move(5, Direction.EAST)
    assert str(board) == "∧>∨<\n⊢⊤⊣⊥\n"


def test_span_widens_over_crossed_movable_footprints():
    board = Board(4, 4)
    board.blocks.add_movable(Footprint(row=2, col=1, width=2, height=1))
    board.blocks.add_movable(Footprint(row=0, col=3, width=1, height=1))

    assert line_span(board, (0, 1), Direction.NORTH) == (1, 2)
    assert line_span(board, (0, 2), Direction.SOUTH) == (1, 2)
    assert line_span(board, (0, 0), Direction.SOUTH) == (0, 0)
    assert line_span(board, (2, 0), Direction.EAST) == (2, 2)


def test_span_is_clamped_to_grid():
    board = Board(3, 3)
    board.blocks.add_movable(Footprint(row=-2, col=1, width=5, height=10))
    assert line_span(board, (1, 1), Direction.SOUTH) == (1, 2)
    assert line_span(board, (1, 1), Direction.WEST) == (0, 2)
    assert board.move((1, 1), Direction.SOUTH)


def test_multi_column_move_shifts_every_column_in_span():
    board = board_from_text(GRID)
    board.blocks.add_movable(Footprint(row=0, col=0, width=2, height=1))
    assert board.move((1, 1), Direction.SOUTH)
    assert str(board) == "⊥⊢∨\n∧>⊣\n<⊤+\n"


def test_non_movable_outside_span_does_not_block():
    board = board_from_text(GRID)
    board.blocks.add_non_movable(Footprint(row=0, col=2, width=1, height=3))
    assert can_move(board, (0, 0), Direction.SOUTH)
    assert not can_move(board, (0, 2), Direction.NORTH)
    # the fixed column crosses every row
    assert not board.can_move((1, 0), Direction.EAST)


def test_can_move_does_not_mutate():
    board = board_from_text(GRID)
    rendered = str(board)
    assert board.can_move((0, 0), Direction.EAST)
    assert str(board) == rendered


def test_footprints_stay_put_after_move(blocked_row_board):
    movable = blocked_row_board.blocks.movable_footprints()
    fixed = blocked_row_board.blocks.non_movable_footprints()
    blocked_row_board.move((1, 2), Direction.EAST)
    assert blocked_row_board.blocks.movable_footprints() == movable
    assert blocked_row_board.blocks.non_movable_footprints() == fixed
