from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from .tiles import Direction

if TYPE_CHECKING:
    from .board import Board


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


def _is_vertical(direction: Direction) -> bool:
    return direction in (Direction.NORTH, Direction.SOUTH)


def line_cells(board: "Board", origin: Coordinate, direction: Direction) -> List[Coordinate]:
    """All cells of the row or column that a move from `origin` slides."""
    row, col = origin
    if _is_vertical(direction):
        return [(r, col) for r in range(board.rows)]
    return [(row, c) for c in range(board.columns)]


def line_span(board: "Board", origin: Coordinate, direction: Direction) -> Tuple[int, int]:
    """Inclusive range of lines shifted together with the one through `origin`.

    The origin line is widened to cover every movable footprint it crosses,
    then clamped to the grid.
    """
    cells = line_cells(board, origin, direction)
    vertical = _is_vertical(direction)
    start = end = origin[1] if vertical else origin[0]
    for footprint in board.blocks.movable:
        if not any(footprint.contains(r, c) for r, c in cells):
            continue
        if vertical:
            start = min(start, footprint.col)
            end = max(end, footprint.col + footprint.width - 1)
        else:
            start = min(start, footprint.row)
            end = max(end, footprint.row + footprint.height - 1)
    limit = board.columns if vertical else board.rows
    return max(start, 0), min(end, limit - 1)


def is_line_blocked(board: "Board", line: int, direction: Direction) -> bool:
    if _is_vertical(direction):
        cells = [(r, line) for r in range(board.rows)]
    else:
        cells = [(line, c) for c in range(board.columns)]
    return any(fp.contains(r, c) for fp in board.blocks.non_movable for r, c in cells)


def can_move(board: "Board", origin: Coordinate, direction: Direction) -> bool:
    start, end = line_span(board, origin, direction)
    return not any(is_line_blocked(board, line, direction) for line in range(start, end + 1))


def shift_line(board: "Board", line: int, direction: Direction) -> None:
    """Cyclic one-cell shift; the tile at the far end wraps to the near end."""
    step = 1 if direction in (Direction.SOUTH, Direction.EAST) else -1
    if _is_vertical(direction):
        board.tiles[:, line] = np.roll(board.tiles[:, line], step)
    else:
        board.tiles[line, :] = np.roll(board.tiles[line, :], step)


def move(board: "Board", origin: Coordinate, direction: Direction) -> bool:
    """Slide the line through `origin` (and any lines tied to it) one cell.

    Returns False without touching the board when any line of the span
    crosses a non-movable footprint.
    """
    start, end = line_span(board, origin, direction)
    for line in range(start, end + 1):
        if is_line_blocked(board, line, direction):
            logger.debug(
                "Move %s from %s blocked: line %d of span [%d, %d] is fixed",
                direction.name, origin, line, start, end,
            )
            return False
    for line in range(start, end + 1):
        shift_line(board, line, direction)
    board.rebuild_edges()
    logger.debug("Moved lines [%d, %d] %s", start, end, direction.name)
    return True
