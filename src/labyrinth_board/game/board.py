from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from . import movement, pathfinding
from .blocks import BlockRegistry, Footprint
from .tiles import NONE_TILE, Direction, Rotation, Tile


logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]
Position = Union[int, Coordinate]


class Board:
    """Grid of connector tiles plus the adjacency graph their open sides form.

    Cells are addressed either by `(row, col)` or by the row-major position
    `row * columns + col`. `edges[pos]` lists the positions connected to
    `pos` and is rebuilt after every mutation, so it always matches `tiles`.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        tiles: Optional[Iterable[Tile]] = None,
        movable: Iterable[Footprint] = (),
        non_movable: Iterable[Footprint] = (),
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{columns}")
        self.rows = int(rows)
        self.columns = int(columns)
        self.tiles = np.full((self.rows, self.columns), NONE_TILE, dtype=object)
        if tiles is not None:
            tiles = list(tiles)
            if len(tiles) != self.rows * self.columns:
                raise ValueError(
                    f"Expected {self.rows * self.columns} tiles for a {self.rows}x{self.columns} board, got {len(tiles)}"
                )
            for pos, tile in enumerate(tiles):
                self.tiles[divmod(pos, self.columns)] = tile
        self.blocks = BlockRegistry()
        self.blocks.extend(movable, non_movable)
        self.edges: List[List[int]] = []
        self.rebuild_edges()

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def position(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.columns} board")
        return row * self.columns + col

    def row_col(self, pos: int) -> Coordinate:
        if not 0 <= pos < self.size:
            raise IndexError(f"Position {pos} is outside a board of {self.size} cells")
        return divmod(int(pos), self.columns)

    def resolve(self, where: Position) -> Coordinate:
        """Normalise a position or (row, col) pair to a bounds-checked (row, col)."""
        if isinstance(where, (int, np.integer)):
            return self.row_col(int(where))
        row, col = where
        self.position(row, col)
        return int(row), int(col)

    def __getitem__(self, where: Position) -> Tile:
        return self.tiles[self.resolve(where)]

    def __setitem__(self, where: Position, tile: Tile) -> None:
        self.tiles[self.resolve(where)] = tile
        self.rebuild_edges()

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles.flat)

    def neighbor(self, pos: int, direction: Direction) -> Optional[int]:
        """Adjacent position in `direction`, or None past the grid edge."""
        if direction == Direction.NORTH:
            return pos - self.columns if pos - self.columns >= 0 else None
        if direction == Direction.EAST:
            return pos + 1 if pos % self.columns < self.columns - 1 else None
        if direction == Direction.SOUTH:
            return pos + self.columns if pos + self.columns < self.size else None
        return pos - 1 if pos % self.columns > 0 else None

    def rebuild_edges(self) -> None:
        edges: List[List[int]] = [[] for _ in range(self.size)]
        flat = self.tiles.ravel()
        for pos in range(self.size):
            for side in flat[pos].open_sides():
                nxt = self.neighbor(pos, side)
                if nxt is not None and flat[nxt].is_open(side.opposite()):
                    edges[pos].append(nxt)
        self.edges = edges
        logger.debug(
            "Rebuilt adjacency for %dx%d board: %d links",
            self.rows,
            self.columns,
            sum(len(e) for e in edges) // 2,
        )

    def rotate(self, where: Position, rotation: Rotation = Rotation.RIGHT) -> Tile:
        cell = self.resolve(where)
        tile = self.tiles[cell].rotated(rotation)
        self.tiles[cell] = tile
        self.rebuild_edges()
        return tile

    def move(self, where: Position, direction: Direction) -> bool:
        return movement.move(self, self.resolve(where), direction)

    def can_move(self, where: Position, direction: Direction) -> bool:
        return movement.can_move(self, self.resolve(where), direction)

    def shortest_path(self, source: Position, target: Position) -> Optional[List[Direction]]:
        return pathfinding.shortest_path(
            self, self.position(*self.resolve(source)), self.position(*self.resolve(target))
        )

    def render(self) -> str:
        return "".join("".join(tile.glyph() for tile in row) + "\n" for row in self.tiles)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns})"

    def copy(self) -> "Board":
        new_board = Board(self.rows, self.columns, list(self))
        new_board.blocks = self.blocks.copy()
        return new_board
