"""Board builders shared by the test modules."""
from __future__ import annotations

from labyrinth_board.game import Board, Tile


def board_from_text(text: str) -> Board:
    """Build a board from a rendered grid, one line of glyphs per row."""
    lines = text.strip("\n").splitlines()
    tiles = [Tile.from_glyph(glyph) for line in lines for glyph in line]
    return Board(len(lines), len(lines[0]), tiles)
