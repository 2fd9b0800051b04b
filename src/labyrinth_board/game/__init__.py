"""Game module for Labyrinth Board.

Exports the board engine and supporting classes:
- Tile: Connector shape of a cell, with rotation and open sides
- Direction, Orientation, Rotation: Enumerations used by tiles
- Footprint, BlockRegistry: Regions where lines may or may not slide
- Board: Tile grid with its adjacency graph, moves and path queries
- DecodeError: Raised when a persisted board cannot be loaded
"""

from .tiles import ALL_TILES, Direction, Orientation, Rotation, Tile, TileType
from .blocks import BlockRegistry, Footprint
from .board import Board
from .codec import DecodeError, MissingDirection, MissingOrientation, load_json, save_json

__all__ = [
    "ALL_TILES",
    "Direction",
    "Orientation",
    "Rotation",
    "Tile",
    "TileType",
    "BlockRegistry",
    "Footprint",
    "Board",
    "DecodeError",
    "MissingDirection",
    "MissingOrientation",
    "load_json",
    "save_json",
]
