from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple


class Rotation(IntEnum):
    RIGHT = 0
    LEFT = 1


class Orientation(IntEnum):
    VERTICAL = 0
    HORIZONTAL = 1

    def rotated(self, rotation: Rotation) -> "Orientation":
        # Two states only, so left and right are the same toggle
        return Orientation((self.value + 1) % 2)


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotated(self, rotation: Rotation) -> "Direction":
        if rotation == Rotation.RIGHT:
            return Direction((self.value + 1) % 4)
        if self == Direction.NORTH:
            return Direction.WEST
        return Direction(self.value - 1)

    def opposite(self) -> "Direction":
        return Direction((self.value + 2) % 4)


class TileType(str, Enum):
    NONE = "None"
    CROSS = "Cross"
    LINEAR = "Linear"
    CURVED = "Curved"
    INTERSECTION = "Intersection"


N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

_LINEAR_SIDES: Dict[Orientation, Tuple[Direction, ...]] = {
    Orientation.HORIZONTAL: (E, W),
    Orientation.VERTICAL: (N, S),
}

_CURVED_SIDES: Dict[Direction, Tuple[Direction, ...]] = {
    N: (N, E),
    E: (E, S),
    S: (S, W),
    W: (N, W),
}

_INTERSECTION_SIDES: Dict[Direction, Tuple[Direction, ...]] = {
    N: (E, S, W),
    E: (N, S, W),
    S: (N, E, W),
    W: (N, E, S),
}

_LINEAR_GLYPHS = {Orientation.HORIZONTAL: "-", Orientation.VERTICAL: "|"}
_CURVED_GLYPHS = {N: "∧", E: ">", S: "∨", W: "<"}
_INTERSECTION_GLYPHS = {N: "⊤", E: "⊣", S: "⊥", W: "⊢"}


@dataclass(frozen=True)
class Tile:
    """Connector shape of a single board cell.

    Only the payload relevant to `kind` is set: `orientation` for linear
    tiles, `direction` for curved and intersection tiles.
    """

    kind: TileType
    orientation: Optional[Orientation] = None
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        wants_orientation = self.kind == TileType.LINEAR
        wants_direction = self.kind in (TileType.CURVED, TileType.INTERSECTION)
        if wants_orientation != (self.orientation is not None):
            raise ValueError(f"{self.kind.value} tile has invalid orientation {self.orientation!r}")
        if wants_direction != (self.direction is not None):
            raise ValueError(f"{self.kind.value} tile has invalid direction {self.direction!r}")

    @classmethod
    def none(cls) -> "Tile":
        return cls(TileType.NONE)

    @classmethod
    def cross(cls) -> "Tile":
        return cls(TileType.CROSS)

    @classmethod
    def linear(cls, orientation: Orientation) -> "Tile":
        return cls(TileType.LINEAR, orientation=orientation)

    @classmethod
    def curved(cls, direction: Direction) -> "Tile":
        return cls(TileType.CURVED, direction=direction)

    @classmethod
    def intersection(cls, direction: Direction) -> "Tile":
        return cls(TileType.INTERSECTION, direction=direction)

    @classmethod
    def from_glyph(cls, glyph: str) -> "Tile":
        try:
            return _TILES_BY_GLYPH[glyph]
        except KeyError:
            raise ValueError(f"Unknown tile glyph {glyph!r}") from None

    def rotated(self, rotation: Rotation = Rotation.RIGHT) -> "Tile":
        if self.orientation is not None:
            return Tile(self.kind, orientation=self.orientation.rotated(rotation))
        if self.direction is not None:
            return Tile(self.kind, direction=self.direction.rotated(rotation))
        return self

    def open_sides(self) -> Tuple[Direction, ...]:
        """Open sides, always in North, East, South, West order."""
        if self.kind == TileType.CROSS:
            return (N, E, S, W)
        if self.kind == TileType.LINEAR:
            return _LINEAR_SIDES[self.orientation]
        if self.kind == TileType.CURVED:
            return _CURVED_SIDES[self.direction]
        if self.kind == TileType.INTERSECTION:
            return _INTERSECTION_SIDES[self.direction]
        return ()

    def is_open(self, side: Direction) -> bool:
        return side in self.open_sides()

    def glyph(self) -> str:
        if self.kind == TileType.CROSS:
            return "+"
        if self.kind == TileType.LINEAR:
            return _LINEAR_GLYPHS[self.orientation]
        if self.kind == TileType.CURVED:
            return _CURVED_GLYPHS[self.direction]
        if self.kind == TileType.INTERSECTION:
            return _INTERSECTION_GLYPHS[self.direction]
        return "x"

    @property
    def code(self) -> int:
        return _CODES[self]

    def __str__(self) -> str:
        return self.glyph()


NONE_TILE = Tile.none()

ALL_TILES: Tuple[Tile, ...] = (
    NONE_TILE,
    Tile.cross(),
    *(Tile.linear(o) for o in Orientation),
    *(Tile.curved(d) for d in Direction),
    *(Tile.intersection(d) for d in Direction),
)

_CODES: Dict[Tile, int] = {tile: i for i, tile in enumerate(ALL_TILES)}
_TILES_BY_GLYPH: Dict[str, Tile] = {tile.glyph(): tile for tile in ALL_TILES}
