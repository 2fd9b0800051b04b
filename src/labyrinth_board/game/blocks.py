from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Set


@dataclass(frozen=True, order=True)
class Footprint:
    """Rectangle of cells anchored at (row, col). May extend past the grid."""

    row: int
    col: int
    width: int
    height: int

    def contains(self, row: int, col: int) -> bool:
        return self.row <= row < self.row + self.height and self.col <= col < self.col + self.width


@dataclass
class BlockRegistry:
    """Footprints marking where lines may slide and where they may not."""

    movable: Set[Footprint] = field(default_factory=set)
    non_movable: Set[Footprint] = field(default_factory=set)

    def movable_footprints(self) -> FrozenSet[Footprint]:
        return frozenset(self.movable)

    def non_movable_footprints(self) -> FrozenSet[Footprint]:
        return frozenset(self.non_movable)

    def add_movable(self, footprint: Footprint) -> None:
        self.movable.add(footprint)

    def add_non_movable(self, footprint: Footprint) -> None:
        self.non_movable.add(footprint)

    def extend(self, movable: Iterable[Footprint] = (), non_movable: Iterable[Footprint] = ()) -> None:
        self.movable.update(movable)
        self.non_movable.update(non_movable)

    def copy(self) -> "BlockRegistry":
        return BlockRegistry(set(self.movable), set(self.non_movable))
