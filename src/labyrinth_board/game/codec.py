"""JSON wire format for boards.

A board is stored as `rows`, `columns`, the row-major `boxes` list and the
two footprint lists. The adjacency graph is never stored; loading a board
rebuilds it.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar

from .blocks import Footprint
from .board import Board
from .tiles import Direction, Orientation, Tile, TileType


logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)

_TILE_KEYS = {"type", "orientation", "direction"}
_FOOTPRINT_FIELDS = ("row", "col", "width", "height")


class DecodeError(ValueError):
    """Raised when persisted board data cannot be turned into a board."""


class MissingOrientation(DecodeError):
    pass


class MissingDirection(DecodeError):
    pass


def _wire_name(member: Enum) -> str:
    return member.name.title()


def _parse_member(enum_cls: Type[_E], value: Any, what: str) -> _E:
    if isinstance(value, str):
        for member in enum_cls:
            if _wire_name(member) == value:
                return member
    raise DecodeError(f"Unknown {what} {value!r}")


def tile_to_dict(tile: Tile) -> Dict[str, str]:
    data = {"type": tile.kind.value}
    if tile.orientation is not None:
        data["orientation"] = _wire_name(tile.orientation)
    if tile.direction is not None:
        data["direction"] = _wire_name(tile.direction)
    return data


def tile_from_dict(data: Dict[str, Any]) -> Tile:
    if not isinstance(data, dict) or "type" not in data:
        raise DecodeError(f"Tile entry without a type: {data!r}")
    extra = set(data) - _TILE_KEYS
    if extra:
        logger.warning("Ignoring unknown tile keys %s", sorted(extra))
    try:
        kind = TileType(data["type"])
    except ValueError:
        raise DecodeError(f"Unknown tile type {data['type']!r}") from None

    if kind == TileType.LINEAR:
        if data.get("orientation") is None:
            raise MissingOrientation("Linear tile requires an orientation")
        return Tile.linear(_parse_member(Orientation, data["orientation"], "orientation"))
    if kind in (TileType.CURVED, TileType.INTERSECTION):
        if data.get("direction") is None:
            raise MissingDirection(f"{kind.value} tile requires a direction")
        return Tile(kind, direction=_parse_member(Direction, data["direction"], "direction"))
    return Tile(kind)


def footprint_to_dict(footprint: Footprint) -> Dict[str, int]:
    return {name: getattr(footprint, name) for name in _FOOTPRINT_FIELDS}


def _int_field(data: Dict[str, Any], name: str, what: str) -> int:
    value = data[name]
    # bool is an int subclass but never a valid count or coordinate
    if not isinstance(value, int) or isinstance(value, bool):
        raise DecodeError(f"{what} field {name!r} must be an integer, got {value!r}")
    return value


def footprint_from_dict(data: Dict[str, Any]) -> Footprint:
    if not isinstance(data, dict):
        raise DecodeError(f"Malformed block {data!r}")
    try:
        return Footprint(*(_int_field(data, name, "Block") for name in _FOOTPRINT_FIELDS))
    except KeyError as exc:
        raise DecodeError(f"Block is missing field {exc.args[0]!r}") from exc


def board_to_dict(board: Board) -> Dict[str, Any]:
    return {
        "rows": board.rows,
        "columns": board.columns,
        "boxes": [tile_to_dict(tile) for tile in board],
        "movableBlocks": [footprint_to_dict(fp) for fp in sorted(board.blocks.movable)],
        "nonMovableBlocks": [footprint_to_dict(fp) for fp in sorted(board.blocks.non_movable)],
    }


def board_from_dict(data: Dict[str, Any]) -> Board:
    try:
        rows = _int_field(data, "rows", "Board")
        columns = _int_field(data, "columns", "Board")
        boxes: List[Dict[str, Any]] = data["boxes"]
        movable = data["movableBlocks"]
        non_movable = data["nonMovableBlocks"]
    except KeyError as exc:
        raise DecodeError(f"Missing required field in board data: {exc.args[0]!r}") from exc

    if rows <= 0 or columns <= 0:
        raise DecodeError(f"Board dimensions must be positive, got {rows}x{columns}")
    for name, value in (("boxes", boxes), ("movableBlocks", movable), ("nonMovableBlocks", non_movable)):
        if not isinstance(value, list):
            raise DecodeError(f"Board field {name!r} must be a list, got {value!r}")
    if len(boxes) != rows * columns:
        raise DecodeError(f"Expected {rows * columns} boxes for a {rows}x{columns} board, got {len(boxes)}")

    tiles = [tile_from_dict(entry) for entry in boxes]
    return Board(
        rows,
        columns,
        tiles,
        movable=[footprint_from_dict(fp) for fp in movable],
        non_movable=[footprint_from_dict(fp) for fp in non_movable],
    )


def dumps(board: Board, indent: int | None = 2) -> str:
    return json.dumps(board_to_dict(board), indent=indent, ensure_ascii=False)


def loads(text: str) -> Board:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid board JSON: {exc.msg} at line {exc.lineno}") from exc
    if not isinstance(data, dict):
        raise DecodeError("Board JSON must be an object")
    return board_from_dict(data)


def save_json(board: Board, path: str | Path) -> None:
    """Serialise a :class:`Board` to JSON on disk."""

    destination = Path(path)
    destination.write_text(dumps(board), encoding="utf-8")


def load_json(path: str | Path) -> Board:
    """Load a :class:`Board` from JSON data on disk."""

    source = Path(path)
    text = source.read_text(encoding="utf-8")
    try:
        return loads(text)
    except DecodeError as exc:
        raise type(exc)(f"Error loading board from '{source}': {exc}") from exc


__all__ = [
    "DecodeError",
    "MissingOrientation",
    "MissingDirection",
    "tile_to_dict",
    "tile_from_dict",
    "footprint_to_dict",
    "footprint_from_dict",
    "board_to_dict",
    "board_from_dict",
    "dumps",
    "loads",
    "save_json",
    "load_json",
]
