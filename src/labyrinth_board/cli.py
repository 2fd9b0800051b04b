from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from labyrinth_board.game import Board, DecodeError, Direction, Rotation, load_json, save_json


logger = logging.getLogger(__name__)


def _direction(value: str) -> Direction:
    try:
        return Direction[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"invalid direction {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="labyrinth-board", description="Inspect and edit labyrinth board files")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the board grid")
    show.add_argument("file", type=Path)

    rotate = sub.add_parser("rotate", help="Rotate one tile and save the board")
    rotate.add_argument("file", type=Path)
    rotate.add_argument("row", type=int)
    rotate.add_argument("col", type=int)
    rotate.add_argument("--left", action="store_true", help="Rotate left instead of right")
    rotate.add_argument("--output", type=Path, default=None)

    move = sub.add_parser("move", help="Slide the line through a cell and save the board")
    move.add_argument("file", type=Path)
    move.add_argument("row", type=int)
    move.add_argument("col", type=int)
    move.add_argument("direction", type=_direction)
    move.add_argument("--output", type=Path, default=None)

    path = sub.add_parser("path", help="Print the shortest path between two cells")
    path.add_argument("file", type=Path)
    path.add_argument("from_row", type=int)
    path.add_argument("from_col", type=int)
    path.add_argument("to_row", type=int)
    path.add_argument("to_col", type=int)
    return p


def _run(args: argparse.Namespace) -> None:
    board: Board = load_json(args.file)

    if args.command == "show":
        print(board, end="")
    elif args.command == "rotate":
        board.rotate((args.row, args.col), Rotation.LEFT if args.left else Rotation.RIGHT)
        save_json(board, args.output or args.file)
        print(board, end="")
    elif args.command == "move":
        moved = board.move((args.row, args.col), args.direction)
        if moved:
            save_json(board, args.output or args.file)
        print("moved" if moved else "blocked")
        print(board, end="")
    elif args.command == "path":
        directions = board.shortest_path((args.from_row, args.from_col), (args.to_row, args.to_col))
        if directions is None:
            print("no path")
        else:
            print(" ".join(d.name.title() for d in directions))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        _run(args)
    except (DecodeError, OSError, IndexError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
