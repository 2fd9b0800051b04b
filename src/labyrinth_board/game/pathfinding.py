from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, List, Optional, Tuple

from .tiles import Direction

if TYPE_CHECKING:
    from .board import Board


logger = logging.getLogger(__name__)


def _links(board: "Board", pos: int) -> List[Tuple[int, Direction]]:
    """Connected neighbours of `pos` with the side each one is entered through."""
    links: List[Tuple[int, Direction]] = []
    connected = board.edges[pos]
    for side in board.tiles.flat[pos].open_sides():
        nxt = board.neighbor(pos, side)
        if nxt is not None and nxt in connected:
            links.append((nxt, side.opposite()))
    return links


def shortest_path(board: "Board", source: int, target: int) -> Optional[List[Direction]]:
    """Breadth-first search from `source` to `target` over `board.edges`.

    Each hop records the open side of the entered tile that faces back to
    the tile just left, so moving east into a tile yields WEST. Returns
    None when `target` is unreachable.
    """
    visited = [False] * board.size
    visited[source] = True
    frontier: Deque[Tuple[int, List[Direction]]] = deque([(source, [])])
    while frontier:
        pos, directions = frontier.popleft()
        if pos == target:
            logger.debug("Path %d -> %d found with %d hops", source, target, len(directions))
            return directions
        for nxt, entered_through in _links(board, pos):
            if visited[nxt]:
                continue
            visited[nxt] = True
            frontier.append((nxt, directions + [entered_through]))
    logger.debug("No path %d -> %d", source, target)
    return None


def distances(board: "Board", source: int) -> Dict[int, int]:
    """Hop count from `source` to every reachable position."""
    dist = {source: 0}
    frontier: Deque[int] = deque([source])
    while frontier:
        pos = frontier.popleft()
        for nxt in board.edges[pos]:
            if nxt not in dist:
                dist[nxt] = dist[pos] + 1
                frontier.append(nxt)
    return dist
