"""Flood fill over finished rows; checks that a maze has no sealed-off cells."""
from collections import deque
from typing import List, Sequence, Set, Tuple

from ..grid import Row

Coord = Tuple[int, int]  # (row, col)


def neighbours(rows: Sequence[Row], r: int, c: int) -> List[Coord]:
    cell = rows[r][c]
    out = []
    if cell.left is not None:
        out.append((r, cell.left))
    if cell.right is not None:
        out.append((r, cell.right))
    if cell.up is not None and r > 0:
        out.append((r - 1, cell.up))
    if cell.down is not None and r + 1 < len(rows):
        out.append((r + 1, cell.down))
    return out


def flood_reachable(rows: Sequence[Row], start: Coord = (0, 0)) -> Set[Coord]:
    if not rows:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        r, c = q.popleft()
        for nxt in neighbours(rows, r, c):
            if nxt not in visited:
                visited.add(nxt)
                q.append(nxt)
    return visited


def is_fully_connected(rows: Sequence[Row]) -> bool:
    total = sum(len(row) for row in rows)
    return len(flood_reachable(rows)) == total
