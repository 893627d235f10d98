# src/ellermaze/render/ascii.py
# Text rendering of finished rows: two characters per column.

from typing import Iterable, List

from ..grid import Row

WALL = "|"
FLOOR = "_"
OPEN = " "


def row_to_ascii(row: Row) -> str:
    """
    Leading wall for column 0 unless it links left, then per column
    (floor or gap, right wall or gap).
    """
    parts = [WALL if row[0].left is None else OPEN]
    for cell in row:
        parts.append(FLOOR if cell.down is None else OPEN)
        parts.append(WALL if cell.right is None else OPEN)
    return "".join(parts)


def top_border(width: int) -> str:
    return OPEN + OPEN.join(FLOOR * width)


def maze_to_ascii(rows: Iterable[Row]) -> str:
    lines: List[str] = []
    for row in rows:
        if not lines:
            lines.append(top_border(len(row)))
        lines.append(row_to_ascii(row))
    return "\n".join(lines)
