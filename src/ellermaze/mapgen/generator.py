# src/ellermaze/mapgen/generator.py
# Convenience entry points over EllerMaze.

from typing import Iterator, List, Optional

from ..config import ConfigError, MazeConfig
from ..grid import Row
from .eller import EllerMaze


def iter_rows(cfg: MazeConfig, limit: Optional[int] = None) -> Iterator[Row]:
    """
    Yield rows lazily. With `limit`, at most that many rows are pulled and
    the last one is finalized, so even an unbounded maze ends closed.
    """
    maze = EllerMaze(cfg)
    if limit is None:
        yield from maze
        return
    for _ in range(limit - 1):
        if maze.done:
            return
        yield maze.next_row().row
    if not maze.done and limit > 0:
        yield maze.finish().row


def generate_maze(cfg: MazeConfig) -> List[Row]:
    if not cfg.bounded:
        raise ConfigError("generate_maze needs a finite height; use iter_rows for unbounded mazes")
    return list(EllerMaze(cfg))
