# src/ellermaze/mapgen/eller.py
# Eller's algorithm as an explicit state machine: one step() call finishes
# the current row and, unless it is the last one, prepares the next.

import logging
from dataclasses import dataclass, replace
from typing import List, Tuple

from ..config import MazeConfig
from ..grid import Row
from ..rng import SeedRandom, seed_text
from .sets import UNASSIGNED, fill_unassigned, group_columns, relabel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EllerState:
    row: Row
    labels: Tuple[int, ...]
    rows_produced: int = 0
    done: bool = False

    @classmethod
    def initial(cls, width: int) -> "EllerState":
        # every column starts in its own set
        return cls(row=Row.empty(0, width), labels=tuple(range(width)))


@dataclass(frozen=True)
class StepResult:
    row: Row
    done: bool


def join_row(row: Row, labels: List[int], rng: SeedRandom, wallp: float, forced: bool = False) -> None:
    """
    Horizontal pass, right to left over the pairs (c, c+1).
    Equal labels are never joined (that would close a loop). With
    forced=False a draw below wallp keeps the wall; forced=True joins every
    remaining pair without drawing, which leaves the row as one set.
    """
    for c in range(len(labels) - 2, -1, -1):
        a, b = labels[c], labels[c + 1]
        if a == b:
            continue
        if not forced and rng.random() < wallp:
            continue
        row.link_right(c)
        relabel(labels, a, b)


def descend(row: Row, labels: List[int], rng: SeedRandom, floorp: float) -> Tuple[Row, List[int]]:
    """Open floors from `row` into a fresh row and label the new row."""
    width = len(labels)
    below = Row.empty(row.index + 1, width)
    below_labels = [UNASSIGNED] * width

    def drop(c: int) -> None:
        row.link_down(c, below)
        below_labels[c] = labels[c]

    # At least one floor per set, or the set would be cut off.
    groups = group_columns(labels)
    for cols in groups.values():
        drop(cols[rng.randrange(len(cols))])

    # Scale the extra floors down by the ones already forced, so the
    # average share of open floors per row stays near floorp.
    adjusted = max(0, (floorp * width - len(groups)) / width)
    for c in range(width - 1, -1, -1):
        if row[c].down is None and rng.random() > adjusted:
            drop(c)

    fill_unassigned(below_labels)
    return below, below_labels


def step(state: EllerState, cfg: MazeConfig, rng: SeedRandom, finalize: bool = False) -> Tuple[EllerState, StepResult]:
    """
    Finish the current row. Returns the next state and the finished row.
    A done state is returned unchanged with the last row and no draws.
    """
    if state.done:
        return state, StepResult(state.row, True)

    # work on a copy so the given state can be stepped again
    row = state.row.copy()
    labels = list(state.labels)
    produced = state.rows_produced + 1
    final = finalize or (cfg.height is not None and produced >= cfg.height)

    join_row(row, labels, rng, cfg.wallp)

    if final:
        join_row(row, labels, rng, cfg.wallp, forced=True)
        row.freeze(labels)
        logger.debug("maze finished after %d rows", produced)
        return replace(state, row=row, labels=tuple(labels), rows_produced=produced, done=True), StepResult(row, True)

    below, below_labels = descend(row, labels, rng, cfg.floorp)
    row.freeze(labels)
    return EllerState(row=below, labels=tuple(below_labels), rows_produced=produced), StepResult(row, False)


class EllerMaze:
    """
    Lazy row source. next_row() pulls one row; iterating yields every row
    including the final one and then stops (never, for an unbounded height).
    """

    def __init__(self, cfg: MazeConfig):
        self.cfg = cfg
        seed = cfg.resolved_seed()
        self.rng = SeedRandom.from_seed(seed)
        self.state = EllerState.initial(cfg.width)
        logger.debug("eller maze width=%d height=%s seed=%r", cfg.width, cfg.height, seed_text(seed))

    @property
    def width(self) -> int:
        return self.cfg.width

    @property
    def rows_produced(self) -> int:
        return self.state.rows_produced

    @property
    def done(self) -> bool:
        return self.state.done

    def next_row(self, finalize: bool = False) -> StepResult:
        self.state, result = step(self.state, self.cfg, self.rng, finalize)
        return result

    def finish(self) -> StepResult:
        """Make the current row the last one."""
        return self.next_row(finalize=True)

    def __iter__(self):
        return self

    def __next__(self) -> Row:
        if self.state.done:
            raise StopIteration
        return self.next_row().row
