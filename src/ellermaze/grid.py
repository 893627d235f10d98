from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple


class FrozenRowError(RuntimeError):
    """A finished row was asked to change its links."""


@dataclass
class Cell:
    # Links are column indices, never object references:
    # left/right point into the same row, up/down into the row above/below.
    col: int
    left: Optional[int] = None
    right: Optional[int] = None
    up: Optional[int] = None
    down: Optional[int] = None

    def __setattr__(self, name, value):
        # sealed is set once, outside the dataclass fields, by Row.freeze()
        if self.__dict__.get("sealed"):
            raise FrozenRowError(f"cell {self.col} belongs to a finished row")
        super().__setattr__(name, value)

    def as_tuple(self) -> Tuple[Optional[int], ...]:
        return (self.left, self.right, self.up, self.down)


@dataclass
class Row:
    """
    One maze row. Once frozen, neither the row nor its cells accept writes;
    cells becomes a tuple.
    """
    index: int
    cells: Sequence[Cell]
    labels: Tuple[int, ...] = ()
    frozen: bool = False

    @classmethod
    def empty(cls, index: int, width: int) -> "Row":
        return cls(index=index, cells=[Cell(col=c) for c in range(width)])

    def copy(self) -> "Row":
        """Unfrozen copy with the same links."""
        return Row(index=self.index, cells=[replace(c) for c in self.cells])

    def __setattr__(self, name, value):
        if self.__dict__.get("frozen"):
            raise FrozenRowError(f"row {self.index} is finished")
        super().__setattr__(name, value)

    @property
    def width(self) -> int:
        return len(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, col: int) -> Cell:
        return self.cells[col]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def _check_open(self) -> None:
        if self.frozen:
            raise FrozenRowError(f"row {self.index} is finished")

    def link_right(self, col: int) -> None:
        """Open the wall between col and col+1 (both directions at once)."""
        self._check_open()
        self.cells[col].right = col + 1
        self.cells[col + 1].left = col

    def link_down(self, col: int, below: "Row") -> None:
        """Open the floor under col into the same column of `below`."""
        self._check_open()
        below._check_open()
        self.cells[col].down = col
        below.cells[col].up = col

    def freeze(self, labels) -> None:
        # labels are the set labels the row finished with
        self.labels = tuple(labels)
        self.cells = tuple(self.cells)
        for cell in self.cells:
            object.__setattr__(cell, "sealed", True)
        self.frozen = True

    def links(self) -> List[Tuple[Optional[int], ...]]:
        return [c.as_tuple() for c in self.cells]
