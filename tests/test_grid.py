import pytest

from ellermaze.grid import Cell, FrozenRowError, Row

def test_link_right_sets_both_sides():
    row = Row.empty(0, 4)
    row.link_right(1)
    assert row[1].right == 2 and row[2].left == 1
    assert row[0].as_tuple() == (None, None, None, None)
    assert row[3].as_tuple() == (None, None, None, None)

def test_link_down_sets_both_rows():
    top, below = Row.empty(0, 3), Row.empty(1, 3)
    top.link_down(2, below)
    assert top[2].down == 2 and below[2].up == 2
    assert top[0].down is None and below[0].up is None

def test_frozen_row_rejects_links():
    row, below = Row.empty(0, 3), Row.empty(1, 3)
    row.freeze([0, 0, 1])
    assert row.labels == (0, 0, 1)
    with pytest.raises(FrozenRowError):
        row.link_right(0)
    with pytest.raises(FrozenRowError):
        row.link_down(0, below)
    assert below[0].up is None

def test_row_sequence_protocol():
    row = Row.empty(5, 3)
    assert len(row) == row.width == 3
    assert [c.col for c in row] == [0, 1, 2]
    assert row.index == 5

def test_frozen_row_rejects_direct_writes():
    row = Row.empty(0, 3)
    row.link_right(0)
    row.freeze([0, 0, 1])
    with pytest.raises(FrozenRowError):
        row[0].left = 0
    with pytest.raises(FrozenRowError):
        row[2].down = 2
    with pytest.raises(FrozenRowError):
        row.frozen = False
    with pytest.raises(FrozenRowError):
        row.labels = (9, 9, 9)
    with pytest.raises(AttributeError):
        row.cells.append(Cell(col=3))
    assert len(row) == 3 and row[0].right == 1 and row.frozen

def test_copy_is_unfrozen_and_independent():
    row, below = Row.empty(0, 3), Row.empty(1, 3)
    row.link_down(1, below)
    row.freeze([0, 1, 2])
    dup = below.copy()
    dup.link_right(0)
    assert dup[1].up == 1 and dup[0].right == 1
    assert below[0].right is None
    dup.freeze([0, 0, 2])
    assert dup.frozen and not below.frozen
