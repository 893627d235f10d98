from ellermaze.grid import Row
from ellermaze.render.ascii import maze_to_ascii, row_to_ascii, top_border

def test_row_to_ascii_walls_and_floors():
    row, below = Row.empty(0, 3), Row.empty(1, 3)
    row.link_right(0)
    row.link_down(1, below)
    assert row_to_ascii(row) == "|_  |_|"
    assert row_to_ascii(below) == "|_|_|_|"

def test_leading_wall_follows_left_link():
    row = Row.empty(0, 2)
    row[0].left = 0
    assert row_to_ascii(row).startswith(" ")

def test_top_border_and_maze():
    assert top_border(3) == " _ _ _"
    assert top_border(1) == " _"
    row = Row.empty(0, 3)
    row.link_right(0)
    row.link_right(1)
    assert maze_to_ascii([row]) == " _ _ _\n|_ _ _|"
    assert maze_to_ascii([]) == ""
