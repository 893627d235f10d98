import math

import pytest

from ellermaze.config import DEFAULTS, ConfigError, MazeConfig
from ellermaze.mapgen.generator import generate_maze

def test_defaults():
    assert DEFAULTS.height is None
    assert DEFAULTS.wallp == 0.5 and DEFAULTS.floorp == 0.5
    assert DEFAULTS.seed is None

@pytest.mark.parametrize("width", [0, -3, 2.5, "3", None, True])
def test_bad_width_rejected(width):
    with pytest.raises(ConfigError):
        MazeConfig(width=width)

def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        MazeConfig(width=0)

def test_other_fields_not_validated():
    cfg = MazeConfig(width=2, height=-1, wallp=7, floorp=-2, seed=object())
    assert cfg.wallp == 7 and cfg.floorp == -2

def test_bounded():
    assert MazeConfig(width=2, height=3).bounded
    assert not MazeConfig(width=2).bounded
    assert not MazeConfig(width=2, height=math.inf).bounded

def test_resolved_seed():
    assert MazeConfig(width=2, seed="s").resolved_seed() == "s"
    assert MazeConfig(width=2, seed=0).resolved_seed() == 0
    v = MazeConfig(width=2).resolved_seed()
    assert isinstance(v, float) and 0.0 <= v < 1.0

def test_generate_maze_needs_finite_height():
    with pytest.raises(ConfigError):
        generate_maze(MazeConfig(width=3))
    with pytest.raises(ConfigError):
        generate_maze(MazeConfig(width=3, height=math.inf))

def test_non_positive_height_gives_one_row():
    rows = generate_maze(MazeConfig(width=3, height=0, seed="zero"))
    assert len(rows) == 1
