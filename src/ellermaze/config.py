import math
import random
from dataclasses import dataclass
from typing import Any, Optional


class ConfigError(ValueError):
    """Raised for a structurally invalid maze configuration."""


@dataclass(frozen=True)
class MazeConfig:
    # Only width is validated. Out-of-range probabilities are accepted and
    # give degenerate mazes (wallp >= 1 never removes a wall on a normal row).
    width: int
    height: Optional[float] = None   # None / math.inf = unbounded
    wallp: float = 0.5               # chance of KEEPING a wall between two sets
    floorp: float = 0.5              # target fraction of downward connections
    seed: Any = None                 # None = non-deterministic

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ConfigError(f"width must be a positive integer, got {self.width!r}")
        if self.width < 1:
            raise ConfigError(f"width must be a positive integer, got {self.width}")

    @property
    def bounded(self) -> bool:
        return self.height is not None and not math.isinf(self.height)

    def resolved_seed(self) -> Any:
        return random.random() if self.seed is None else self.seed


# Documented defaults (width has no default; 1 is a placeholder)
DEFAULTS = MazeConfig(width=1)
