"""Board geometry for Terminal Pong."""

import math
from typing import List, Tuple

from config import Config

Cell = Tuple[int, int]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def round_cell(x: float, y: float) -> Cell:
    """Discrete board cell for a continuous position."""
    return (round_half_away(x), round_half_away(y))


class Field:
    """
    The pong board: a grid of width x height character cells.

    Column 0 holds the left paddle and column width-1 the right paddle.
    Rows 0 and height-1 are the walls the ball bounces off.
    """

    def __init__(self, config: Config):
        self.config = config
        self.width = config.field_width
        self.height = config.field_height

    @property
    def center(self) -> Tuple[float, float]:
        """Get the continuous centre of the board."""
        return (float(self.width // 2), float(self.height // 2))

    @property
    def left_x(self) -> int:
        return 0

    @property
    def right_x(self) -> int:
        return self.width - 1

    @property
    def bottom_y(self) -> int:
        return self.height - 1

    def contains(self, cell: Cell) -> bool:
        """Check if a cell lies on the board."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_vertical_wall(self, y: int) -> bool:
        """Check if a rounded row is on (or past) the top or bottom wall."""
        return y <= 0 or y >= self.bottom_y

    def clamp_y(self, y: float) -> float:
        """Clamp a continuous row onto the board."""
        return max(0.0, min(y, float(self.bottom_y)))

    def net_cells(self) -> List[Cell]:
        """Cells of the dashed centre line (cosmetic only)."""
        net_x = self.width // 2
        return [(net_x, y) for y in range(0, self.height, 2)]
