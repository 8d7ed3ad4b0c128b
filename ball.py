"""Ball logic for Terminal Pong."""

import math
from dataclasses import dataclass
from typing import Tuple

from config import Config
from field import Cell, Field, round_cell


@dataclass
class Ball:
    """
    The ball with a continuous position and a per-tick velocity.

    The position is kept as floats so that spin hits can change the
    trajectory angle; the cell it is drawn in (and collides from) is the
    rounded position.
    """

    x: float
    y: float
    vx: float = 1.0
    vy: float = 1.0

    def update(self) -> Cell:
        """
        Advance the ball by one tick.

        Returns:
            The rounded cell the ball now occupies
        """
        self.x += self.vx
        self.y += self.vy
        return self.cell

    @property
    def cell(self) -> Cell:
        """Get the discrete cell of the ball."""
        return round_cell(self.x, self.y)

    @property
    def position(self) -> Tuple[float, float]:
        """Get ball position as tuple."""
        return (self.x, self.y)

    @property
    def velocity(self) -> Tuple[float, float]:
        """Get ball velocity as tuple."""
        return (self.vx, self.vy)

    def get_speed(self) -> float:
        """Get the current speed of the ball."""
        return math.sqrt(self.vx**2 + self.vy**2)

    def reset(self, x: float, y: float, vx: float, vy: float) -> None:
        """Reset ball to a position and velocity."""
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy


def create_center_ball(field: Field, config: Config) -> Ball:
    """
    Create a ball at the board centre moving with the initial velocity.

    Args:
        field: The board
        config: Game configuration

    Returns:
        Ball ready for a new round
    """
    center_x, center_y = field.center
    vx, vy = config.initial_velocity
    return Ball(x=center_x, y=center_y, vx=vx, vy=vy)
