"""Paddle logic for Terminal Pong."""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import List, Optional, Tuple

from config import Config
from field import Cell, Field


class Direction(Enum):
    """Vertical direction of a paddle move or a speed/length adjustment."""

    UP = "up"
    DOWN = "down"


class Side(Enum):
    """Which player (and paddle) an action belongs to."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass
class LastMove:
    """
    Most recent paddle move and when it happened.

    A timestamp of None means the paddle has not moved since the round
    started, so it can never put spin on the ball.
    """

    direction: Direction = Direction.UP
    timestamp: Optional[float] = None

    def is_recent(self, now: float, window: float) -> bool:
        """Check if the move happened less than `window` seconds before `now`."""
        if self.timestamp is None:
            return False
        return now - self.timestamp < window


@dataclass
class Paddle:
    """
    A vertical paddle: contiguous cells in one column, top to bottom.

    Segments always share the same x and increase by one in y.
    """

    side: Side
    segments: List[Cell]
    last_move: LastMove = dataclass_field(default_factory=LastMove)

    @property
    def x(self) -> int:
        return self.segments[0][0]

    @property
    def top(self) -> int:
        return self.segments[0][1]

    @property
    def bottom(self) -> int:
        return self.segments[-1][1]

    @property
    def length(self) -> int:
        return len(self.segments)

    def contains(self, cell: Cell) -> bool:
        """Check if the paddle occupies a cell."""
        x, y = cell
        return x == self.x and self.top <= y <= self.bottom

    def move(self, direction: Direction, field: Field, now: float) -> bool:
        """
        Shift the paddle one row.

        A paddle already touching the wall in the requested direction does
        not move and keeps its previous LastMove, so a clamped paddle never
        counts as "just moved" for spin.

        Args:
            direction: UP or DOWN
            field: The board (for wall limits)
            now: Clock reading recorded as the move time

        Returns:
            True if the paddle moved
        """
        if direction is Direction.DOWN:
            if self.bottom >= field.bottom_y:
                return False
            self.segments = [(x, y + 1) for x, y in self.segments]
        else:
            if self.top <= 0:
                return False
            self.segments = [(x, y - 1) for x, y in self.segments]

        self.last_move = LastMove(direction=direction, timestamp=now)
        return True

    def grow(self, field: Field) -> bool:
        """
        Add one segment below the paddle (above it when the bottom is on the wall).

        Returns:
            False if the paddle already spans the whole board
        """
        if self.length >= field.height:
            return False
        if self.bottom < field.bottom_y:
            self.segments.append((self.x, self.bottom + 1))
        else:
            self.segments.insert(0, (self.x, self.top - 1))
        return True

    def shrink(self, min_length: int = 1) -> bool:
        """
        Drop the lowest segment.

        Returns:
            False if the paddle is already at the minimum length
        """
        if self.length <= min_length:
            return False
        self.segments.pop()
        return True


def create_paddles(field: Field, config: Config, length: int) -> Tuple[Paddle, Paddle]:
    """
    Create both paddles at their starting rows.

    Args:
        field: The board
        config: Game configuration
        length: Number of segments per paddle

    Returns:
        Tuple of (left_paddle, right_paddle)
    """
    top = config.get_paddle_offset(length)
    rows = range(top, top + length)

    left = Paddle(side=Side.LEFT, segments=[(field.left_x, y) for y in rows])
    right = Paddle(side=Side.RIGHT, segments=[(field.right_x, y) for y in rows])

    return (left, right)
