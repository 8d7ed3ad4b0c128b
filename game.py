"""Game state and session logic for Terminal Pong."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import stepper
from ball import Ball, create_center_ball
from config import Config
from debug import DebugLogger, EventType
from field import Field
from paddle import Direction, Paddle, Side, create_paddles
from stepper import StepResult


@dataclass
class GameData:
    """Everything that belongs to a single round; replaced on restart."""

    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    last_tick: float
    dead: bool = False

    def paddle(self, side: Side) -> Paddle:
        return self.left_paddle if side is Side.LEFT else self.right_paddle


class Game:
    """
    A pong session: the current round plus settings and scores that
    survive restarts.

    Handles:
    - Round lifecycle (start, restart keeping paddle placement)
    - Player commands (paddle moves, ball speed, paddle length)
    - Advancing the simulation, one tick per elapsed tick interval
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[DebugLogger] = None,
    ):
        self.config = config or Config()
        self.config.validate()
        self.field = Field(self.config)
        self.clock = clock
        self.logger = logger

        # Session state (never reset by restart)
        self.tick_interval = self.config.tick_interval
        self.paddle_len = self.config.paddle_length
        self.scores = [0, 0]  # [left_score, right_score]

        self.data = self._new_round()
        self._log(EventType.GAME_START,
                  {"width": self.field.width, "height": self.field.height},
                  "Game started")

    def _log(self, event_type: EventType, data: Dict[str, Any], message: str) -> None:
        if self.logger:
            self.logger.log(event_type, data, message)

    def _new_round(self) -> GameData:
        """Fresh round data with paddles at their starting rows."""
        left, right = create_paddles(self.field, self.config, self.paddle_len)
        return GameData(
            left_paddle=left,
            right_paddle=right,
            ball=create_center_ball(self.field, self.config),
            last_tick=self.clock(),
        )

    def restart(self) -> None:
        """
        Start a new round.

        Ball, velocity, tick timer, spin history and the dead flag are
        reset. Paddles stay where they are; only their move history is
        cleared. Scores are kept.
        """
        left = self.data.left_paddle.segments
        right = self.data.right_paddle.segments
        self.data = self._new_round()
        self.data.left_paddle.segments = list(left)
        self.data.right_paddle.segments = list(right)
        self._log(EventType.GAME_RESTART, {"scores": list(self.scores)}, "Round restarted")

    def move_paddle(self, direction: Direction, side: Side) -> bool:
        """
        Move one player's paddle a row up or down.

        Returns:
            True if the paddle moved (False at the wall)
        """
        paddle = self.data.paddle(side)
        moved = paddle.move(direction, self.field, self.clock())
        if moved:
            self._log(EventType.PADDLE_MOVE,
                      {"side": side.value, "direction": direction.value,
                       "top": paddle.top},
                      f"{side.value} paddle moved {direction.value}")
        return moved

    def ball_speed(self, direction: Direction) -> bool:
        """
        Change the ball tick interval by one speed step.

        UP shortens the interval (faster ball), DOWN lengthens it. The
        interval never drops below min_tick_interval.

        Returns:
            True if the interval changed
        """
        step = self.config.speed_step
        if direction is Direction.UP:
            new_interval = round(self.tick_interval - step, 6)
            if new_interval < self.config.min_tick_interval:
                new_interval = self.config.min_tick_interval
        else:
            new_interval = round(self.tick_interval + step, 6)

        if new_interval == self.tick_interval:
            self._log(EventType.VALIDATION_WARNING,
                      {"tick_interval": self.tick_interval},
                      "Ball is already at maximum speed")
            return False

        self.tick_interval = new_interval
        self._log(EventType.SPEED_CHANGE, {"tick_interval": new_interval},
                  f"Ball tick interval now {new_interval * 1000:.0f}ms")
        return True

    def paddle_length(self, direction: Direction) -> bool:
        """
        Grow (UP) or shrink (DOWN) both paddles by one segment.

        Returns:
            True if the paddles changed length
        """
        paddles = (self.data.left_paddle, self.data.right_paddle)
        if direction is Direction.UP:
            changed = all([p.grow(self.field) for p in paddles])
        else:
            changed = all([p.shrink(self.config.min_paddle_length) for p in paddles])

        if not changed:
            self._log(EventType.VALIDATION_WARNING,
                      {"paddle_len": self.paddle_len, "direction": direction.value},
                      "Paddle length is at its limit")
            return False

        self.paddle_len = paddles[0].length
        self._log(EventType.PADDLE_RESIZE, {"paddle_len": self.paddle_len},
                  f"Paddle length now {self.paddle_len}")
        return True

    def award_point(self, side: Side) -> None:
        """Give a point to a player."""
        index = 0 if side is Side.LEFT else 1
        self.scores[index] += 1
        self._log(EventType.POINT_SCORED,
                  {"side": side.value, "scores": list(self.scores)},
                  f"Point to {side.value}")

    def step(self, now: Optional[float] = None) -> StepResult:
        """
        Run the simulation step for this loop iteration.

        Args:
            now: Clock reading to use (defaults to the game clock)

        Returns:
            StepResult describing what happened
        """
        return stepper.step(self, self.clock() if now is None else now)

    def get_observation(self) -> Dict[str, Any]:
        """
        Get a read-only snapshot of the game for rendering.

        Returns:
            Dictionary containing board, paddle, ball and score information
        """
        return {
            "field_width": self.field.width,
            "field_height": self.field.height,
            "left_paddle": list(self.data.left_paddle.segments),
            "right_paddle": list(self.data.right_paddle.segments),
            "ball": self.data.ball.cell,
            "ball_velocity": self.data.ball.velocity,
            "net": self.field.net_cells(),
            "score_left": self.scores[0],
            "score_right": self.scores[1],
            "dead": self.data.dead,
            "tick_interval": self.tick_interval,
            "paddle_len": self.paddle_len,
        }

    @property
    def is_dead(self) -> bool:
        """Check if the ball is out and the round awaits a restart."""
        return self.data.dead
