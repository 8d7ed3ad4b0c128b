"""Per-tick ball simulation for Terminal Pong."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ball import Ball
from config import Config
from debug import EventType
from field import Field
from paddle import Direction, Paddle, Side


@dataclass
class StepResult:
    """Result of a single simulation step."""

    advanced: bool  # Whether the ball moved this step
    wall_bounce: bool = False  # Vertical velocity was reflected
    paddle_hit: Optional[Side] = None  # Paddle the ball bounced off
    spin: Optional[Direction] = None  # Last move of that paddle if it was a spin hit
    point_to: Optional[Side] = None  # Player who scored


def clamp_component(value: float, low: float, high: float) -> float:
    """Clamp the magnitude of a velocity component, keeping its sign."""
    sign = -1.0 if value < 0 else 1.0
    return sign * max(low, min(abs(value), high))


def clamp_velocity(vx: float, vy: float, config: Config) -> Tuple[float, float]:
    """Keep both velocity components within [min_speed, max_speed] in magnitude."""
    return (
        clamp_component(vx, config.min_speed, config.max_speed),
        clamp_component(vy, config.min_speed, config.max_speed),
    )


def apply_spin(
    vx: float, vy: float, direction: Direction, config: Config
) -> Tuple[float, float]:
    """
    Velocity after a spin hit.

    Moving the paddle up into the ball drives it back harder and flatter;
    moving it down sends it back slower and steeper. Both reverse vx.

    Args:
        vx, vy: Velocity at contact
        direction: The paddle's last move
        config: Game configuration (spin factors and clamp bounds)

    Returns:
        Clamped (vx, vy)
    """
    if direction is Direction.UP:
        fx, fy = config.spin_up_factors
    else:
        fx, fy = config.spin_down_factors
    return clamp_velocity(vx * fx, vy * fy, config)


def bounce_off_paddle(
    ball: Ball, paddle: Paddle, field: Field, config: Config, now: float
) -> Optional[Direction]:
    """
    Reflect the ball off a paddle it has reached.

    The ball is first snapped one column in from the paddle so its rounded
    cell cannot land on the paddle again before the new velocity carries it
    away.

    Returns:
        The spin direction if the paddle moved within the spin window,
        otherwise None (plain elastic bounce)
    """
    if paddle.side is Side.RIGHT:
        ball.x = float(field.right_x - 1)
    else:
        ball.x = float(field.left_x + 1)

    if paddle.last_move.is_recent(now, config.spin_window):
        direction = paddle.last_move.direction
        ball.vx, ball.vy = apply_spin(ball.vx, ball.vy, direction, config)
        return direction

    ball.vx = -ball.vx
    return None


def step(game, now: float) -> StepResult:
    """
    Advance the ball by one tick if the tick interval has elapsed.

    Does nothing while the round is dead. Otherwise the ball moves once
    per `game.tick_interval`, independent of how often this is called.

    Args:
        game: The Game session to advance
        now: Current monotonic clock reading in seconds

    Returns:
        StepResult describing what happened
    """
    data = game.data
    if data.dead:
        return StepResult(advanced=False)
    if not now - data.last_tick > game.tick_interval:
        return StepResult(advanced=False)
    data.last_tick = now

    field = game.field
    config = game.config
    ball = data.ball
    logger = game.logger

    x, y = ball.update()
    result = StepResult(advanced=True)
    if logger:
        logger.log(
            EventType.BALL_TICK,
            {"x": ball.x, "y": ball.y, "vx": ball.vx, "vy": ball.vy},
            f"Ball at {(x, y)}",
        )

    # Top and bottom walls reflect back into the field. Only a ball heading
    # outward flips; a slow ball can spend two ticks on the wall row and
    # must not flip back out on the second one.
    if field.is_vertical_wall(y):
        if (y <= 0 and ball.vy < 0) or (y >= field.bottom_y and ball.vy > 0):
            ball.vy = -ball.vy
            result.wall_bounce = True
            if logger:
                logger.log(EventType.WALL_BOUNCE, {"y": y, "vy": ball.vy},
                           "Ball bounced off a wall")
        ball.y = field.clamp_y(ball.y)
        y = ball.cell[1]

    if x >= field.right_x:
        edge_side = Side.RIGHT
    elif x <= field.left_x:
        edge_side = Side.LEFT
    else:
        return result

    paddle = data.paddle(edge_side)
    edge_x = field.right_x if edge_side is Side.RIGHT else field.left_x
    if paddle.contains((edge_x, y)):
        spin = bounce_off_paddle(ball, paddle, field, config, now)
        result.paddle_hit = edge_side
        result.spin = spin
        if logger:
            if spin is None:
                logger.log(EventType.PADDLE_BOUNCE,
                           {"side": edge_side.value, "vx": ball.vx, "vy": ball.vy},
                           f"Ball returned by {edge_side.value} paddle")
            else:
                logger.log(EventType.SPIN_BOUNCE,
                           {"side": edge_side.value, "spin": spin.value,
                            "vx": ball.vx, "vy": ball.vy},
                           f"Spin hit ({spin.value}) by {edge_side.value} paddle")
        return result

    # Missed: the ball stays in the scoring column for display
    ball.x = float(edge_x)
    scorer = edge_side.opponent
    game.award_point(scorer)
    data.dead = True
    result.point_to = scorer
    return result
