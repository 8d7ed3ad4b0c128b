"""
Terminal Pong

Two-player pong drawn in monospace character cells, with a spin model
that rewards moving the paddle into the ball.
"""

from ball import Ball, create_center_ball
from config import DEFAULT_CONFIG, PRESETS, Config
from field import Field
from game import Game, GameData
from paddle import Direction, LastMove, Paddle, Side, create_paddles
from stepper import StepResult

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "PRESETS",
    "Field",
    "Ball",
    "create_center_ball",
    "Direction",
    "Side",
    "LastMove",
    "Paddle",
    "create_paddles",
    "Game",
    "GameData",
    "StepResult",
]
