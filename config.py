"""Configuration for Terminal Pong."""

import json
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, Tuple


@dataclass
class Config:
    """Configuration parameters for the pong simulation."""

    # Board dimensions (in character cells)
    field_width: int = 20
    field_height: int = 20

    # Paddle properties
    paddle_length: int = 3
    paddle_offset: Optional[int] = None  # Top row of both paddles; None = centred
    min_paddle_length: int = 1

    # Ball timing (seconds)
    tick_interval: float = 0.1
    speed_step: float = 0.02
    min_tick_interval: float = 0.02

    # Ball motion
    initial_velocity: Tuple[float, float] = (1.0, 1.0)
    spin_window: float = 0.2  # Paddle move this recent turns a bounce into a spin hit
    spin_up_factors: Tuple[float, float] = (-1.2, 0.8)  # (vx, vy) multipliers
    spin_down_factors: Tuple[float, float] = (-0.8, 1.2)
    min_speed: float = 0.3  # Per-axis magnitude bounds after a spin hit
    max_speed: float = 1.8

    # Driver loop / display
    poll_interval: float = 0.01
    cell_width: int = 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        values = {k: v for k, v in data.items() if hasattr(cls, k)}
        # JSON has no tuples
        for key in ("initial_velocity", "spin_up_factors", "spin_down_factors"):
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)

    @classmethod
    def from_json(cls, filepath: str) -> "Config":
        """Load config from a JSON file."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def preset(cls, name: str, **overrides: Any) -> "Config":
        """Create a config from one of the named board presets."""
        if name not in PRESETS:
            raise ValueError(
                f"Unknown preset '{name}' (choose from {', '.join(sorted(PRESETS))})"
            )
        values = dict(PRESETS[name])
        values.update(overrides)
        return cls(**values)

    def get_paddle_offset(self, length: Optional[int] = None) -> int:
        """
        Top row at which paddles are placed.

        Args:
            length: Paddle length to place (defaults to paddle_length)

        Returns:
            Row index such that the whole paddle fits on the board.
        """
        length = self.paddle_length if length is None else length
        if self.paddle_offset is None:
            offset = self.field_height // 2 - length // 2
        else:
            offset = self.paddle_offset
        return max(0, min(offset, self.field_height - length))

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot describe a playable board."""
        if self.field_width < 3 or self.field_height < 3:
            raise ValueError(
                f"Board must be at least 3x3, got {self.field_width}x{self.field_height}"
            )
        if self.min_paddle_length < 1:
            raise ValueError("min_paddle_length must be at least 1")
        if not self.min_paddle_length <= self.paddle_length <= self.field_height:
            raise ValueError(
                f"paddle_length must be between {self.min_paddle_length} "
                f"and {self.field_height}, got {self.paddle_length}"
            )
        if self.min_tick_interval <= 0 or self.tick_interval <= 0:
            raise ValueError("tick intervals must be positive")
        if self.tick_interval < self.min_tick_interval:
            raise ValueError(
                f"tick_interval must be at least {self.min_tick_interval * 1000:.0f}ms, "
                f"got {self.tick_interval * 1000:.0f}ms"
            )
        if self.speed_step <= 0:
            raise ValueError("speed_step must be positive")
        if not 0 < self.min_speed <= self.max_speed:
            raise ValueError("speed bounds must satisfy 0 < min_speed <= max_speed")
        if self.cell_width < 1:
            raise ValueError("cell_width must be at least 1")


# Board sizes used by earlier versions of the game
PRESETS: Dict[str, Dict[str, Any]] = {
    "classic": {"field_width": 20, "field_height": 20},
    "medium": {"field_width": 45, "field_height": 26, "cell_width": 1},
    "wide": {"field_width": 90, "field_height": 26, "cell_width": 1},
}


# Default configuration instance
DEFAULT_CONFIG = Config()
