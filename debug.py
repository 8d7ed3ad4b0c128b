"""
Debug logging system for Terminal Pong.

Records simulation events (ticks, bounces, points, player commands) so a
session can be inspected after the terminal has been restored.
"""

import json
from dataclasses import dataclass
from typing import List, Dict, Any
from enum import Enum


class EventType(Enum):
    """Types of debug events."""

    # Ball events
    BALL_TICK = "ball_tick"
    WALL_BOUNCE = "wall_bounce"
    PADDLE_BOUNCE = "paddle_bounce"
    SPIN_BOUNCE = "spin_bounce"

    # Player commands
    PADDLE_MOVE = "paddle_move"
    PADDLE_RESIZE = "paddle_resize"
    SPEED_CHANGE = "speed_change"

    # Round events
    GAME_START = "game_start"
    GAME_RESTART = "game_restart"
    POINT_SCORED = "point_scored"

    # Validation events
    VALIDATION_ERROR = "validation_error"
    VALIDATION_WARNING = "validation_warning"


@dataclass
class DebugEvent:
    """One thing that happened during a frame of the driver loop."""

    frame: int
    event_type: EventType
    data: Dict[str, Any]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "type": self.event_type.value,
            "data": self.data,
            "message": self.message,
        }

    def describe(self) -> str:
        """Single line such as `[00042] point_scored: Point to left (side=left)`."""
        line = f"[{self.frame:05d}] {self.event_type.value}: {self.message}"
        if self.data:
            details = ", ".join(f"{key}={value}" for key, value in self.data.items())
            line += f" ({details})"
        return line


# Event types reported as problems at the end of a session
PROBLEM_TYPES = (
    (EventType.VALIDATION_ERROR, "Broken state"),
    (EventType.VALIDATION_WARNING, "Rejected commands"),
)


class DebugLogger:
    """
    Session log for a pong game.

    Frames count driver loop iterations, so every bounce, point and key
    command can be traced back to the iteration that produced it. Ball
    ticks are recorded too, which is why the log keeps only the newest
    `max_events` entries.
    """

    def __init__(self, enabled: bool = True, max_events: int = 10000):
        self.enabled = enabled
        self.max_events = max_events
        self.events: List[DebugEvent] = []
        self.frame = 0
        self.print_live = False  # Echo each event to stdout as it is logged

    def log(self, event_type: EventType, data: Dict[str, Any], message: str = ""):
        """Record an event in the current frame (no-op when disabled)."""
        if not self.enabled:
            return

        event = DebugEvent(self.frame, event_type, data, message)
        self.events.append(event)
        if self.print_live:
            print(event.describe())

        overflow = len(self.events) - self.max_events
        if overflow > 0:
            del self.events[:overflow]

    def next_frame(self):
        self.frame += 1

    def reset(self):
        """Forget every event and start counting frames from zero."""
        self.events = []
        self.frame = 0

    def get_events_by_type(self, event_type: EventType) -> List[DebugEvent]:
        return [e for e in self.events if e.event_type is event_type]

    def recent(self, n: int) -> List[DebugEvent]:
        """The newest `n` events, oldest first."""
        return self.events[-n:] if n > 0 else []

    def count_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for event in self.events:
            type_name = event.event_type.value
            counts[type_name] = counts.get(type_name, 0) + 1
        return counts

    def print_summary(self, shown: int = 5):
        """Print rally totals and any problems seen during the session."""
        counts = self.count_by_type()

        print("\n" + "-" * 60)
        print(f"Pong session log: {self.frame} frames, {len(self.events)} events")
        print(
            f"  ball ticks {counts.get(EventType.BALL_TICK.value, 0)}"
            f"  wall bounces {counts.get(EventType.WALL_BOUNCE.value, 0)}"
            f"  returns {counts.get(EventType.PADDLE_BOUNCE.value, 0)}"
            f"  spin hits {counts.get(EventType.SPIN_BOUNCE.value, 0)}"
            f"  points {counts.get(EventType.POINT_SCORED.value, 0)}"
        )

        for event_type, title in PROBLEM_TYPES:
            problems = self.get_events_by_type(event_type)
            if not problems:
                continue
            print(f"\n{title}: {len(problems)}")
            for event in problems[:shown]:
                print(f"  frame {event.frame}: {event.message}")
            if len(problems) > shown:
                print(f"  ... {len(problems) - shown} more")

        print("-" * 60)

    def export_json(self, filepath: str):
        """Write the session log, with per-type counts, to a JSON file."""
        data = {
            "total_frames": self.frame,
            "counts": self.count_by_type(),
            "events": [e.to_dict() for e in self.events],
        }
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        print(f"Exported {len(self.events)} events to {filepath}")


class GameValidator:
    """
    Validates game state to catch bugs early.

    Checks for:
    - Ball cell off the board
    - Broken paddles (gaps, wrong column, wrong length)
    """

    def __init__(self, logger: DebugLogger, field):
        self.logger = logger
        self.field = field

    def validate_ball(self, ball) -> bool:
        """Check that the ball's rounded cell is on the board."""
        cell = ball.cell
        if self.field.contains(cell):
            return True
        self.logger.log(
            EventType.VALIDATION_ERROR,
            {"x": ball.x, "y": ball.y, "cell": list(cell)},
            f"Ball cell {cell} is off the board",
        )
        return False

    def validate_paddle(self, paddle, expected_length: int) -> bool:
        """Check paddle contiguity, column and length."""
        is_valid = True
        xs = {x for x, _ in paddle.segments}
        ys = [y for _, y in paddle.segments]

        if len(xs) != 1:
            self.logger.log(
                EventType.VALIDATION_ERROR,
                {"side": paddle.side.value, "columns": sorted(xs)},
                f"{paddle.side.value} paddle spans several columns",
            )
            is_valid = False

        if not ys or ys != list(range(ys[0], ys[0] + len(ys))):
            self.logger.log(
                EventType.VALIDATION_ERROR,
                {"side": paddle.side.value, "rows": ys},
                f"{paddle.side.value} paddle is not contiguous",
            )
            is_valid = False

        if paddle.length != expected_length:
            self.logger.log(
                EventType.VALIDATION_ERROR,
                {"side": paddle.side.value, "length": paddle.length,
                 "expected": expected_length},
                f"{paddle.side.value} paddle has length {paddle.length}, "
                f"expected {expected_length}",
            )
            is_valid = False

        if ys and (ys[0] < 0 or ys[-1] > self.field.bottom_y):
            self.logger.log(
                EventType.VALIDATION_ERROR,
                {"side": paddle.side.value, "rows": ys},
                f"{paddle.side.value} paddle is off the board",
            )
            is_valid = False

        return is_valid

    def validate_game(self, game) -> bool:
        """Run every check against a game; returns True if all pass."""
        results = [
            self.validate_ball(game.data.ball),
            self.validate_paddle(game.data.left_paddle, game.paddle_len),
            self.validate_paddle(game.data.right_paddle, game.paddle_len),
        ]
        return all(results)
