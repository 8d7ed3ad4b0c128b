"""Rally statistics for Terminal Pong."""

from collections import deque
from typing import Deque

from paddle import Side
from stepper import StepResult


class StatsTracker:
    """Tracks rallies and hits across rounds.

    Fed with every StepResult from the driver loop, separately from the
    game itself so scores stay the only state a restart keeps.
    """

    def __init__(self, max_events: int = 8):
        self.rounds = 0
        self.points = [0, 0]  # [left, right]
        self.paddle_hits = [0, 0]
        self.spin_hits = [0, 0]
        self.wall_bounces = 0
        self.current_rally = 0
        self.longest_rally = 0
        self.ticks = 0

        # Event log
        self.event_log: Deque[str] = deque(maxlen=max_events)

    def record(self, result: StepResult) -> None:
        """Record the outcome of one simulation step."""
        if not result.advanced:
            return
        self.ticks += 1

        if result.wall_bounce:
            self.wall_bounces += 1

        if result.paddle_hit is not None:
            index = 0 if result.paddle_hit is Side.LEFT else 1
            self.paddle_hits[index] += 1
            self.current_rally += 1
            self.longest_rally = max(self.longest_rally, self.current_rally)
            if result.spin is not None:
                self.spin_hits[index] += 1
                self.log_event(f"{result.paddle_hit.value} spin {result.spin.value}")

        if result.point_to is not None:
            index = 0 if result.point_to is Side.LEFT else 1
            self.points[index] += 1
            self.rounds += 1
            self.log_event(
                f"point {result.point_to.value} after {self.current_rally} hits"
            )
            self.current_rally = 0

    def log_event(self, message: str) -> None:
        """Add event to log."""
        self.event_log.appendleft(f"T{self.ticks}: {message}")

    @property
    def total_hits(self) -> int:
        return sum(self.paddle_hits)

    @property
    def spin_rate(self) -> float:
        """Fraction of paddle hits that were spin hits."""
        total = self.total_hits
        return sum(self.spin_hits) / total if total > 0 else 0.0

    def summary_line(self) -> str:
        return (
            f"rally {self.current_rally}  best {self.longest_rally}  "
            f"hits {self.total_hits}  spin {self.spin_rate:.0%}"
        )
