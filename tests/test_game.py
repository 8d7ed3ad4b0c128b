"""Tests for Game class."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from config import Config
from debug import DebugLogger, EventType
from game import Game, GameData
from paddle import Direction, Side
from stepper import StepResult


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=50.0):
        self.now = now

    def __call__(self):
        return self.now


class TestGameInitialization(unittest.TestCase):
    """Test Game initialization."""

    def setUp(self):
        self.clock = FakeClock()
        self.game = Game(clock=self.clock)

    def test_initial_paddles(self):
        data = self.game.data
        self.assertEqual(data.left_paddle.segments, [(0, 9), (0, 10), (0, 11)])
        self.assertEqual(data.right_paddle.segments, [(19, 9), (19, 10), (19, 11)])

    def test_initial_ball(self):
        """Ball starts at the board centre moving (1, 1)."""
        ball = self.game.data.ball
        self.assertEqual(ball.position, (10.0, 10.0))
        self.assertEqual(ball.velocity, (1.0, 1.0))

    def test_initial_state(self):
        self.assertIsInstance(self.game.data, GameData)
        self.assertFalse(self.game.is_dead)
        self.assertEqual(self.game.scores, [0, 0])
        self.assertEqual(self.game.data.last_tick, 50.0)
        self.assertAlmostEqual(self.game.tick_interval, 0.1)
        self.assertEqual(self.game.paddle_len, 3)

    def test_no_recent_spin_at_start(self):
        for side in (Side.LEFT, Side.RIGHT):
            last_move = self.game.data.paddle(side).last_move
            self.assertFalse(last_move.is_recent(50.0, self.game.config.spin_window))

    def test_custom_config(self):
        game = Game(Config.preset("medium", paddle_length=5), clock=self.clock)
        self.assertEqual(game.field.width, 45)
        self.assertEqual(game.data.right_paddle.x, 44)
        self.assertEqual(game.data.left_paddle.length, 5)

    def test_invalid_config_rejected(self):
        with self.assertRaises(ValueError):
            Game(Config(field_height=2))


class TestRestart(unittest.TestCase):
    """Test restarting a round."""

    def setUp(self):
        self.clock = FakeClock()
        self.game = Game(clock=self.clock)

    def test_restart_keeps_paddles_and_scores(self):
        game = self.game
        game.move_paddle(Direction.DOWN, Side.LEFT)
        game.move_paddle(Direction.DOWN, Side.LEFT)
        game.move_paddle(Direction.UP, Side.RIGHT)
        game.paddle_length(Direction.UP)
        game.data.ball.reset(0.0, 3.0, -1.0, 1.0)
        game.data.dead = True
        game.scores = [2, 3]
        left = list(game.data.left_paddle.segments)
        right = list(game.data.right_paddle.segments)

        self.clock.now = 60.0
        game.restart()

        self.assertEqual(game.data.left_paddle.segments, left)
        self.assertEqual(game.data.right_paddle.segments, right)
        self.assertEqual(game.paddle_len, 4)
        self.assertEqual(game.scores, [2, 3])
        self.assertFalse(game.is_dead)
        self.assertEqual(game.data.ball.position, (10.0, 10.0))
        self.assertEqual(game.data.ball.velocity, (1.0, 1.0))
        self.assertEqual(game.data.last_tick, 60.0)

    def test_restart_clears_spin_history(self):
        self.game.move_paddle(Direction.UP, Side.RIGHT)
        self.game.restart()
        last_move = self.game.data.right_paddle.last_move
        self.assertIsNone(last_move.timestamp)
        self.assertFalse(last_move.is_recent(self.clock.now, 0.2))

    def test_restart_keeps_speed(self):
        self.game.ball_speed(Direction.UP)
        self.game.restart()
        self.assertAlmostEqual(self.game.tick_interval, 0.08)


class TestMovePaddle(unittest.TestCase):
    """Test player paddle commands."""

    def setUp(self):
        self.clock = FakeClock()
        self.game = Game(clock=self.clock)

    def test_move_records_last_move(self):
        self.assertTrue(self.game.move_paddle(Direction.UP, Side.LEFT))
        last_move = self.game.data.left_paddle.last_move
        self.assertIs(last_move.direction, Direction.UP)
        self.assertEqual(last_move.timestamp, 50.0)
        # Right paddle untouched
        self.assertEqual(self.game.data.right_paddle.top, 9)

    def test_move_at_boundary_keeps_timestamp(self):
        for _ in range(9):
            self.assertTrue(self.game.move_paddle(Direction.UP, Side.RIGHT))
        paddle = self.game.data.right_paddle
        self.assertEqual(paddle.top, 0)

        self.clock.now = 51.0
        self.assertFalse(self.game.move_paddle(Direction.UP, Side.RIGHT))
        self.assertEqual(paddle.top, 0)
        self.assertEqual(paddle.last_move.timestamp, 50.0)

    def test_move_while_dead(self):
        self.game.data.dead = True
        self.assertTrue(self.game.move_paddle(Direction.DOWN, Side.LEFT))
        self.assertEqual(self.game.data.left_paddle.top, 10)


class TestBallSpeed(unittest.TestCase):
    """Test ball speed adjustment."""

    def setUp(self):
        self.game = Game(clock=FakeClock())

    def test_faster(self):
        self.assertTrue(self.game.ball_speed(Direction.UP))
        self.assertAlmostEqual(self.game.tick_interval, 0.08)

    def test_slower(self):
        self.assertTrue(self.game.ball_speed(Direction.DOWN))
        self.assertAlmostEqual(self.game.tick_interval, 0.12)

    def test_interval_floor(self):
        """Speeding up stops at the minimum interval instead of going negative."""
        for _ in range(10):
            self.game.ball_speed(Direction.UP)
        self.assertAlmostEqual(self.game.tick_interval, 0.02)
        self.assertFalse(self.game.ball_speed(Direction.UP))
        self.assertAlmostEqual(self.game.tick_interval, 0.02)
        self.assertGreater(self.game.tick_interval, 0)

    def test_floor_with_odd_interval(self):
        game = Game(Config(tick_interval=0.03), clock=FakeClock())
        self.assertTrue(game.ball_speed(Direction.UP))
        self.assertAlmostEqual(game.tick_interval, 0.02)

    def test_faster_never_lengthens_interval(self):
        game = Game(Config(tick_interval=0.02), clock=FakeClock())
        self.assertFalse(game.ball_speed(Direction.UP))
        self.assertLessEqual(game.tick_interval, 0.02)

    def test_interval_below_floor_rejected(self):
        with self.assertRaises(ValueError):
            Game(Config(tick_interval=0.01), clock=FakeClock())

    def test_speed_changes_while_dead(self):
        self.game.data.dead = True
        self.assertTrue(self.game.ball_speed(Direction.DOWN))


class TestPaddleLength(unittest.TestCase):
    """Test paddle resize commands."""

    def setUp(self):
        self.game = Game(clock=FakeClock())

    def test_grow_both(self):
        self.assertTrue(self.game.paddle_length(Direction.UP))
        self.assertEqual(self.game.paddle_len, 4)
        self.assertEqual(self.game.data.left_paddle.segments[-1], (0, 12))
        self.assertEqual(self.game.data.right_paddle.segments[-1], (19, 12))

    def test_shrink_both(self):
        self.assertTrue(self.game.paddle_length(Direction.DOWN))
        self.assertEqual(self.game.paddle_len, 2)
        self.assertEqual(self.game.data.left_paddle.segments, [(0, 9), (0, 10)])
        self.assertEqual(self.game.data.right_paddle.segments, [(19, 9), (19, 10)])

    def test_shrink_floor(self):
        """Paddles never shrink below one segment."""
        self.game.paddle_length(Direction.DOWN)
        self.game.paddle_length(Direction.DOWN)
        self.assertEqual(self.game.paddle_len, 1)
        self.assertFalse(self.game.paddle_length(Direction.DOWN))
        self.assertEqual(self.game.paddle_len, 1)
        self.assertEqual(self.game.data.left_paddle.length, 1)

    def test_grow_ceiling(self):
        game = Game(Config(field_height=5), clock=FakeClock())
        game.paddle_length(Direction.UP)
        game.paddle_length(Direction.UP)
        self.assertEqual(game.paddle_len, 5)
        self.assertFalse(game.paddle_length(Direction.UP))
        self.assertEqual(game.data.left_paddle.segments, [(0, y) for y in range(5)])


class TestGameStep(unittest.TestCase):
    """Test the step entry point."""

    def setUp(self):
        self.clock = FakeClock()
        self.game = Game(clock=self.clock)

    def test_step_uses_clock(self):
        self.clock.now = 50.2
        result = self.game.step()
        self.assertIsInstance(result, StepResult)
        self.assertTrue(result.advanced)
        self.assertEqual(self.game.data.ball.position, (11.0, 11.0))

    def test_step_with_explicit_time(self):
        self.assertFalse(self.game.step(now=50.05).advanced)
        self.assertTrue(self.game.step(now=50.2).advanced)

    def test_full_round_until_point(self):
        """Untouched paddles miss the (1, 1) ball eventually."""
        now = 50.0
        for _ in range(200):
            now += 0.2
            self.game.step(now)
            if self.game.is_dead:
                break
        self.assertTrue(self.game.is_dead)
        self.assertEqual(sum(self.game.scores), 1)


class TestObservation(unittest.TestCase):
    """Test the render snapshot."""

    def test_observation_contents(self):
        game = Game(clock=FakeClock())
        obs = game.get_observation()
        self.assertEqual(obs["field_width"], 20)
        self.assertEqual(obs["ball"], (10, 10))
        self.assertEqual(obs["left_paddle"], [(0, 9), (0, 10), (0, 11)])
        self.assertEqual(obs["score_left"], 0)
        self.assertFalse(obs["dead"])
        self.assertEqual(len(obs["net"]), 10)

    def test_observation_is_a_copy(self):
        game = Game(clock=FakeClock())
        obs = game.get_observation()
        obs["left_paddle"].append((0, 12))
        self.assertEqual(game.data.left_paddle.length, 3)


class TestGameLogging(unittest.TestCase):
    """Events are recorded when a logger is attached."""

    def setUp(self):
        self.logger = DebugLogger()
        self.clock = FakeClock()
        self.game = Game(clock=self.clock, logger=self.logger)

    def test_start_event(self):
        self.assertEqual(len(self.logger.get_events_by_type(EventType.GAME_START)), 1)

    def test_command_events(self):
        self.game.move_paddle(Direction.UP, Side.LEFT)
        self.game.ball_speed(Direction.UP)
        self.game.paddle_length(Direction.UP)
        self.game.restart()
        for event_type in (EventType.PADDLE_MOVE, EventType.SPEED_CHANGE,
                           EventType.PADDLE_RESIZE, EventType.GAME_RESTART):
            self.assertEqual(len(self.logger.get_events_by_type(event_type)), 1)

    def test_rejected_adjustment_warns(self):
        game = Game(Config(paddle_length=1), clock=self.clock, logger=self.logger)
        game.paddle_length(Direction.DOWN)
        warnings = self.logger.get_events_by_type(EventType.VALIDATION_WARNING)
        self.assertEqual(len(warnings), 1)

    def test_point_event(self):
        self.game.data.ball.reset(1.0, 3.0, -1.0, 1.0)
        self.game.step(now=51.0)
        events = self.logger.get_events_by_type(EventType.POINT_SCORED)
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0].data["side"], "right")


if __name__ == "__main__":
    unittest.main()
