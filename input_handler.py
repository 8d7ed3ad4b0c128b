"""Input handling for Terminal Pong."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from paddle import Direction, Side


class CommandType(Enum):
    """Actions a key press can trigger."""

    QUIT = "quit"
    RESTART = "restart"
    MOVE_PADDLE = "move_paddle"
    BALL_SPEED = "ball_speed"
    PADDLE_LENGTH = "paddle_length"


@dataclass(frozen=True)
class Command:
    """A decoded key press."""

    kind: CommandType
    direction: Optional[Direction] = None
    side: Optional[Side] = None


CTRL_C = "\x03"

KEY_BINDINGS: Dict[str, Command] = {
    "q": Command(CommandType.QUIT),
    CTRL_C: Command(CommandType.QUIT),
    "n": Command(CommandType.RESTART),
    # Left paddle
    "w": Command(CommandType.MOVE_PADDLE, Direction.UP, Side.LEFT),
    "s": Command(CommandType.MOVE_PADDLE, Direction.DOWN, Side.LEFT),
    # Right paddle
    "i": Command(CommandType.MOVE_PADDLE, Direction.UP, Side.RIGHT),
    "k": Command(CommandType.MOVE_PADDLE, Direction.DOWN, Side.RIGHT),
    # Ball speed (0 faster, 9 slower)
    "0": Command(CommandType.BALL_SPEED, Direction.UP),
    "9": Command(CommandType.BALL_SPEED, Direction.DOWN),
    # Paddle length (2 longer, 1 shorter)
    "2": Command(CommandType.PADDLE_LENGTH, Direction.UP),
    "1": Command(CommandType.PADDLE_LENGTH, Direction.DOWN),
}

CONTROLS_HELP = "W/S left  I/K right  0/9 speed  2/1 paddle  N restart  Q quit"


def decode_key(key) -> Optional[Command]:
    """
    Map a key press to a command.

    Args:
        key: A blessed Keystroke (or plain string); empty means timeout

    Returns:
        The bound Command, or None for unbound keys
    """
    if not key:
        return None
    return KEY_BINDINGS.get(str(key))


@dataclass
class InputState:
    """Current state of input controls."""

    quit_requested: bool = False
    last_command: Optional[Command] = None


class InputHandler:
    """Reads keystrokes and applies them to the game.

    The driver loop waits on `poll`, which returns after one key press or
    when the timeout expires.
    """

    def __init__(self, term=None):
        self.term = term
        self.state = InputState()

    def poll(self, timeout: float):
        """Wait up to `timeout` seconds for one key press."""
        return self.term.inkey(timeout=timeout)

    def process_key(self, key, game) -> Optional[Command]:
        """
        Decode a key and dispatch it to the game.

        Returns:
            The command that was applied, or None
        """
        command = decode_key(key)
        if command is None:
            return None

        self.state.last_command = command
        if command.kind is CommandType.QUIT:
            self.state.quit_requested = True
        elif command.kind is CommandType.RESTART:
            game.restart()
        elif command.kind is CommandType.MOVE_PADDLE:
            game.move_paddle(command.direction, command.side)
        elif command.kind is CommandType.BALL_SPEED:
            game.ball_speed(command.direction)
        elif command.kind is CommandType.PADDLE_LENGTH:
            game.paddle_length(command.direction)
        return command

    @property
    def running(self) -> bool:
        """True if game should continue running."""
        return not self.state.quit_requested
