"""Terminal renderer for Terminal Pong."""

from typing import Any, Dict, List, Optional, Sequence

from config import Config
from input_handler import CONTROLS_HELP

# Glyphs
PADDLE, BALL, NET, EMPTY = "█", "●", "┆", " "
DEAD_MESSAGE = "The ball is out! Press N to restart."
EVENT_LOG_LINES = 4


def _cell(glyph: str, width: int, fill: bool = False) -> str:
    if fill:
        return glyph * width
    return glyph.center(width)


def build_lines(
    observation: Dict[str, Any],
    cell_width: int = 1,
    stats_line: Optional[str] = None,
    event_log: Sequence[str] = (),
) -> List[str]:
    """
    Draw a game snapshot as plain text lines.

    Args:
        observation: Snapshot from Game.get_observation()
        cell_width: Characters per board cell
        stats_line: Optional extra status line (debug mode)
        event_log: Recent events, newest first; at most EVENT_LOG_LINES are shown

    Returns:
        Framed board rows followed by the status lines
    """
    width = observation["field_width"]
    height = observation["field_height"]
    paddles = set(observation["left_paddle"]) | set(observation["right_paddle"])
    net = set(observation["net"])
    ball = tuple(observation["ball"])

    inner = width * cell_width
    title = " PONG "
    lines = ["┌" + title + "─" * (inner - len(title)) + "┐" if inner > len(title)
             else "┌" + "─" * inner + "┐"]

    for y in range(height):
        row = []
        for x in range(width):
            if (x, y) == ball:
                row.append(_cell(BALL, cell_width))
            elif (x, y) in paddles:
                row.append(_cell(PADDLE, cell_width, fill=True))
            elif (x, y) in net:
                row.append(_cell(NET, cell_width))
            else:
                row.append(_cell(EMPTY, cell_width, fill=True))
        lines.append("│" + "".join(row) + "│")

    lines.append("└" + "─" * inner + "┘")

    lines.append(
        f"Left {observation['score_left']} : {observation['score_right']} Right"
        f"   tick {observation['tick_interval'] * 1000:.0f}ms"
        f"   paddle {observation['paddle_len']}"
    )
    lines.append(CONTROLS_HELP)
    if stats_line:
        lines.append(stats_line)
    for entry in list(event_log)[:EVENT_LOG_LINES]:
        lines.append("  " + entry)
    if observation["dead"]:
        lines.append(DEAD_MESSAGE)
    return lines


class TerminalRenderer:
    """Draws the game into a blessed Terminal, one full frame per call."""

    def __init__(self, term, config: Optional[Config] = None):
        self.term = term
        self.config = config or Config()
        self._last_height = 0

    def render(self, game, stats=None) -> None:
        observation = game.get_observation()
        lines = build_lines(
            observation,
            cell_width=self.config.cell_width,
            stats_line=stats.summary_line() if stats else None,
            event_log=stats.event_log if stats else (),
        )

        term = self.term
        output = [term.home]
        for i, line in enumerate(lines):
            if observation["dead"] and line == DEAD_MESSAGE:
                line = term.bold_red(line)
            output.append(term.move_xy(0, i) + line + term.clear_eol)
        # Wipe status lines left over from a taller previous frame
        for i in range(len(lines), self._last_height):
            output.append(term.move_xy(0, i) + term.clear_eol)
        self._last_height = len(lines)

        print("".join(output), end="", flush=True)

    def close(self) -> None:
        print(self.term.normal + self.term.clear, end="", flush=True)
