#!/usr/bin/env python3
"""
Terminal Pong - Main Entry Point

Two players share one keyboard: W/S move the left paddle, I/K the right.
Move a paddle just before the ball arrives to put spin on it.
"""

import argparse
import json
from typing import Optional

from config import PRESETS, Config
from debug import DebugLogger, GameValidator
from game import Game
from input_handler import InputHandler
from renderer import TerminalRenderer
from stats_tracker import StatsTracker


def build_config(args: argparse.Namespace) -> Config:
    """Create the configuration from command line arguments."""
    if args.config:
        config = Config.from_json(args.config)
    else:
        config = Config.preset(args.preset)

    if args.width is not None:
        config.field_width = args.width
    if args.height is not None:
        config.field_height = args.height
    if args.paddle_length is not None:
        config.paddle_length = args.paddle_length
    if args.tick_ms is not None:
        config.tick_interval = args.tick_ms / 1000.0

    config.validate()
    return config


def run_terminal_game(
    config: Config,
    debug: bool = False,
    log_file: Optional[str] = None,
    term=None,
) -> Game:
    """Run the game in the terminal until the players quit.

    Each loop iteration renders a frame, waits up to one poll interval
    for a key press, applies it, then runs exactly one simulation step.
    """
    if term is None:
        from blessed import Terminal

        term = Terminal()

    logger = DebugLogger(enabled=debug or log_file is not None)
    game = Game(config, logger=logger if logger.enabled else None)
    validator = GameValidator(logger, game.field)
    input_handler = InputHandler(term)
    renderer = TerminalRenderer(term, config)
    stats = StatsTracker() if debug else None

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            while input_handler.running:
                renderer.render(game, stats)

                key = input_handler.poll(config.poll_interval)
                input_handler.process_key(key, game)
                if not input_handler.running:
                    break

                result = game.step()
                if stats:
                    stats.record(result)
                if logger.enabled:
                    if result.advanced:
                        validator.validate_game(game)
                    logger.next_frame()
        except KeyboardInterrupt:
            pass
        finally:
            renderer.close()

    print(f"Final score: Left {game.scores[0]} - Right {game.scores[1]}")
    if debug:
        logger.print_summary()
    if log_file:
        logger.export_json(log_file)

    return game


def list_presets() -> None:
    """Print available board presets."""
    print("\nAvailable presets:")
    for name, values in PRESETS.items():
        config = Config(**values)
        print(f"  {name:<8} - {config.field_width}x{config.field_height} board")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Terminal Pong - two players, one keyboard, spin shots!",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  W / S   left paddle up / down      I / K   right paddle up / down
  0 / 9   faster / slower ball       2 / 1   longer / shorter paddles
  N       restart round              Q       quit (Ctrl-C works too)

Examples:
  # Classic 20x20 board
  python main.py

  # Wide board with a slower ball
  python main.py --preset wide --tick-ms 140

  # Record every simulation event to a JSON file
  python main.py --debug --log-file session.json
""",
    )
    parser.add_argument(
        "--mode",
        choices=["play", "list"],
        default="play",
        help="play: start a game, list: show board presets (default: %(default)s)",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="classic",
        help="Board size preset (default: %(default)s)",
    )
    parser.add_argument("--width", type=int, default=None, metavar="CELLS",
                        help="Board width, overrides the preset")
    parser.add_argument("--height", type=int, default=None, metavar="CELLS",
                        help="Board height, overrides the preset")
    parser.add_argument(
        "--paddle-length",
        type=int,
        default=None,
        metavar="N",
        help=f"Initial paddle length (default: {Config().paddle_length})",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        metavar="MS",
        help=f"Initial ball tick interval in milliseconds "
        f"(default: {Config().tick_interval * 1000:.0f})",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        metavar="FILE",
        help="Load configuration from a JSON file instead of a preset",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show rally statistics and print an event summary on exit",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        metavar="FILE",
        help="Export the event log to a JSON file on exit",
    )

    args = parser.parse_args(argv)

    if args.mode == "list":
        list_presets()
        return

    try:
        config = build_config(args)
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"cannot read config: {e}")
    except ValueError as e:
        parser.error(str(e))

    run_terminal_game(config, debug=args.debug, log_file=args.log_file)


if __name__ == "__main__":
    main()
