"""
gridsweeper - command line front end.

Usage:
    gridsweeper play [--width W] [--height H] [--hazards N] [--seed S]
    gridsweeper demo [--games N] [--delay SECONDS] [--size N] [--hazards N]
"""
import argparse
import logging
import sys
import time
from typing import Callable, Optional, Sequence, Tuple

from .board import BoardConfig
from .environment import SweeperEnv
from .errors import InvalidConfiguration
from .render import render_board
from .session import GameSession, SessionState

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


# ============================================================================
# Interactive Play
# ============================================================================

def parse_command(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse one line of player input.

    Returns:
        (verb, row, col) for ``r``/``f``, (verb, -1, -1) for ``n``/``q``,
        or None if the line is not a command.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None
    verb = parts[0]
    if verb in ("n", "q") and len(parts) == 1:
        return verb, -1, -1
    if verb in ("r", "f") and len(parts) == 3:
        try:
            return verb, int(parts[1]), int(parts[2])
        except ValueError:
            return None
    return None


def status_line(session: GameSession) -> str:
    """Hazard counter, clock and state, as shown above the board."""
    return (
        f"Hazards: {session.remaining_hazards:>3} | "
        f"Time: {session.clock.format()} | "
        f"{session.state.name}"
    )


def show(session: GameSession) -> None:
    print(status_line(session))
    print(render_board(
        session.board,
        session.state,
        session.triggered_cell,
        coordinates=True,
    ))


def catch_up_clock(session: GameSession, since: float) -> float:
    """
    Tick the session once per whole second elapsed since ``since``.

    Returns:
        The new reference time.
    """
    now = time.monotonic()
    whole_seconds = int(now - since)
    for _ in range(whole_seconds):
        session.tick()
    return since + whole_seconds


def play(
    args: argparse.Namespace,
    read_line: Callable[[str], str] = input,
) -> None:
    """Play interactively in the terminal."""
    config = BoardConfig(args.width, args.height, args.hazards)
    session = GameSession(config, seed=args.seed)
    last_tick = time.monotonic()

    print(HELP_TEXT)
    show(session)

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break
        last_tick = catch_up_clock(session, last_tick)

        command = parse_command(line)
        if command is None:
            print(HELP_TEXT)
            continue

        verb, row, col = command
        if verb == "q":
            break
        if verb == "n":
            session.new_session(config)
            last_tick = time.monotonic()
        elif verb == "r":
            session.primary_action(row, col)
        else:
            session.secondary_action(row, col)

        show(session)
        if session.state == SessionState.WON:
            print(f"\n*** CLEARED in {session.elapsed_seconds}s! ('n' for a new game) ***")
        elif session.state == SessionState.LOST:
            print("\n*** BOOM! ('n' for a new game) ***")


# ============================================================================
# Demo
# ============================================================================

def demo(args: argparse.Namespace) -> None:
    """Watch random masked moves play out."""
    config = BoardConfig(args.size, args.size, args.hazards)
    env = SweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(args.seed)

    wins = 0
    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            row, col = divmod(int(action), config.width)
            print(f"=== Game {game + 1}/{args.games} | Step {step} | Move ({row}, {col}) ===")
            print(env.render())
            if args.delay:
                time.sleep(args.delay)

        if info["game_state"] == SessionState.WON.name:
            wins += 1
            print("\n*** WIN! ***\n")
        else:
            print("\n*** LOST (hit hazard) ***\n")

    print(f"=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsweeper",
        description="gridsweeper - clear the grid without touching a hazard",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine activity"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--width", type=int, default=25, help="Board width")
    play_parser.add_argument("--height", type=int, default=25, help="Board height")
    play_parser.add_argument("--hazards", type=int, default=50, help="Number of hazards")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser = subparsers.add_parser("demo", help="Watch random moves")
    demo_parser.add_argument("--games", type=int, default=3, help="Number of games")
    demo_parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    demo_parser.add_argument("--size", type=int, default=9, help="Board size (NxN)")
    demo_parser.add_argument("--hazards", type=int, default=10, help="Number of hazards")
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except InvalidConfiguration as error:
        print(f"Invalid configuration: {error}", file=sys.stderr)
        return 2
    return 0
