#!/usr/bin/env python3
"""Interactive 2048 game - play with keyboard (w/a/s/d)."""
import argparse
import logging
from typing import Callable, Optional

from cli2048 import __version__
from cli2048.fields import Command, Session

MENU = """
    Swipe with  : W, A, S, D
    Revert move : R
    Restart game: X
    Exit        : E
"""

CONTROLS = """Controls:
  W, Swipe up
  A, Swipe left
  S, Swipe down
  D, Swipe right
  R, Revert move
  X, Restart game
  E, Exit
"""


def clear_screen():
    """Clear terminal screen."""
    print("\033[2J\033[H", end="")


def read_command(read: Callable[[str], str]) -> Command:
    """Read keys until one maps to a command."""
    warned = False
    while True:
        command = Command.from_key(read("Move: "))
        if command is not None:
            return command
        if not warned:
            print("Invalid input.")
            warned = True


def confirm(action: str, read: Callable[[str], str]) -> bool:
    """Ask a yes/no question about a destructive action."""
    prompt = f"\nAre you sure you want to {action}? Your progress will be lost [Y/N]: "
    answer = read(prompt).strip().lower()
    warned = False
    while answer not in ("y", "n"):
        if not warned:
            print("Invalid input.")
            warned = True
        answer = read("[Y/N]: ").strip().lower()
    return answer == "y"


def play(session: Session, read: Optional[Callable[[str], str]] = None) -> None:
    """Run turns until the game is over or the player exits."""
    if read is None:
        read = input

    while True:
        if session.turn_begin():
            print(session.current.render())
            print("\nGame Over!")
            break

        clear_screen()
        print(MENU)
        print(session.current.render())

        try:
            command = read_command(read)
            running = session.dispatch(command, lambda action: confirm(action, read))
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not running:
            break

    print("\nThanks for playing!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cli2048",
        description=f"2048 v{__version__}",
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h", "-H", "--help",
        action="help",
        help="Prints this help.",
    )
    parser.add_argument(
        "-v", "-V", "--version",
        action="version",
        version=f"2048 v{__version__}",
        help="Prints the version.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None):
    """Run interactive 2048 game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    play(Session(args.seed))


if __name__ == "__main__":
    main()
