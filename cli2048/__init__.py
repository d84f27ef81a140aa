"""cli2048 - the 2048 sliding-tile puzzle in the terminal."""

__version__ = "0.1.0"
__author__ = "Your Name"

from cli2048.fields import Action, Board, Command, Session

__all__ = [
    "Action",
    "Board",
    "Command",
    "Session",
]
