from cli2048.fields.board import NUM_COLUMNS, NUM_ROWS, NUM_SQUARES, Board
from cli2048.fields.actions import Action, Command, NUM_ACTIONS
from cli2048.fields.session import Session

__all__ = [
    "NUM_COLUMNS",
    "NUM_ROWS",
    "NUM_SQUARES",
    "Board",
    "Action",
    "Command",
    "NUM_ACTIONS",
    "Session",
]
