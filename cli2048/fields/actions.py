from enum import Enum, IntEnum
from typing import Optional


class Action(IntEnum):
    """2048 game actions: slide tiles in 4 directions."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


NUM_ACTIONS = len(Action)


class Command(Enum):
    """Everything the player can ask the session to do in one turn."""
    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"
    REVERT = "r"
    RESTART = "x"
    EXIT = "e"

    @property
    def action(self) -> Optional[Action]:
        """Direction for the four movement commands, None otherwise."""
        return _DIRECTIONS.get(self)

    @classmethod
    def from_key(cls, key: str) -> Optional["Command"]:
        """Parse a single key (case-insensitive) to a command."""
        key = key.lower().strip()
        try:
            return cls(key)
        except ValueError:
            return None


_DIRECTIONS = {
    Command.UP: Action.UP,
    Command.DOWN: Action.DOWN,
    Command.LEFT: Action.LEFT,
    Command.RIGHT: Action.RIGHT,
}
