"""2048 game session: live board, one-level undo and the spawn lock."""
import logging
import random
import time
from typing import Callable, Optional, Union

from cli2048.fields.actions import Action, Command
from cli2048.fields.board import Board

logger = logging.getLogger(__name__)


class Session:
    """
    One game in progress.

    Holds the live board, a backup of the board as it was before the last
    tile-altering move, and the spawn lock that allows one new tile per
    turn. The shell drives it:

        turn_begin -> (game over? stop) -> render -> read command -> dispatch
    """

    def __init__(self, rng: Optional[Union[random.Random, int]] = None):
        if rng is None:
            rng = time.time_ns()
        if isinstance(rng, int):
            rng = random.Random(rng)
        self.rng: random.Random = rng

        self.current = Board()
        self.backup = Board()
        self.spawn_locked: bool = False
        self.game_over: bool = False
        self.reset()

    def reset(self) -> None:
        """Clear the grid, deal one tile and sync the backup."""
        self.current.clear()
        self.spawn_locked = False
        self.game_over = False
        self.spawn_random_tile()
        self.spawn_locked = False
        self.backup.copy_from(self.current)
        logger.info("New game started")

    def spawn_random_tile(self) -> bool:
        """Spawn at most one tile per turn. False only when the board is full."""
        if self.current.count_empty() == 0:
            return False
        if self.spawn_locked:
            return True
        self.current.spawn_random_tile(self.rng)
        self.spawn_locked = True
        logger.debug(f"Spawned tile, {self.current.count_empty()} empty cells left")
        return True

    def turn_begin(self) -> bool:
        """Start a turn. Returns True when the game is over."""
        self.game_over = not self.spawn_random_tile()
        if self.game_over:
            logger.info(f"Game over, max tile {self.current.max_tile()}")
        return self.game_over

    def apply_direction(self, action: Action) -> bool:
        """
        Shift the board in one direction.

        The pre-move board always becomes the backup, so a revert undoes
        exactly this call. The spawn lock is released only if anything moved.

        Returns:
            Whether the board changed
        """
        try:
            action = Action(action)
        except ValueError:
            raise ValueError(f"Invalid action: {action}") from None

        self.backup.copy_from(self.current)
        moved = self.current.shift(action)
        if moved:
            self.spawn_locked = False
        logger.debug(f"Shift {action.name}: moved={moved}")
        return moved

    def revert(self) -> None:
        """Restore the board from before the last tile-altering move."""
        self.current.copy_from(self.backup)
        logger.debug("Reverted to backup")

    def restart(self, confirmed: bool) -> bool:
        if not confirmed:
            return False
        self.reset()
        return True

    def exit(self, confirmed: bool) -> bool:
        """Whether the session should terminate. Never changes state."""
        if confirmed:
            logger.info("Exit confirmed")
        return confirmed

    def dispatch(self, command: Command, confirm: Callable[[str], bool]) -> bool:
        """
        Execute one player command.

        Args:
            command: The command to execute
            confirm: Prompt owned by the caller, asked "restart" or "exit"

        Returns:
            False if the session should terminate, True otherwise
        """
        if not isinstance(command, Command):
            raise ValueError(f"Invalid command: {command}")

        if command.action is not None:
            self.apply_direction(command.action)
        elif command == Command.REVERT:
            self.revert()
        elif command == Command.RESTART:
            self.restart(confirm("restart"))
        elif command == Command.EXIT:
            return not self.exit(confirm("exit"))
        return True
