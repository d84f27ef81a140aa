"""2048 board: grid state and the shift-and-merge pass."""
import random
from typing import Iterable, Optional

import numpy as np

from cli2048.fields.actions import Action

NUM_ROWS = 4
NUM_COLUMNS = 4
NUM_SQUARES = NUM_ROWS * NUM_COLUMNS

EMPTY = 0
# A spawned tile is a 4 when rng.randrange(FOUR_ODDS) == 1, otherwise a 2.
FOUR_ODDS = 10

_STEPS = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


def _traversal(d_row: int, d_col: int) -> list[tuple[int, int]]:
    """Cells to visit for a shift, nearest line to the target edge first.

    The edge line itself is skipped since nothing there can move.
    """
    rows: Iterable[int] = range(NUM_ROWS)
    cols: Iterable[int] = range(NUM_COLUMNS)
    if d_row < 0:
        rows = range(1, NUM_ROWS)
    elif d_row > 0:
        rows = range(NUM_ROWS - 2, -1, -1)
    if d_col < 0:
        cols = range(1, NUM_COLUMNS)
    elif d_col > 0:
        cols = range(NUM_COLUMNS - 2, -1, -1)

    if d_row:
        return [(r, c) for r in rows for c in cols]
    return [(r, c) for c in cols for r in rows]


def _valid_tiles(cells: np.ndarray) -> np.ndarray:
    """Mask of cells that are empty or hold a power of two >= 2."""
    return (cells == EMPTY) | ((cells >= 2) & ((cells & (cells - 1)) == 0))


class Board:
    """4x4 grid of cells, 0 for empty, powers of two for tiles."""

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.zeros((NUM_ROWS, NUM_COLUMNS), dtype=np.int32)
        self.cells: np.ndarray = cells

    @classmethod
    def from_rows(cls, rows) -> "Board":
        """Build a board from nested rows, validating shape and values."""
        cells = np.array(rows, dtype=np.int32)
        if cells.shape != (NUM_ROWS, NUM_COLUMNS):
            raise ValueError(f"Invalid board shape: {cells.shape}")
        invalid = cells[~_valid_tiles(cells)]
        if invalid.size:
            raise ValueError(f"Invalid tile value: {int(invalid[0])}")
        return cls(cells)

    def clear(self) -> None:
        self.cells[:, :] = EMPTY

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def copy_from(self, other: "Board") -> None:
        """Overwrite this board in place with the cells of another."""
        self.cells[:, :] = other.cells

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the grid for rendering."""
        view = self.cells.copy()
        view.setflags(write=False)
        return view

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Board({self.cells.tolist()})"

    def count_empty(self) -> int:
        """Number of empty cells."""
        return int(np.count_nonzero(self.cells == EMPTY))

    def max_tile(self) -> int:
        return int(np.max(self.cells))

    def spawn_random_tile(self, rng: random.Random) -> bool:
        """
        Put a 2 (or, one time in ten, a 4) into a random empty cell.

        The empty cell is chosen uniformly over the whole board: an index is
        drawn below the empty count and the empty cells are counted to it in
        row-major order.

        Args:
            rng: Random source, anything with ``randrange``

        Returns:
            False if the board is full (nothing changes), True otherwise
        """
        num_empty = self.count_empty()
        if not num_empty:
            return False

        target = rng.randrange(num_empty)
        rows, cols = np.nonzero(self.cells == EMPTY)
        row, col = int(rows[target]), int(cols[target])
        self.cells[row, col] = 4 if rng.randrange(FOUR_ODDS) == 1 else 2
        return True

    def shift(self, action: Action) -> bool:
        """
        Slide every tile toward one edge, merging equal neighbours.

        A tile slides through empty cells, merges once with an equal tile
        and then stops. A tile created by a merge does not take part in
        another merge during the same shift.

        Args:
            action: The direction to shift (UP, DOWN, LEFT, RIGHT)

        Returns:
            True if any cell changed value or position
        """
        if action not in _STEPS:
            raise ValueError(f"Invalid action: {action}")
        d_row, d_col = _STEPS[Action(action)]

        merged = np.zeros((NUM_ROWS, NUM_COLUMNS), dtype=bool)
        moved = False

        for row, col in _traversal(d_row, d_col):
            value = int(self.cells[row, col])
            if value == EMPTY:
                continue

            r, c = row, col
            while True:
                nr, nc = r + d_row, c + d_col
                if not (0 <= nr < NUM_ROWS and 0 <= nc < NUM_COLUMNS):
                    break
                nearer = int(self.cells[nr, nc])
                if nearer == EMPTY:
                    self.cells[nr, nc] = value
                    self.cells[r, c] = EMPTY
                    r, c = nr, nc
                    moved = True
                elif nearer == value and not merged[nr, nc]:
                    self.cells[nr, nc] = value * 2
                    self.cells[r, c] = EMPTY
                    merged[nr, nc] = True
                    moved = True
                    break
                else:
                    break

        return moved

    def render(self) -> str:
        """Render the board as a string."""
        lines = ["    " + "_" * (7 * NUM_COLUMNS + 1)]
        separator = "    |" + "______|" * NUM_COLUMNS
        for row in self.cells:
            line = "    |"
            for val in row:
                if val == EMPTY:
                    line += "      |"
                else:
                    line += f" {int(val):>4} |"
            lines.append(line)
            lines.append(separator)
        return "\n".join(lines)
