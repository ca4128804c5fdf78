"""
Field module for the Minefield game.

Implements the walled grid of boxes with mine placement, adjacency
counts, flood-fill uncovering, flag bookkeeping and hints.
"""
import logging
import math
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .box import Box, BoxKind, BoxState

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_ROWS, MAX_ROWS = 4, 15
MIN_COLS, MAX_COLS = 5, 20

# Hint budget grows exponentially with mine density
HINT_BASE_RATIO = 0.0092
HINT_DENSITY_FACTOR = 7.8


class GameAction(IntEnum):
    """Player action codes."""

    UNCOVER = 0
    MARK = 1
    SUSPECT = 2
    UNCOVER_NEIGHBORS = 3
    HINT = 4


class Point(NamedTuple):
    """Coordinates into the walled grid (x = row, y = column)."""

    x: int
    y: int


def mine_range(rows: int, cols: int) -> Tuple[int, int]:
    """Allowed number of mines: between 10% and 50% of the boxes."""
    return rows * cols // 10, rows * cols // 2


def calculate_hints(num_boxes: int, num_mines: int) -> int:
    """
    Compute the hint budget for a field.

    Args:
        num_boxes: Number of playable boxes.
        num_mines: Number of mines placed.

    Returns:
        round(num_boxes * 0.0092 * e^(7.8 * mines_ratio)), halves rounded up.
    """
    if num_boxes <= 0:
        return 0
    mines_ratio = num_mines / num_boxes
    hints_ratio = HINT_BASE_RATIO * math.exp(HINT_DENSITY_FACTOR * mines_ratio)
    return int(math.floor(num_boxes * hints_ratio + 0.5))


@dataclass
class FieldConfig:
    """
    Configuration for a Minefield game.

    Attributes:
        rows: Number of playable rows.
        cols: Number of playable columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within the playable ranges."""
        if not MIN_ROWS <= self.rows <= MAX_ROWS:
            raise ValueError(f"Rows must be between {MIN_ROWS} and {MAX_ROWS}")
        if not MIN_COLS <= self.cols <= MAX_COLS:
            raise ValueError(f"Cols must be between {MIN_COLS} and {MAX_COLS}")
        low, high = mine_range(self.rows, self.cols)
        if not low <= self.num_mines <= high:
            raise ValueError(f"Mines must be between {low} and {high}")


# ============================================================================
# Field Class
# ============================================================================

@dataclass
class Field:
    """
    Minefield game field.

    Holds a (rows + 2) x (cols + 2) grid whose outer ring is made of
    wall boxes, plus the counters used for flags, hints and the win
    condition. The field never decides that a game is lost: a False
    result from an uncover operation is the only loss signal.
    """

    rows: int
    cols: int
    _grid: List[List[Box]] = field(default_factory=list, repr=False)
    _num_mines: int = 0
    _num_covered: int = 0
    _hints: int = 0
    _remaining_mines: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def from_config(
        cls, config: FieldConfig, rng: Optional[random.Random] = None
    ) -> "Field":
        """Build a ready-to-play field: mines, counts, then walls."""
        minefield = cls(config.rows, config.cols)
        minefield.place_mines(config.num_mines, rng)
        minefield.compute_adjacency()
        minefield.add_walls()
        return minefield

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of hidden empty boxes, border included."""
        self._grid = [
            [Box() for _ in range(self.cols + 2)]
            for _ in range(self.rows + 2)
        ]
        self._num_covered = self.rows * self.cols

    def add_walls(self) -> None:
        """Replace the outer ring of the grid with wall boxes."""
        last_row = self.rows + 1
        last_col = self.cols + 1
        for x in range(self.rows + 2):
            self._grid[x][0] = Box.wall()
            self._grid[x][last_col] = Box.wall()
        for y in range(self.cols + 2):
            self._grid[0][y] = Box.wall()
            self._grid[last_row][y] = Box.wall()

    def place_mines(
        self, count: int, rng: Optional[random.Random] = None
    ) -> None:
        """
        Place mines at random interior positions.

        Args:
            count: Number of distinct mines to place.
            rng: Random source (defaults to the random module).
        """
        if count > self.rows * self.cols:
            raise ValueError(f"Too many mines (max {self.rows * self.cols})")
        rng = rng or random
        placed = 0
        while placed < count:
            box = self.get_box(self._random_point(rng))
            if not box.is_mine:
                box.kind = BoxKind.MINE
                placed += 1
        self._set_mine_budget(count)

    def place_mines_at(self, points: Iterable[Point]) -> None:
        """Place mines at fixed interior positions."""
        for point in points:
            if self.is_valid_point(point):
                self.get_box(point).kind = BoxKind.MINE
        count = sum(1 for point in self.iter_points() if self.get_box(point).is_mine)
        self._set_mine_budget(count)

    def _random_point(self, rng) -> Point:
        """Uniformly random interior point."""
        return Point(rng.randint(1, self.rows), rng.randint(1, self.cols))

    def _set_mine_budget(self, count: int) -> None:
        """Reset mine, flag and hint counters after placement."""
        self._num_mines = count
        self._remaining_mines = count
        self._hints = calculate_hints(self._num_covered, count)
        logger.debug(
            "Placed %d mines on %dx%d field, %d hints",
            count, self.rows, self.cols, self._hints,
        )

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all interior boxes."""
        for point in self.iter_points():
            box = self.get_box(point)
            if not box.is_mine:
                box.adjacent_mines = self._count_adjacent_mines(point)

    def _count_adjacent_mines(self, point: Point) -> int:
        """Count mines adjacent to a specific box."""
        return sum(
            1 for neighbor in self._neighbors(point)
            if self.get_box(neighbor).is_mine
        )

    # ========================================================================
    # Point Utilities (Low-level)
    # ========================================================================

    @staticmethod
    def _neighbors(point: Point) -> Iterator[Point]:
        """Yield the 8 points around a point."""
        for delta_x in (-1, 0, 1):
            for delta_y in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                yield Point(point.x + delta_x, point.y + delta_y)

    def is_valid_point(self, point: Point) -> bool:
        """Check if point is inside the playable interior."""
        x, y = point
        return 1 <= x <= self.rows and 1 <= y <= self.cols

    def iter_points(self) -> Iterator[Point]:
        """Iterate over all interior points, row by row."""
        for x in range(1, self.rows + 1):
            for y in range(1, self.cols + 1):
                yield Point(x, y)

    def get_box(self, point: Point) -> Optional[Box]:
        """Get box at point (walls included), or None outside the grid."""
        x, y = point
        if not (0 <= x <= self.rows + 1 and 0 <= y <= self.cols + 1):
            return None
        return self._grid[x][y]

    def _hidden_box(self, point: Point) -> Optional[Box]:
        """Get box at point if it is a hidden interior box."""
        if not self.is_valid_point(point):
            return None
        x, y = point
        box = self._grid[x][y]
        if box.is_wall or not box.is_hidden:
            return None
        return box

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, point: Point) -> bool:
        """
        Open the box at point.

        Opening a box with no adjacent mines floods into its neighbors
        until the whole empty region and its numbered border are open.

        Args:
            point: Point to uncover.

        Returns:
            False if a mine was uncovered, True otherwise (including
            no-ops on walls, open or flagged boxes).
        """
        point = Point(*point)
        box = self._hidden_box(point)
        if box is None:
            return True
        self._open(box)
        if box.is_mine:
            logger.debug("Mine uncovered at (%d, %d)", point.x, point.y)
            return False
        if box.adjacent_mines == 0:
            self._flood(point)
        return True

    def _open(self, box: Box) -> None:
        """Open a hidden box and update the covered count."""
        box.open()
        self._num_covered -= 1

    def _flood(self, start: Point) -> None:
        """Open the empty region around an already open empty box."""
        pending = list(self._neighbors(start))
        while pending:
            point = pending.pop()
            box = self._hidden_box(point)
            if box is None:
                continue
            # Open before scheduling so no box is visited twice
            self._open(box)
            if box.adjacent_mines == 0:
                pending.extend(self._neighbors(point))

    def uncover_neighbors(self, point: Point) -> bool:
        """
        Uncover the 8 boxes around a point.

        Returns:
            False as soon as one of them is a mine.
        """
        point = Point(*point)
        for neighbor in self._neighbors(point):
            if not self.uncover(neighbor):
                return False
        return True

    def toggle_flag(self, point: Point, state: BoxState) -> bool:
        """
        Toggle a marked or suspect flag.

        A hidden box takes the flag, unless it is a mark and no flag
        tokens remain. A flagged box goes back to hidden.

        Args:
            point: Point to flag.
            state: BoxState.MARKED or BoxState.SUSPECT.

        Returns:
            Always True.
        """
        if not self.is_valid_point(point):
            return True
        box = self.get_box(point)
        if box.is_wall or box.is_open:
            return True
        if box.is_hidden:
            if state == BoxState.MARKED and self._remaining_mines == 0:
                return True
            if box.set_flag(state) and state == BoxState.MARKED:
                self._remaining_mines -= 1
        else:
            was_marked = box.is_marked
            box.cover()
            if was_marked:
                self._remaining_mines += 1
        return True

    def use_hint(self, point: Point) -> bool:
        """
        Spend a hint to uncover a box safely.

        A mine found this way does not end the game: it is counted
        as covered again and takes one flag token.

        Returns:
            True if a hint was spent.
        """
        point = Point(*point)
        if self._hints <= 0:
            return False
        self._hints -= 1
        logger.debug("Hint used at (%d, %d), %d left", point.x, point.y, self._hints)
        if not self.uncover(point):
            self._num_covered += 1
            self._remaining_mines = max(0, self._remaining_mines - 1)
        return True

    def run_action(self, point: Point, action: int) -> bool:
        """
        Run a player action.

        Invalid points and unknown action codes are ignored.

        Args:
            point: Target point.
            action: A GameAction code.

        Returns:
            False if the action uncovered a mine.
        """
        if not self.is_valid_point(point):
            return True
        try:
            action = GameAction(action)
        except ValueError:
            logger.debug("Ignoring unknown action %r", action)
            return True
        if action == GameAction.UNCOVER:
            return self.uncover(point)
        if action == GameAction.MARK:
            return self.toggle_flag(point, BoxState.MARKED)
        if action == GameAction.SUSPECT:
            return self.toggle_flag(point, BoxState.SUSPECT)
        if action == GameAction.UNCOVER_NEIGHBORS:
            return self.uncover_neighbors(point)
        self.use_hint(point)
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def num_mines(self) -> int:
        """Get total number of mines."""
        return self._num_mines

    @property
    def num_covered(self) -> int:
        """Get number of boxes not yet open."""
        return self._num_covered

    @property
    def hints(self) -> int:
        """Get remaining hints."""
        return self._hints

    @property
    def remaining_mines(self) -> int:
        """Get remaining flag tokens."""
        return self._remaining_mines

    def is_game_won(self) -> bool:
        """Check if every non-mine box is open."""
        return self._num_covered <= self._num_mines

    def render(self) -> str:
        """Render the in-play view, walls included."""
        return self._render(Box.symbol)

    def render_all(self) -> str:
        """Render every box uncovered, for the end of a game."""
        return self._render(Box.revealed_symbol)

    def _render(self, to_symbol) -> str:
        """Render the grid with one symbol per box."""
        return "\n".join(
            "".join(f"{to_symbol(box):>2} " for box in row)
            for row in self._grid
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the interior as a numpy array.

        Returns:
            2D numpy array of Box.to_observation() values.
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for point in self.iter_points():
            obs[point.x - 1, point.y - 1] = self.get_box(point).to_observation()
        return obs

    def get_hidden_points(self) -> List[Point]:
        """
        Get list of hidden interior points.

        Returns:
            List of points that can still be uncovered.
        """
        return [
            point for point in self.iter_points()
            if self.get_box(point).is_hidden
        ]
