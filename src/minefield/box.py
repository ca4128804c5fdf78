"""
Box module for the Minefield game.

Represents a single box of the field: what it holds (a mine, a wall,
or the count of adjacent mines) and how the player currently sees it
(hidden/open/marked/suspect).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class BoxKind(Enum):
    """What a box holds."""

    COUNT = auto()
    MINE = auto()
    WALL = auto()


class BoxState(Enum):
    """Possible visual states of a box."""

    HIDDEN = auto()
    OPEN = auto()
    MARKED = auto()
    SUSPECT = auto()


_FLAG_SYMBOLS = {
    BoxState.MARKED: "X",
    BoxState.SUSPECT: "S",
    BoxState.HIDDEN: ".",
}


# ============================================================================
# Box Data Class
# ============================================================================

@dataclass
class Box:
    """
    Represents a single box in the Minefield grid.

    Attributes:
        kind: Whether the box is a mine, a wall, or holds a count.
        adjacent_mines: Count of mines in neighboring boxes (0-8).
        state: Current visual state.
    """

    kind: BoxKind = BoxKind.COUNT
    adjacent_mines: int = 0
    state: BoxState = BoxState.HIDDEN

    @classmethod
    def wall(cls) -> "Box":
        """Create a border box. Walls are open and never change."""
        return cls(kind=BoxKind.WALL, state=BoxState.OPEN)

    def open(self) -> bool:
        """
        Open this box.

        Returns:
            True if the box was hidden and is now open.
        """
        if self.is_wall or self.state != BoxState.HIDDEN:
            return False
        self.state = BoxState.OPEN
        return True

    def set_flag(self, state: BoxState) -> bool:
        """
        Put a marked or suspect flag on a hidden box.

        Returns:
            True if the flag was set.
        """
        if state not in (BoxState.MARKED, BoxState.SUSPECT):
            return False
        if self.is_wall or self.state != BoxState.HIDDEN:
            return False
        self.state = state
        return True

    def cover(self) -> bool:
        """
        Remove a marked or suspect flag.

        Returns:
            True if the box went back to hidden.
        """
        if self.state not in (BoxState.MARKED, BoxState.SUSPECT):
            return False
        self.state = BoxState.HIDDEN
        return True

    @property
    def is_mine(self) -> bool:
        """Check if box holds a mine."""
        return self.kind == BoxKind.MINE

    @property
    def is_wall(self) -> bool:
        """Check if box is part of the border."""
        return self.kind == BoxKind.WALL

    @property
    def is_hidden(self) -> bool:
        """Check if box is hidden."""
        return self.state == BoxState.HIDDEN

    @property
    def is_marked(self) -> bool:
        """Check if box is marked as a mine."""
        return self.state == BoxState.MARKED

    @property
    def is_suspect(self) -> bool:
        """Check if box is marked as suspect."""
        return self.state == BoxState.SUSPECT

    @property
    def is_open(self) -> bool:
        """Check if box is open."""
        return self.state == BoxState.OPEN

    def symbol(self) -> str:
        """
        Symbol for the in-play view.

        Returns:
            "X": Marked box
            "S": Suspect box
            ".": Hidden box
            Otherwise the revealed symbol.
        """
        if self.state in _FLAG_SYMBOLS:
            return _FLAG_SYMBOLS[self.state]
        return self.revealed_symbol()

    def revealed_symbol(self) -> str:
        """
        Symbol of the box content, whatever its state.

        Returns:
            "+": Wall
            "@": Mine
            " ": No adjacent mines
            "1"-"8": Adjacent mine count
        """
        if self.is_wall:
            return "+"
        if self.is_mine:
            return "@"
        if self.adjacent_mines == 0:
            return " "
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert box to observation value for the gym environment.

        Returns:
            -1: Hidden box
            -2: Marked box
            -3: Suspect box
            0-8: Open box with adjacent mine count
            9: Open mine
        """
        if self.state == BoxState.HIDDEN:
            return -1
        if self.state == BoxState.MARKED:
            return -2
        if self.state == BoxState.SUSPECT:
            return -3
        if self.is_mine:
            return 9
        return self.adjacent_mines
