"""
Cell module for the gridsweeper engine.

Represents individual cells on the game board with their identity
(row/col), content (hazard or not) and state (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        row: Row index, fixed at creation.
        col: Column index, fixed at creation.
        is_hazard: Whether this cell holds a hazard.
        adjacent_hazards: Count of hazards in neighboring cells (0-8).
        is_hidden: False once the cell has been revealed.
        is_flagged: Whether the player has flagged this cell.
    """

    row: int
    col: int
    is_hazard: bool = False
    adjacent_hazards: int = 0
    is_hidden: bool = True
    is_flagged: bool = False

    @property
    def key(self) -> Tuple[int, int]:
        """Unique (row, col) key of this cell within its board."""
        return self.row, self.col

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Clears any flag, since a revealed cell is never flagged.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed.
        """
        if not self.is_hidden:
            return False
        self.is_hidden = False
        self.is_flagged = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if not self.is_hidden:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return not self.is_hidden

    @property
    def state(self) -> CellState:
        """Current visual state."""
        if not self.is_hidden:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent hazard count
            9: Revealed hazard
        """
        if self.is_flagged:
            return -2
        if self.is_hidden:
            return -1
        if self.is_hazard:
            return 9
        return self.adjacent_hazards
