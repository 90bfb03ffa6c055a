"""
Board module for the gridsweeper engine.

Implements the game board with hazard placement, neighbor queries,
reveal propagation and win detection. The board never decides the
outcome of a game; GameSession reads its state and does that.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        hazard_count: Total hazards to place.
    """

    width: int = 25
    height: int = 25
    hazard_count: int = 50

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.hazard_count < 0:
            raise InvalidConfiguration("Number of hazards cannot be negative")
        max_hazards = self.width * self.height - 1
        if self.hazard_count > max_hazards:
            raise InvalidConfiguration(f"Too many hazards (max {max_hazards})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of cells keyed by (row, col).

    Hazards are placed at construction, either uniformly at random
    (reproducible when ``seed`` is given) or from a fixed ``layout`` of
    hazard coordinates.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    layout: Optional[Sequence[Tuple[int, int]]] = None
    _cells: Dict[Tuple[int, int], Cell] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Build the grid after dataclass creation."""
        self._rng = random.Random(self.seed)
        self.generate(self.layout)

    # ========================================================================
    # Generation (Low-level)
    # ========================================================================

    def generate(self, layout: Optional[Sequence[Tuple[int, int]]] = None) -> None:
        """
        Create all cells and place hazards.

        Args:
            layout: Fixed hazard positions. Random placement when None.

        Raises:
            InvalidConfiguration: If the layout does not name exactly
                ``hazard_count`` distinct in-bounds cells.
        """
        self._cells = {}
        for row in range(self.height):
            for col in range(self.width):
                self._cells[(row, col)] = Cell(row, col)

        if layout is None:
            positions = list(self._cells)
            hazard_positions = self._rng.sample(positions, self.hazard_count)
        else:
            hazard_positions = self._validate_layout(layout)

        for key in hazard_positions:
            self._cells[key].is_hazard = True
        self._calculate_adjacent_hazards()

        logger.debug(
            "Generated %dx%d board with %d hazards",
            self.width, self.height, self.hazard_count,
        )

    def _validate_layout(
        self, layout: Sequence[Tuple[int, int]]
    ) -> List[Tuple[int, int]]:
        """Check a fixed hazard layout against the configuration."""
        positions = [(int(row), int(col)) for row, col in layout]
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Hazard layout contains duplicates")
        if len(positions) != self.hazard_count:
            raise InvalidConfiguration(
                f"Hazard layout has {len(positions)} cells, "
                f"expected {self.hazard_count}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Hazard ({row}, {col}) is outside the board"
                )
        return positions

    def _calculate_adjacent_hazards(self) -> None:
        """Cache the label of every cell."""
        for cell in self._cells.values():
            cell.adjacent_hazards = self.hazard_neighbor_count(cell)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        """
        Get the in-bounds cells around ``cell``.

        Args:
            cell: Center cell.

        Returns:
            Up to 8 neighboring cells. Offsets off the grid are omitted.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            neighbor = self._cells.get((cell.row + delta_row, cell.col + delta_col))
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def hazard_neighbor_count(self, cell: Cell) -> int:
        """Count hazards among all neighbors, hidden or not."""
        return sum(1 for neighbor in self.neighbors_of(cell) if neighbor.is_hazard)

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    # ========================================================================
    # Reveal Propagation
    # ========================================================================

    def reveal(self, cell: Cell) -> List[Cell]:
        """
        Reveal a cell and flood outward through hazard-free borders.

        A cell propagates only when none of its hidden neighbors is a
        hazard; every hidden safe neighbor is then revealed and processed
        in turn. Cells are flipped to revealed before they are queued, so
        each one is visited once.

        A hazard passed directly is exposed without propagating.

        Args:
            cell: Cell to reveal.

        Returns:
            Cells that changed, in reveal order. Empty if ``cell`` was
            already revealed.
        """
        if not cell.reveal():
            return []
        if cell.is_hazard:
            return [cell]

        changed = []
        pending = [cell]
        while pending:
            current = pending.pop()
            changed.append(current)

            hidden = [n for n in self.neighbors_of(current) if n.is_hidden]
            safe = [n for n in hidden if not n.is_hazard]
            if len(safe) != len(hidden):
                continue
            for neighbor in safe:
                neighbor.reveal()
                pending.append(neighbor)
        return changed

    def reveal_all(self) -> List[Cell]:
        """Reveal every hidden cell, hazards included."""
        return [cell for cell in self.cells() if cell.reveal()]

    def win_condition(self) -> bool:
        """Check if every non-hazard cell is revealed."""
        return self.safe_revealed_count + self.hazard_count == self.total_cells

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def hazard_count(self) -> int:
        return self.config.hazard_count

    @property
    def total_cells(self) -> int:
        return self.config.total_cells

    @property
    def revealed_count(self) -> int:
        """Number of cells no longer hidden."""
        return sum(1 for cell in self._cells.values() if not cell.is_hidden)

    @property
    def safe_revealed_count(self) -> int:
        """Number of revealed non-hazard cells."""
        return sum(
            1 for cell in self._cells.values()
            if not cell.is_hidden and not cell.is_hazard
        )

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._cells.values() if cell.is_flagged)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        return self._cells.get((row, col))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield self._cells[(row, col)]

    def all_hazards(self) -> Iterator[Cell]:
        """Lazily yield every hazard cell."""
        return (cell for cell in self.cells() if cell.is_hazard)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed hazard
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [
            cell.key for cell in self.cells()
            if cell.is_hidden and not cell.is_flagged
        ]
