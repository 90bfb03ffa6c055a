"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gridsweeper import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 25x25 board with 50 hazards."""
    return Board(seed=1234)


@pytest.fixture
def corner_board() -> Board:
    """Create a 5x5 board with a single hazard in the bottom-right corner."""
    return Board(BoardConfig(5, 5, 1), layout=[(4, 4)])


@pytest.fixture
def wall_board() -> Board:
    """
    Create a 5x5 board split by a column of hazards.

        . . H . .
        . . H . .
        . . H . .
        . . H . .
        . . H . .
    """
    return Board(
        BoardConfig(5, 5, 5),
        layout=[(row, 2) for row in range(5)],
    )


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no hazards for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def hazard_cell() -> Cell:
    """Create a cell holding a hazard."""
    return Cell(0, 0, is_hazard=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session() -> GameSession:
    """Session on the 5x5 board with one hazard at (4, 4)."""
    return GameSession(BoardConfig(5, 5, 1), layout=[(4, 4)])


@pytest.fixture
def wall_session() -> GameSession:
    """Session on the 5x5 board with a hazard column at col 2."""
    return GameSession(
        BoardConfig(5, 5, 5),
        layout=[(row, 2) for row in range(5)],
    )


@pytest.fixture
def default_session() -> GameSession:
    """Session on the default 25x25 board with 50 hazards."""
    return GameSession(seed=42)
