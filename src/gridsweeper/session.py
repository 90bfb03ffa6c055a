"""
Game session state machine.

A GameSession owns one Board and one Clock and routes player actions
to them:

    NOT_STARTED --first primary action--> RUNNING
    RUNNING --last safe cell revealed--> WON
    RUNNING --hazard chosen for reveal--> LOST

WON and LOST are terminal. Actions on a terminal session, or on
coordinates outside the board, are absorbed and change nothing.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .board import Board, BoardConfig
from .cell import Cell
from .clock import Clock

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class SessionState(Enum):
    """Possible states of a session."""

    NOT_STARTED = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({SessionState.WON, SessionState.LOST})


# ============================================================================
# Result Types
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """Read-only picture of a cell for a presentation layer."""

    row: int
    col: int
    hidden: bool
    flagged: bool
    hazard: bool
    label: Optional[int]
    triggered: bool = False

    @classmethod
    def from_cell(cls, cell: Cell, triggered: bool = False) -> "CellView":
        """
        Build a view of ``cell``.

        The label is only given for revealed non-hazard cells; 0 means
        blank.
        """
        label = None
        if not cell.is_hidden and not cell.is_hazard:
            label = cell.adjacent_hazards
        return cls(
            row=cell.row,
            col=cell.col,
            hidden=cell.is_hidden,
            flagged=cell.is_flagged,
            hazard=cell.is_hazard,
            label=label,
            triggered=triggered,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row": self.row,
            "col": self.col,
            "hidden": self.hidden,
            "flagged": self.flagged,
            "hazard": self.hazard,
            "label": self.label,
            "triggered": self.triggered,
        }


@dataclass
class ActionResult:
    """Cells changed by one action and the session state afterwards."""

    session_state: SessionState
    cells_changed: List[CellView] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cellsChanged": [view.to_dict() for view in self.cells_changed],
            "sessionState": self.session_state.name,
        }


@dataclass
class Snapshot:
    """Full state of a session."""

    cells: List[CellView]
    session_state: SessionState
    elapsed_seconds: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cells": [view.to_dict() for view in self.cells],
            "sessionState": self.session_state.name,
            "elapsedSeconds": self.elapsed_seconds,
        }


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One play-through from board generation to a terminal outcome.

    There is no first-click safety: the first primary action may land
    on a hazard and lose the game immediately.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        layout: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> None:
        """
        Initialize the session with a fresh board.

        Args:
            config: Board configuration (default: 25x25 with 50 hazards).
            seed: Random seed for hazard placement.
            layout: Fixed hazard positions, overriding random placement.

        Raises:
            InvalidConfiguration: If the board cannot be built.
        """
        self._clock = Clock()
        self.new_session(config, seed=seed, layout=layout)

    def new_session(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        layout: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> None:
        """
        Discard the current board and clock and start over.

        The old clock is stopped before it is replaced, so a driver still
        holding it cannot advance anything.
        """
        board = Board(config or BoardConfig(), seed=seed, layout=layout)

        self._clock.stop()
        self._clock = Clock()
        self._board = board
        self._state = SessionState.NOT_STARTED
        self._triggered: Optional[Tuple[int, int]] = None

        logger.info(
            "New session: %dx%d with %d hazards",
            board.width, board.height, board.hazard_count,
        )

    # ========================================================================
    # Actions
    # ========================================================================

    def primary_action(self, row: int, col: int) -> ActionResult:
        """
        Reveal a cell, or unflag it if it carries a flag.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Changed cells and the resulting session state.
        """
        cell = self._actionable_cell(row, col)
        if cell is None:
            return self._result([])

        self.start_timer_on_first_action()

        if cell.is_flagged:
            cell.toggle_flag()
            return self._result([cell])

        if cell.is_hazard:
            return self._result(self._lose(cell))

        changed = self._board.reveal(cell)
        if changed and self._board.win_condition():
            changed.extend(self._win())
        return self._result(changed)

    def secondary_action(self, row: int, col: int) -> ActionResult:
        """
        Toggle the flag on a hidden cell.

        Does not start the clock.
        """
        cell = self._actionable_cell(row, col)
        if cell is None or not cell.toggle_flag():
            return self._result([])
        return self._result([cell])

    def start_timer_on_first_action(self) -> None:
        """Move to RUNNING and start the clock; repeated calls are no-ops."""
        if self._state == SessionState.NOT_STARTED:
            self._state = SessionState.RUNNING
        self._clock.start()

    def tick(self) -> int:
        """
        Advance elapsed time by one second while RUNNING.

        Returns:
            Elapsed seconds after the tick.
        """
        if self._state != SessionState.RUNNING:
            return self._clock.value
        return self._clock.tick()

    def snapshot(self) -> Snapshot:
        """Capture every cell, the state and the elapsed time."""
        return Snapshot(
            cells=[self._view(cell) for cell in self._board.cells()],
            session_state=self._state,
            elapsed_seconds=self._clock.value,
        )

    # ========================================================================
    # Outcomes
    # ========================================================================

    def _lose(self, cell: Cell) -> List[Cell]:
        """End the game on ``cell`` and expose every hazard."""
        self._state = SessionState.LOST
        self._clock.stop()
        self._triggered = cell.key
        logger.info("Session lost at %s after %ds", cell.key, self._clock.value)
        return [hazard for hazard in self._board.all_hazards() if hazard.reveal()]

    def _win(self) -> List[Cell]:
        """End the game as won and reveal everything left."""
        self._state = SessionState.WON
        self._clock.stop()
        logger.info("Session won after %ds", self._clock.value)
        return self._board.reveal_all()

    # ========================================================================
    # Helpers
    # ========================================================================

    def _actionable_cell(self, row: int, col: int) -> Optional[Cell]:
        """Look up a cell, or None when the action must be absorbed."""
        if self.is_terminal:
            logger.debug("Ignoring action on finished session at (%s, %s)", row, col)
            return None
        cell = self._board.get_cell(row, col)
        if cell is None:
            logger.debug("Ignoring action outside the board at (%s, %s)", row, col)
        return cell

    def _view(self, cell: Cell) -> CellView:
        return CellView.from_cell(cell, triggered=cell.key == self._triggered)

    def _result(self, cells: List[Cell]) -> ActionResult:
        return ActionResult(
            session_state=self._state,
            cells_changed=[self._view(cell) for cell in cells],
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def elapsed_seconds(self) -> int:
        return self._clock.value

    @property
    def is_terminal(self) -> bool:
        """Check if the game is over."""
        return self._state in TERMINAL_STATES

    @property
    def triggered_cell(self) -> Optional[Tuple[int, int]]:
        """Position of the hazard that lost the game, if any."""
        return self._triggered

    @property
    def remaining_hazards(self) -> int:
        """Hazard count minus flags placed; negative when over-flagged."""
        return self._board.hazard_count - self._board.flag_count
