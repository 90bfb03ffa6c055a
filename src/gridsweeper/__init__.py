"""
gridsweeper game engine.

Provides the grid-clearing game core: cells, board generation and
reveal propagation, and the session state machine that drives them.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, DEFAULT_CONFIG
from .clock import Clock
from .errors import InvalidConfiguration
from .session import ActionResult, CellView, GameSession, SessionState, Snapshot

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "DEFAULT_CONFIG",
    "Clock",
    "InvalidConfiguration",
    "ActionResult",
    "CellView",
    "GameSession",
    "SessionState",
    "Snapshot",
]
