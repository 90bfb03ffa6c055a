"""
Handle-based interface for presentation layers.

Every call takes the GameSession returned by ``new_session`` as its
handle and answers with plain dicts that a UI adapter can serialize
directly.
"""
from typing import Any, Dict, Optional

from .board import BoardConfig
from .session import GameSession


def new_session(
    width: int = 25,
    height: int = 25,
    hazard_count: int = 50,
    seed: Optional[int] = None,
) -> GameSession:
    """
    Create a session in NOT_STARTED.

    Raises:
        InvalidConfiguration: If ``hazard_count >= width * height`` or a
            dimension is not positive. No session is created.
    """
    return GameSession(BoardConfig(width, height, hazard_count), seed=seed)


def primary_action(handle: GameSession, row: int, col: int) -> Dict[str, Any]:
    return handle.primary_action(row, col).to_dict()


def secondary_action(handle: GameSession, row: int, col: int) -> Dict[str, Any]:
    return handle.secondary_action(row, col).to_dict()


def tick(handle: GameSession) -> int:
    """Called by the external periodic driver, nominally once per second."""
    return handle.tick()


def get_snapshot(handle: GameSession) -> Dict[str, Any]:
    return handle.snapshot().to_dict()
