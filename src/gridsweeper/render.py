"""
Plain-text rendering of a board.

Symbols:
    .   hidden
    F   flagged
    1-8 label, blank for 0
    *   hazard exposed after a loss
    X   hazard that lost the game
    +   hazard defused by a win
"""
from typing import Optional, Tuple

from .board import Board
from .cell import Cell
from .session import SessionState


def cell_symbol(
    cell: Cell,
    state: SessionState,
    triggered: Optional[Tuple[int, int]] = None,
) -> str:
    """Single-character symbol for ``cell``."""
    if cell.is_flagged:
        return "F"
    if cell.is_hidden:
        return "."
    if cell.is_hazard:
        if cell.key == triggered:
            return "X"
        return "+" if state == SessionState.WON else "*"
    if cell.adjacent_hazards == 0:
        return " "
    return str(cell.adjacent_hazards)


def render_board(
    board: Board,
    state: SessionState,
    triggered: Optional[Tuple[int, int]] = None,
    coordinates: bool = False,
) -> str:
    """
    Render the board as rows of space-separated symbols.

    Args:
        board: Board to draw.
        state: Session state, used to tell exposed from defused hazards.
        triggered: Position of the hazard that lost the game.
        coordinates: Prefix rows and columns with their indices.
    """
    lines = []
    cell_width = len(str(board.width - 1)) if coordinates else 1
    if coordinates:
        label_width = len(str(board.height - 1))
        header = " ".join(str(col).rjust(cell_width) for col in range(board.width))
        lines.append(" " * (label_width + 1) + header)

    for row in range(board.height):
        symbols = [
            cell_symbol(board.get_cell(row, col), state, triggered).rjust(cell_width)
            for col in range(board.width)
        ]
        line = " ".join(symbols)
        if coordinates:
            line = str(row).rjust(label_width) + " " + line
        lines.append(line)

    return "\n".join(lines)
