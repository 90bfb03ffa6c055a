"""
Unit tests for text rendering.
"""
from gridsweeper import GameSession, SessionState
from gridsweeper.render import render_board


class TestRenderBoard:
    """Test symbols and layout of rendered boards."""

    def test_new_board_is_all_hidden(self, wall_session: GameSession) -> None:
        text = render_board(wall_session.board, wall_session.state)
        assert text.splitlines() == [". . . . ."] * 5

    def test_flags_and_labels(self, wall_session: GameSession) -> None:
        wall_session.secondary_action(0, 4)
        wall_session.primary_action(0, 0)
        lines = render_board(wall_session.board, wall_session.state).splitlines()
        assert lines[0] == "  2 . . F"
        assert lines[2] == "  3 . . ."

    def test_loss_marks_trigger(self, wall_session: GameSession) -> None:
        wall_session.primary_action(0, 0)
        wall_session.primary_action(1, 2)
        lines = render_board(
            wall_session.board, wall_session.state, wall_session.triggered_cell
        ).splitlines()
        assert lines[0] == "  2 * . ."
        assert lines[1] == "  3 X . ."

    def test_win_shows_defused_hazard(self, corner_session: GameSession) -> None:
        corner_session.primary_action(0, 0)
        assert corner_session.state == SessionState.WON
        lines = render_board(corner_session.board, corner_session.state).splitlines()
        assert lines[4] == "      1 +"

    def test_coordinates(self, wall_session: GameSession) -> None:
        lines = render_board(
            wall_session.board, wall_session.state, coordinates=True
        ).splitlines()
        assert lines[0] == "  0 1 2 3 4"
        assert lines[3] == "2 . . . . ."
