"""
Unit tests for the handle-based interface.
"""
import pytest
from gridsweeper import InvalidConfiguration, api


class TestApi:
    """Test dict payloads of the external interface."""

    def test_new_session_validates(self) -> None:
        with pytest.raises(InvalidConfiguration):
            api.new_session(3, 3, 9)
        with pytest.raises(InvalidConfiguration):
            api.new_session(0, 3, 1)

    def test_snapshot_payload(self) -> None:
        handle = api.new_session(4, 3, 2, seed=5)
        snapshot = api.get_snapshot(handle)
        assert snapshot["sessionState"] == "NOT_STARTED"
        assert snapshot["elapsedSeconds"] == 0
        assert len(snapshot["cells"]) == 12
        assert set(snapshot["cells"][0]) == {
            "row", "col", "hidden", "flagged", "hazard", "label", "triggered",
        }

    def test_primary_action_payload(self) -> None:
        handle = api.new_session(25, 25, 50, seed=11)
        hazard = next(handle.board.all_hazards())

        payload = api.primary_action(handle, hazard.row, hazard.col)

        assert payload["sessionState"] == "LOST"
        assert len(payload["cellsChanged"]) == 50
        assert all(not cell["hidden"] for cell in payload["cellsChanged"])

    def test_secondary_action_payload(self) -> None:
        handle = api.new_session(4, 4, 1, seed=0)
        payload = api.secondary_action(handle, 1, 2)
        assert payload == {
            "cellsChanged": [{
                "row": 1, "col": 2, "hidden": True, "flagged": True,
                "hazard": handle.board.get_cell(1, 2).is_hazard,
                "label": None, "triggered": False,
            }],
            "sessionState": "NOT_STARTED",
        }

    def test_out_of_range_payload_is_empty(self) -> None:
        handle = api.new_session(4, 4, 1, seed=0)
        payload = api.primary_action(handle, 9, 9)
        assert payload == {"cellsChanged": [], "sessionState": "NOT_STARTED"}

    def test_tick_after_loss(self) -> None:
        handle = api.new_session(25, 25, 50, seed=11)
        safe = next(c for c in handle.board.cells() if not c.is_hazard)
        api.primary_action(handle, safe.row, safe.col)
        if handle.is_terminal:
            pytest.skip("first reveal cleared the board")
        assert api.tick(handle) == 1

        hazard = next(handle.board.all_hazards())
        api.primary_action(handle, hazard.row, hazard.col)
        assert api.tick(handle) == 1
        assert api.get_snapshot(handle)["elapsedSeconds"] == 1
