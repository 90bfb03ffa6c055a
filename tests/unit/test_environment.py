"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest
from gridsweeper import BoardConfig
from gridsweeper.environment import SweeperEnv

WALL = [(row, 2) for row in range(5)]


@pytest.fixture
def wall_env() -> SweeperEnv:
    env = SweeperEnv(BoardConfig(5, 5, 5), render_mode="ansi")
    env.reset(seed=0, options={"layout": WALL})
    return env


class TestSweeperEnv:
    """Test reset, step rewards, masks and rendering."""

    def test_reset_observation(self, wall_env: SweeperEnv) -> None:
        obs, info = wall_env.reset(options={"layout": WALL})
        assert obs.shape == (5, 5)
        assert np.all(obs == -1)
        assert wall_env.observation_space.contains(obs)
        assert info["game_state"] == "NOT_STARTED"
        assert info["total_safe"] == 20

    def test_safe_step(self, wall_env: SweeperEnv) -> None:
        obs, reward, terminated, truncated, info = wall_env.step(0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert info["revealed"] == 10
        assert obs[2, 1] == 3

    def test_repeated_step_is_penalized(self, wall_env: SweeperEnv) -> None:
        wall_env.step(0)
        _, reward, _, _, _ = wall_env.step(0)
        assert reward == pytest.approx(-0.1)

    def test_hazard_step_loses(self, wall_env: SweeperEnv) -> None:
        obs, reward, terminated, _, info = wall_env.step(2)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert np.all(obs[:, 2] == 9)

    def test_winning_step(self) -> None:
        env = SweeperEnv(BoardConfig(5, 5, 1))
        env.reset(options={"layout": [(4, 4)]})
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_each_step_ticks_clock(self, wall_env: SweeperEnv) -> None:
        wall_env.step(0)
        _, _, _, _, info = wall_env.step(3)
        assert info["elapsed_seconds"] == 2

    def test_action_mask(self, wall_env: SweeperEnv) -> None:
        assert wall_env.get_action_mask().sum() == 25
        wall_env.step(0)
        mask = wall_env.get_action_mask()
        assert mask.dtype == np.int8
        assert mask.sum() == 15
        assert mask[0] == 0

    def test_masked_sampling_picks_hidden_cells(self, wall_env: SweeperEnv) -> None:
        wall_env.step(0)
        wall_env.action_space.seed(0)
        for _ in range(20):
            action = wall_env.action_space.sample(mask=wall_env.get_action_mask())
            assert action % 5 >= 2

    def test_seeded_reset_is_reproducible(self) -> None:
        first = SweeperEnv(BoardConfig(9, 9, 10))
        second = SweeperEnv(BoardConfig(9, 9, 10))
        first.reset(seed=3)
        second.reset(seed=3)
        assert [c.key for c in first.session.board.all_hazards()] == [
            c.key for c in second.session.board.all_hazards()
        ]

    def test_render_ansi(self, wall_env: SweeperEnv) -> None:
        text = wall_env.render()
        assert isinstance(text, str)
        assert len(text.splitlines()) == 5
