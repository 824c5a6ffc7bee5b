"""
Tests for the 2048 RL environment
"""
import numpy as np

from game import Game2048, Outcome
from game_gym import Game2048Env


def test_reset():
    env = Game2048Env()
    observation, info = env.reset(seed=0)

    assert observation.shape == (4, 4)
    assert observation.dtype == np.int32
    assert env.observation_space.contains(observation)
    assert np.count_nonzero(observation) == 2
    assert info["score"] == 0


def test_reset_is_reproducible():
    a, _ = Game2048Env(size=5).reset(seed=42)
    b, _ = Game2048Env(size=5).reset(seed=42)
    assert a.shape == (5, 5)
    assert np.array_equal(a, b)


def test_random_episode():
    env = Game2048Env()
    env.reset(seed=1)
    env.action_space.seed(1)

    total_reward = 0.0
    for _ in range(5000):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)

        total_reward += reward
        assert not truncated
        assert reward >= 0
        assert info["score"] == total_reward
        assert info["max_tile"] == int(obs.max())
        assert set(info) == {"score", "moved", "outcome", "max_tile"}

        if terminated:
            assert info["outcome"] is not Outcome.CONTINUE
            break


def test_step_reward():
    env = Game2048Env()
    env.reset(seed=3)
    board = np.zeros((4, 4), dtype=np.int64)
    board[0] = [2, 2, 0, 0]
    env.game = Game2048.from_board("agent", board, seed=3)

    # 2 = left
    obs, reward, terminated, _, info = env.step(2)
    assert reward == 4.0
    assert info["moved"]
    assert obs[0, 0] == 4
    assert not terminated


def test_render(capsys):
    env = Game2048Env(player="bot")
    env.reset(seed=0)
    env.render()
    assert "bot's score: 0" in capsys.readouterr().out
    env.close()
