import gymnasium as gym
from gymnasium import spaces
import numpy as np
from game import Game2048, Direction, Outcome, MAX_BLOCK
from game_text import render_board


class Game2048Env(gym.Env):
    """
    gymnasium environment for 2048 game

    - observation is the raw board (block values, not log2)
    - reward is the score gained by the move
    - episode terminates on a win or a loss
    - undo is not exposed, agents play with no undo budget
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, size=4, target=2048, player="agent"):
        super().__init__()

        self.size = size
        self.target = target
        self.player = player
        self.game = Game2048(player, size=size, target=target, undos=0)

        # 0 = up, 1 = down, 2 = left, 3 = right
        self.action_space = spaces.Discrete(4)

        self.observation_space = spaces.Box(
            low=0,
            high=MAX_BLOCK,
            shape=(size, size),
            dtype=np.int32
        )

        self.action_to_direction = {
            0: Direction.UP,
            1: Direction.DOWN,
            2: Direction.LEFT,
            3: Direction.RIGHT
        }

    def _get_observation(self):
        return self.game.board.astype(np.int32)

    def reset(self, seed=None, options=None):
        """reset the game to start a new episode"""
        super().reset(seed=seed)

        # the game draws from the env's seeded generator
        self.game = Game2048(self.player, size=self.size, target=self.target,
                             undos=0, rng=self.np_random)

        observation = self._get_observation()
        info = {"score": self.game.score}

        return observation, info

    def step(self, action):
        """take one step in the environment"""
        direction = self.action_to_direction[int(action)]

        score_before = self.game.score
        board_before = self.game.board
        outcome = self.game.push(direction)
        moved = not np.array_equal(board_before, self.game.board)

        reward = float(self.game.score - score_before)
        observation = self._get_observation()

        terminated = outcome is not Outcome.CONTINUE
        truncated = False

        info = {
            "score": self.game.score,
            "moved": moved,
            "outcome": outcome,
            "max_tile": self.game.max_block
        }

        return observation, reward, terminated, truncated, info

    def render(self, mode="human"):
        """display the game state"""
        if mode == "human":
            print(render_board(self.game))

    def close(self):
        pass
