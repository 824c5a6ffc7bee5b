"""
core game logic and mechanics
"""
from dataclasses import dataclass
from enum import Enum

import numpy as np

from resolver import resolve_grid


MIN_SIZE = 4
MAX_SIZE = 6

MAX_BLOCK = 8192

MIN_TARGET = 2048
MAX_TARGET = MAX_BLOCK

BLOCK_FOUR_PROBABILITY = 0.15


class Direction(Enum):
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'


class Outcome(Enum):
    CONTINUE = 'continue'
    GAME_OVER = 'game_over'
    GAME_OVER_WIN = 'game_over_win'


class GameError(ValueError):
    """invalid parameters for a new game"""


class EmptyPlayerName(GameError):
    pass


class InvalidSize(GameError):
    pass


class InvalidTarget(GameError):
    pass


class InvalidBoard(GameError):
    pass


@dataclass(frozen=True)
class Snapshot:
    """stable state that an undo restores"""

    grid: np.ndarray
    score: int
    free_cells: int


def is_power_of_two(value):
    return value > 0 and value & (value - 1) == 0


def _can_merge_any_neighbor(grid, i, j):
    size = grid.shape[0]
    value = grid[i, j]
    # left, right, up, down
    if j > 0 and grid[i, j - 1] == value:
        return True
    if j < size - 1 and grid[i, j + 1] == value:
        return True
    if i > 0 and grid[i - 1, j] == value:
        return True
    if i < size - 1 and grid[i + 1, j] == value:
        return True
    return False


def evaluate_outcome(grid, target):
    """
    classify a board

    a block equal to target wins, even on an otherwise stuck board.
    otherwise the game goes on while any cell is empty or has an equal
    neighbor
    """
    can_continue = False
    size = grid.shape[0]
    for i in range(size):
        for j in range(size):
            value = grid[i, j]
            if value == target:
                return Outcome.GAME_OVER_WIN
            if not can_continue and (value == 0 or _can_merge_any_neighbor(grid, i, j)):
                can_continue = True

    if can_continue:
        return Outcome.CONTINUE
    return Outcome.GAME_OVER


def _is_integer(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _validate(player, size, target):
    if not player:
        raise EmptyPlayerName("player name cannot be empty")
    if not _is_integer(size) or size < MIN_SIZE or size > MAX_SIZE:
        raise InvalidSize(
            f"invalid size: {size}, allowed range [{MIN_SIZE}, {MAX_SIZE}]"
        )
    if (not _is_integer(target) or target < MIN_TARGET or target > MAX_TARGET
            or not is_power_of_two(target)):
        raise InvalidTarget(
            f"invalid target: {target}, allowed values: 2048, 4096, 8192"
        )


class Game2048:
    """
    one game of 2048 on an NxN board

    push() slides and merges blocks, spawns a new block after every
    effective move and reports the outcome. undo() rolls back the last
    effective move, once per move, while the undo budget lasts
    """

    def __init__(self, player, size=4, target=2048, undos=3, seed=None, rng=None):
        """
        args:
            player: player's name, non-empty
            size: board size, 4 (classic), 5 or 6
            target: end-game block, 2048, 4096 or 8192
            undos: undo budget, negative values count as 0
            seed: seed for a new random generator (ignored when rng is given)
            rng: numpy Generator used for spawns
        """
        _validate(player, size, target)

        self._player = player
        self._size = size
        self._target = target
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._start(np.zeros((size, size), dtype=np.int64), 0, undos)

        # spawn two blocks at the start of the game
        self._spawn()
        self._spawn()

    @classmethod
    def from_board(cls, player, board, target=2048, undos=0, score=0, seed=None, rng=None):
        """start a game from an existing board, without initial spawns"""
        grid = np.array(board, dtype=np.int64)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise InvalidBoard(f"board must be square, got shape {grid.shape}")
        _validate(player, grid.shape[0], target)
        for value in grid.flat:
            if value != 0 and (not is_power_of_two(int(value)) or value > MAX_BLOCK):
                raise InvalidBoard(f"invalid block value: {value}")
        if score < 0:
            raise InvalidBoard(f"score cannot be negative: {score}")

        game = cls.__new__(cls)
        game._player = player
        game._size = grid.shape[0]
        game._target = target
        game._rng = rng if rng is not None else np.random.default_rng(seed)
        game._start(grid, score, undos)
        return game

    def _start(self, grid, score, undos):
        self._grid = grid
        self._score = score
        self._free_cells = int(np.count_nonzero(grid == 0))

        self._undos_left = max(undos, 0)
        self._can_undo = False
        self._previous = None
        self._outcome = Outcome.CONTINUE

    @property
    def player(self):
        return self._player

    @property
    def size(self):
        return self._size

    @property
    def target(self):
        return self._target

    @property
    def score(self):
        return self._score

    @property
    def undos_left(self):
        return self._undos_left

    @property
    def free_cells(self):
        return self._free_cells

    @property
    def can_undo(self):
        return self._can_undo

    @property
    def outcome(self):
        """outcome of the last effective push"""
        return self._outcome

    @property
    def board(self):
        """read-only copy of the board"""
        board = self._grid.copy()
        board.flags.writeable = False
        return board

    @property
    def max_block(self):
        return int(self._grid.max())

    def cell(self, row, col):
        """block at (row, col), or -1 outside the board"""
        if row < 0 or row >= self._size or col < 0 or col >= self._size:
            return -1
        return int(self._grid[row, col])

    def _random_block(self):
        if self._rng.random() < BLOCK_FOUR_PROBABILITY:
            return 4
        return 2

    def _spawn(self):
        """place a 2 or a 4 on a random empty cell"""
        if self._free_cells == 0:
            return

        while True:
            n = int(self._rng.integers(self._size * self._size))
            i, j = divmod(n, self._size)
            if self._grid[i, j] == 0:
                self._grid[i, j] = self._random_block()
                break

        self._free_cells -= 1

    def _snapshot(self):
        return Snapshot(grid=self._grid.copy(), score=self._score, free_cells=self._free_cells)

    def _restore(self, snapshot):
        self._grid = snapshot.grid.copy()
        self._score = snapshot.score
        self._free_cells = snapshot.free_cells

    def push(self, direction):
        """
        push all blocks toward one edge

        args:
            direction: Direction or one of 'left', 'right', 'up', 'down'

        returns:
            Outcome of the move. a push that moves nothing changes
            nothing and returns CONTINUE
        """
        direction = Direction(direction)

        # undo is disabled once the budget is spent
        pending = self._snapshot() if self._undos_left > 0 else None

        moved, points, merges = resolve_grid(self._grid, direction.value)
        if not moved:
            return Outcome.CONTINUE

        self._score += points
        self._free_cells += merges
        self._can_undo = True
        self._spawn()
        if pending is not None:
            self._previous = pending

        self._outcome = evaluate_outcome(self._grid, self._target)
        return self._outcome

    def undo(self):
        """
        roll back the last effective push, including its spawn

        returns False when no undos are left or the last action was
        already an undo (or no move was made yet)
        """
        if self._undos_left == 0 or not self._can_undo:
            return False
        self._restore(self._previous)
        self._undos_left -= 1
        # two consecutive undos are impossible
        self._can_undo = False
        self._outcome = Outcome.CONTINUE
        return True

    def evaluate(self):
        """outcome of the current board, without making a move"""
        return evaluate_outcome(self._grid, self._target)
