"""
Tests for the pygame interface, run without a display
"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from game import Direction, Game2048, Outcome
from game_gui import GameGUI, action_for_key


LOSING_BOARD = [
    [2, 2, 8, 16],
    [64, 2, 4, 32],
    [2, 4, 8, 16],
    [4, 8, 16, 2],
]


def test_action_for_key():
    assert action_for_key(pygame.K_LEFT) is Direction.LEFT
    assert action_for_key(pygame.K_w) is Direction.UP
    assert action_for_key(pygame.K_u) == 'undo'
    assert action_for_key(pygame.K_r) == 'restart'
    assert action_for_key(pygame.K_ESCAPE) == 'quit'
    assert action_for_key(pygame.K_SPACE) is None


def test_keypresses():
    game = Game2048("Tester", size=5, undos=1, seed=6)
    gui = GameGUI(game)
    assert gui.game is game
    assert gui.window_width == gui.window_height - gui.header_height

    assert gui.handle_keypress(pygame.K_u)
    assert gui.message == "Can't undo now"

    for key in (pygame.K_LEFT, pygame.K_UP, pygame.K_RIGHT, pygame.K_DOWN):
        assert gui.handle_keypress(key)
    gui.draw_board()

    assert gui.handle_keypress(pygame.K_r)
    assert gui.game is not game
    assert gui.game.size == 5
    assert gui.game.score == 0
    assert gui.game.undos_left == 1

    assert not gui.handle_keypress(pygame.K_q)


def test_moves_stop_after_game_over():
    gui = GameGUI(Game2048.from_board("Tester", LOSING_BOARD, undos=1, seed=0))

    gui.handle_keypress(pygame.K_LEFT)
    assert gui.outcome is Outcome.GAME_OVER
    before = gui.game.board

    gui.handle_keypress(pygame.K_DOWN)
    assert gui.outcome is Outcome.GAME_OVER
    assert np.array_equal(gui.game.board, before)
    gui.draw_board()

    gui.handle_keypress(pygame.K_u)
    assert gui.outcome is Outcome.CONTINUE
    assert np.array_equal(gui.game.board, np.array(LOSING_BOARD))
