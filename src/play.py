"""
launch a local game of 2048
"""
import argparse
import sys

from game import Game2048, GameError


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="2048 sliding-tile puzzle")
    p.add_argument("--player", type=str, default="Player", help="player's name")
    p.add_argument("--size", type=int, default=4, help="board size: 4 (classic), 5 or 6")
    p.add_argument("--target", type=int, default=2048, help="end-game block: 2048, 4096 or 8192")
    p.add_argument("--undos", type=int, default=3, help="number of undos")
    p.add_argument("--text", action="store_true", help="text interface instead of the graphical one")
    p.add_argument("--seed", type=int, default=None, help="random seed for reproducible games")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        game = Game2048(args.player, size=args.size, target=args.target,
                        undos=args.undos, seed=args.seed)
    except GameError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.text:
        from game_text import play_text_game
        play_text_game(game)
        return 0

    # pygame initializes on import, keep it out of text games
    from game_gui import GameGUI
    GameGUI(game).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
