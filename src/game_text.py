"""
text interface: prints the board and reads one-letter commands
"""
import sys

from game import Direction, Outcome


CONTROLS = "Controls: 'w' (Up) / 'a' (Left) / 'd' (Right) / 's' (Down) / 'u' (Undo) / 'q' (Quit)"

# vi keys work too
KEY_BINDINGS = {
    **dict.fromkeys('dDlL', Direction.RIGHT),
    **dict.fromkeys('aAhH', Direction.LEFT),
    **dict.fromkeys('wWkK', Direction.UP),
    **dict.fromkeys('sSjJ', Direction.DOWN),
    **dict.fromkeys('uU', 'undo'),
    **dict.fromkeys('qQ', 'quit'),
}


def render_board(game):
    """board as text, with a score line on top"""
    horiz_line = "\n+" + "------+" * game.size + "\n"

    parts = [f"{game.player}'s score: {game.score}, undos left: {game.undos_left}", horiz_line]
    for i in range(game.size):
        for j in range(game.size):
            value = game.cell(i, j)
            parts.append(f"| {str(value) if value else ' ':<4} ")
        parts.append("|" + horiz_line)
    return "".join(parts)


def play_text_game(game, stream=None):
    """
    run the input loop until the game ends or the player quits

    args:
        game: Game2048 to play
        stream: text stream to read commands from (stdin by default)

    returns:
        final Outcome (GAME_OVER when the player quits)
    """
    if stream is None:
        stream = sys.stdin

    outcome = Outcome.CONTINUE

    print(CONTROLS)
    print(render_board(game), end="")
    while outcome is Outcome.CONTINUE:
        char = stream.read(1)
        if not char:
            # end of input
            outcome = Outcome.GAME_OVER
            break
        if char in "\r\n":
            continue

        command = KEY_BINDINGS.get(char)
        if command is None:
            print("Invalid command.")
        elif command == 'quit':
            outcome = Outcome.GAME_OVER
        elif command == 'undo':
            if not game.undo():
                print("Can't undo: no undos left / second undo in a row / first move.")
                continue
            print(render_board(game), end="")
        else:
            outcome = game.push(command)
            print(render_board(game), end="")

    if outcome is Outcome.GAME_OVER_WIN:
        print(f"===\n{game.player} WINS! Score: {game.score}\n===")
    else:
        print(f"===\nGAME OVER! Score: {game.score}\n===")

    return outcome
