"""
Tests for the command line launcher
"""
import io

from play import main, parse_args


def test_defaults():
    args = parse_args([])
    assert args.player == "Player"
    assert (args.size, args.target, args.undos) == (4, 2048, 3)
    assert not args.text
    assert args.seed is None


def test_invalid_parameters(capsys):
    assert main(["--size", "3", "--text"]) == 1
    assert "error: invalid size: 3" in capsys.readouterr().err

    assert main(["--target", "5000", "--text"]) == 1
    assert "error: invalid target: 5000" in capsys.readouterr().err

    assert main(["--player", "", "--text"]) == 1
    assert "error: player name cannot be empty" in capsys.readouterr().err


def test_text_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("w\na\nq\n"))
    assert main(["--text", "--player", "Zoe", "--size", "6", "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Zoe's score:" in out
    assert "+------+------+------+------+------+------+" in out
