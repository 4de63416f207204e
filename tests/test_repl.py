"""Tests for the read-eval-print loop."""

import io

from rich.console import Console

from fabula.engine.atlas import Atlas
from fabula.engine.game import Game
from fabula.repl import EXIT_END_OF_INPUT, EXIT_QUIT, run


def _play(atlas: Atlas, lines: str) -> tuple[int, str, Game]:
    output = io.StringIO()
    console = Console(file=output, width=200, color_system=None, highlight=False)
    game = Game(atlas)
    code = run(game, stdin=io.StringIO(lines), console=console, title="TITLE")
    return code, output.getvalue(), game


def test_quit_exits_cleanly(atlas: Atlas):
    code, output, game = _play(atlas, "quit\n")
    assert code == EXIT_QUIT
    assert game.finished
    assert output.startswith("TITLE\n")
    assert "FOREST" in output


def test_nothing_printed_after_quit(atlas: Atlas):
    """Quit ends the loop; later input is never read."""
    code, output, _ = _play(atlas, "q\nlook\n")
    assert code == EXIT_QUIT
    assert output.count("FOREST") == 1
    assert output.rstrip().endswith(">>")


def test_end_of_input_terminates(atlas: Atlas):
    code, output, game = _play(atlas, "")
    assert code == EXIT_END_OF_INPUT
    assert not game.finished
    assert output.rstrip().endswith(">>")


def test_turns_are_printed(atlas: Atlas):
    code, output, game = _play(atlas, "n\n")
    assert code == EXIT_END_OF_INPUT
    assert game.turns == 1
    assert "You follow the path north." in output
    assert "KITCHEN" in output
