"""Read-eval-print loop around a Game."""

import sys
from typing import TextIO

from rich.console import Console

from .content import TITLE
from .engine.game import Game
from .logging import get_logger

logger = get_logger(__name__)

EXIT_QUIT = 0
EXIT_END_OF_INPUT = 1


def run(
    game: Game,
    prompt: str = ">> ",
    stdin: TextIO | None = None,
    console: Console | None = None,
    title: str = TITLE,
) -> int:
    """Play until the player quits or input runs out. Returns an exit code."""
    stdin = stdin or sys.stdin
    console = console or Console(highlight=False)

    console.print(title, style="bold green", markup=False, soft_wrap=True)
    console.print(game.start(), markup=False, soft_wrap=True)

    while not game.finished:
        console.print(f"\n{prompt}", end="", markup=False, soft_wrap=True)
        line = stdin.readline()
        if not line:
            logger.info("input_closed", turns=game.turns)
            return EXIT_END_OF_INPUT

        response = game.play(line)
        if response:
            console.print(response, markup=False, soft_wrap=True)

    return EXIT_QUIT
