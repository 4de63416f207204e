"""A small text adventure engine: parser, entity registry and dispatcher."""

import sys

from .config import Config
from .content import create_atlas
from .engine.game import Game
from .logging import configure_logging, get_logger
from .repl import run

__all__ = ["main", "Config", "Game", "create_atlas"]


def main() -> None:
    """Entry point for the fabula console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        start=config.start,
        dispatch_order=config.dispatch_order.value,
        log_level=config.log_level,
    )

    atlas = create_atlas(start=config.start, order=config.dispatch_order)
    sys.exit(run(Game(atlas), prompt=config.prompt))
