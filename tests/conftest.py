"""Shared test fixtures for fabula."""

import pytest

from fabula.content import create_atlas
from fabula.content.kitchen import KITCHEN
from fabula.engine.atlas import Atlas
from fabula.engine.game import Game


@pytest.fixture
def atlas() -> Atlas:
    return create_atlas()


@pytest.fixture
def kitchen_atlas() -> Atlas:
    return create_atlas(start=KITCHEN)


@pytest.fixture
def game(atlas: Atlas) -> Game:
    game = Game(atlas)
    game.start()
    return game


@pytest.fixture
def kitchen_game(kitchen_atlas: Atlas) -> Game:
    game = Game(kitchen_atlas)
    game.start()
    return game
