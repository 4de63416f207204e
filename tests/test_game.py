"""Tests for the turn engine and what it renders."""

from fabula.content import create_atlas
from fabula.engine.atlas import Atlas
from fabula.engine.actions import Action, Describe, Direction, Go, Leave
from fabula.engine.entity import INVENTORY, Room
from fabula.engine.game import (
    CANNOT_GO,
    DEATH_TEXT,
    EMPTY_HANDED,
    HELP_TEXT,
    NOTHING_HAPPENS,
    TOO_MANY_WORDS,
    Game,
)
from fabula.engine.outcomes import Handled, Outcome, SetLocation, Unhandled

KITCHEN_FIRST = "There is a breadbox on the counter."
KITCHEN_AGAIN = "The breadbox is still on the counter."


def test_start_renders_forest():
    game = Game(create_atlas())
    text = game.start()
    assert text == (
        "The fog clears...\n\n"
        "FOREST\n"
        "You find yourself standing in a forest clearing, surrounded by trees. "
        "There is a path to the north.\n"
        "You see a pile of leaves."
    )


def test_no_arrival_without_moving(game: Game):
    assert game.play("listen") == "Birds bicker somewhere overhead."


def test_go_north_to_kitchen(game: Game, atlas: Atlas):
    text = game.play("go north")
    assert atlas.here == "kitchen"
    assert text.startswith("You follow the path north.\n\n")
    assert KITCHEN_FIRST in text
    assert "KITCHEN\nYou are in a kitchen. It's a mess.\nA breadbox.\n" in text


def test_arrival_text_once_per_first_arrival(game: Game):
    """The kitchen's first-visit narration shows up exactly once."""
    responses = [game.play(line) for line in ("n", "s", "n", "look")]
    joined = "\n".join(responses)
    assert joined.count(KITCHEN_FIRST) == 1
    assert KITCHEN_AGAIN in responses[2]
    assert KITCHEN_AGAIN not in responses[3]


def test_cannot_go(game: Game, atlas: Atlas):
    assert game.play("south") == CANNOT_GO
    assert atlas.here == "forest"


def test_look_rerenders_location(game: Game):
    text = game.play("look")
    assert text.startswith("FOREST\n")
    assert "The fog clears" not in text


def test_examine_here(game: Game):
    assert "O+5" in game.play("examine forest")


def test_nothing_happens(game: Game):
    assert game.play("wait") == NOTHING_HAPPENS
    assert game.play("take") == NOTHING_HAPPENS


def test_help(game: Game):
    assert game.play("help") == HELP_TEXT
    assert game.play("") == HELP_TEXT


def test_too_many_words(game: Game):
    text = game.play("please pick up every single leaf")
    assert text == f"{TOO_MANY_WORDS}\n{HELP_TEXT}"


def test_die(game: Game):
    assert game.play("die") == DEATH_TEXT
    assert not game.finished


def test_inventory_empty(game: Game):
    assert game.play("i") == EMPTY_HANDED


def test_inventory_lists_descriptions(kitchen_game: Game, kitchen_atlas: Atlas):
    kitchen_atlas.move("knife", INVENTORY)
    kitchen_atlas.move("bread", INVENTORY)
    assert kitchen_game.play("inventory") == (
        "You are carrying:\nA crusty loaf of bread.\nA rusty knife."
    )


def test_quit(game: Game):
    assert game.play("quit") == ""
    assert game.finished


def test_error_messages(game: Game):
    assert game.play("dance") == "I don't know how to dance. Have you tried 'HELP'?"
    assert game.play("go sideways") == "I don't know which way 'sideways' is."
    assert game.play("examine unicorn") == "You don't see any unicorn here."
    assert game.play("attack") == "What do you want to attack?"


def test_ambiguous_object(kitchen_game: Game, kitchen_atlas: Atlas):
    kitchen_atlas.move("knife", "kitchen")
    kitchen_atlas.move("bread", "kitchen")
    assert kitchen_game.play("attack") == "That action could apply to: bread, knife."


def test_turns_counted(game: Game):
    game.play("look")
    game.play("wait")
    assert game.turns == 2


class TrapdoorHall(Room):
    """Climbing out of the hall drops the player into the cellar instead."""

    name = "hall"

    def handle(self, action: Action) -> Outcome:
        match action:
            case Go(direction=Direction.UP):
                return SetLocation("attic", message="Up you go.")
            case Leave():
                return SetLocation("cellar", message="You tumble down.")
        return Unhandled()


class Attic(Room):
    name = "attic"


class Cellar(Room):
    name = "cellar"

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                return Handled(message="Damp and dark.")
        return Unhandled()


def test_leaving_room_can_redirect():
    atlas = Atlas()
    atlas.add_all([TrapdoorHall(), Attic(), Cellar()])
    atlas.start("hall")
    game = Game(atlas)
    game.start()

    text = game.play("go up")

    assert text == (
        "Up you go.\n\n"
        "You tumble down.\n\n"
        "CELLAR\n"
        "Damp and dark.\n"
        "You see nothing of interest."
    )
    assert atlas.here == "cellar"
    assert game.last_here == "cellar"
