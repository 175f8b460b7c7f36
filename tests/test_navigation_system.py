"""Tests for the navigation state machine."""

import pytest

from detective_quest.backend.models import (
    Command,
    Direction,
    LocationConfig,
    NavigationOutcome,
    parse_command,
)
from detective_quest.backend.systems import ClueIndex, LocationGraph, NavigationSystem


@pytest.fixture
def navigation():
    configs = [
        LocationConfig(id="entrance", name="Entrance", clue="muddy footprint",
                       left="living_room", right="kitchen"),
        LocationConfig(id="living_room", name="Living Room", clue="torn letter"),
        LocationConfig(id="kitchen", name="Kitchen"),
    ]
    graph = LocationGraph.from_configs(configs, "entrance")
    return NavigationSystem(graph, ClueIndex())


@pytest.mark.parametrize("raw, expected", [
    ("l", Command.LEFT),
    ("L", Command.LEFT),
    ("  left\n", Command.LEFT),
    ("r", Command.RIGHT),
    ("Right", Command.RIGHT),
    ("q", Command.QUIT),
    ("QUIT", Command.QUIT),
    ("x", Command.INVALID),
    ("", Command.INVALID),
    ("   ", Command.INVALID),
    (None, Command.INVALID),
])
def test_parse_command(raw, expected):
    assert parse_command(raw) is expected


def test_command_direction():
    assert Command.LEFT.direction is Direction.LEFT
    assert Command.RIGHT.direction is Direction.RIGHT
    assert Command.QUIT.direction is None
    assert Command.INVALID.direction is None


def test_initial_location_captures_clue(navigation):
    assert navigation.start_result.outcome is NavigationOutcome.STARTED
    assert navigation.start_result.clue == "muddy footprint"
    assert list(navigation.clue_index) == ["muddy footprint"]
    assert navigation.visits == ["Entrance"]


def test_move_captures_clue(navigation):
    result = navigation.handle(Command.LEFT)
    assert result.outcome is NavigationOutcome.MOVED
    assert result.location == "Living Room"
    assert result.clue == "torn letter"
    assert list(navigation.clue_index) == ["muddy footprint", "torn letter"]


def test_move_into_room_without_clue(navigation):
    result = navigation.handle(Command.RIGHT)
    assert result.outcome is NavigationOutcome.MOVED
    assert result.clue is None
    assert len(navigation.clue_index) == 1


def test_missing_direction_keeps_state(navigation):
    navigation.handle(Command.RIGHT)
    result = navigation.handle(Command.RIGHT)
    assert result.outcome is NavigationOutcome.NO_PATH
    assert not result.ok
    assert result.location == "Kitchen"
    assert navigation.location.name == "Kitchen"
    assert navigation.visits == ["Entrance", "Kitchen"]


def test_invalid_command_keeps_state(navigation):
    result = navigation.handle(Command.INVALID)
    assert result.outcome is NavigationOutcome.INVALID_COMMAND
    assert navigation.location.name == "Entrance"
    assert not navigation.exited


def test_quit_is_terminal(navigation):
    result = navigation.handle(Command.QUIT)
    assert result.outcome is NavigationOutcome.EXITED
    assert navigation.exited
    assert navigation.location is None
    assert navigation.available_moves() == []

    after = navigation.handle(Command.LEFT)
    assert after.outcome is NavigationOutcome.ALREADY_EXITED
    assert list(navigation.clue_index) == ["muddy footprint"]


def test_available_moves(navigation):
    assert navigation.available_moves() == [
        (Direction.LEFT, "Living Room"),
        (Direction.RIGHT, "Kitchen"),
    ]
    navigation.handle(Command.LEFT)
    assert navigation.available_moves() == []


def test_revisit_does_not_duplicate_clues():
    configs = [
        LocationConfig(id="hall", name="Hall", clue="footprint", left="hall_2"),
        LocationConfig(id="hall_2", name="Hall Annex", clue="footprint"),
    ]
    graph = LocationGraph.from_configs(configs, "hall")
    navigation = NavigationSystem(graph, ClueIndex())
    navigation.handle(Command.LEFT)
    assert list(navigation.clue_index) == ["footprint"]
