"""Tests for game state."""

from wumpus.engine.state import (
    START_ROOM,
    STARTING_ARROWS,
    GameState,
    new_game_state,
    opening_message,
)


def test_new_game_state(scripted_source):
    """Fresh game state places hazards and opens the message log."""
    state = new_game_state(scripted_source(8, 12, 17, 14, 20))
    assert state.current_room == START_ROOM
    assert state.arrows == STARTING_ARROWS == 5
    assert state.wumpus == 8
    assert state.bats == (12, 17)
    assert state.pits == (14, 20)
    assert state.messages == [
        "You've entered a clammy, dark cave, armed with 5 arrows.  "
        "You are very cold."
    ]
    assert not state.is_finished


def test_new_game_state_custom_start(scripted_source):
    source = scripted_source(1, 2, 3, 4, 5)
    state = new_game_state(source, start_room=20, arrows=3)
    assert state.current_room == 20
    assert state.arrows == 3
    assert state.messages == [opening_message(3)]
    assert all(20 in exclusions for _, exclusions in source.calls)


def test_new_game_state_random_layout():
    state = new_game_state()
    rooms = {state.wumpus, *state.bats, *state.pits}
    assert len(rooms) == 5
    assert state.current_room not in rooms


def test_hazards_view(state: GameState):
    assert state.hazards.rooms == (8, 12, 17, 14, 20)


def test_finished_once_ending_set(state: GameState):
    assert not state.is_finished
    state.ending = "You died."
    assert state.is_finished
