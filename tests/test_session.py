"""Tests for the session state machine."""

import pytest

from wumpus import new_session
from wumpus.config import Config
from wumpus.engine.commands import WUMPUS_DEATH, WUMPUS_WARNING, Continue, GameOver
from wumpus.errors import GameFinishedError, GameNotStartedError, IllegalMoveError
from wumpus.session import GameOver as GameOverStatus
from wumpus.session import HuntSession, NewGame, Playing


def test_new_session_state(config: Config):
    state = new_session(config)
    assert state.current_room == 1
    assert state.arrows == 5
    assert len(state.messages) == 1
    assert len({state.wumpus, *state.bats, *state.pits, 1}) == 6


def test_seeded_sessions_repeat(config: Config):
    first = new_session(config)
    second = new_session(config)
    assert first.hazards == second.hazards


def test_new_session_uses_config(scripted_source):
    state = new_session(Config(start_room=7, arrows=2), scripted_source(1, 2, 3, 4, 5))
    assert state.current_room == 7
    assert state.arrows == 2
    assert "armed with 2 arrows" in state.messages[0]


def test_moves_rejected_before_start():
    session = HuntSession()
    assert session.status == NewGame()
    assert session.state is None
    assert session.current_room is None
    assert session.messages == ()
    with pytest.raises(GameNotStartedError):
        session.move_to(2)
    with pytest.raises(GameNotStartedError):
        session.exits()


def test_start_begins_play(config: Config):
    session = HuntSession(config)
    state = session.start()
    assert isinstance(session.status, Playing)
    assert session.is_playing
    assert session.state is state
    assert session.current_room == 1
    assert session.arrows == 5
    assert session.exits() == (2, 5, 8)
    assert session.session_id


def test_full_session(scripted_source):
    """Play until the Wumpus wins, then start over."""
    source = scripted_source(8, 12, 17, 14, 20, 20, 19, 18, 17, 16)
    session = HuntSession(source=source)
    session.start()

    assert session.move_to(2) == Continue()
    assert session.current_room == 2
    assert session.move_to(1) == Continue()
    assert session.messages[-1] == WUMPUS_WARNING

    with pytest.raises(IllegalMoveError):
        session.move_to(9)
    assert session.is_playing

    outcome = session.move_to(8)
    assert outcome == GameOver(WUMPUS_DEATH)
    assert session.status == GameOverStatus(WUMPUS_DEATH, session.state)
    assert not session.is_playing
    assert session.current_room == 8

    with pytest.raises(GameFinishedError):
        session.move_to(1)

    session.start()
    assert session.is_playing
    assert session.current_room == 1
    assert session.state.wumpus == 20
    assert len(session.messages) == 1


def test_reads_do_not_change_state(config: Config):
    session = HuntSession(config)
    session.start()
    assert session.messages == session.messages
    assert session.exits() == session.exits()
    assert session.current_room == session.current_room
