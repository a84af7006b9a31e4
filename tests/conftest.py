"""Shared test fixtures for the Wumpus engine."""

from collections.abc import Callable, Iterable

import pytest
import structlog

from wumpus.config import Config
from wumpus.engine.state import GameState


class ScriptedRoomSource:
    """RoomSource that hands out a fixed sequence of rooms."""

    def __init__(self, rooms: Iterable[int]):
        self.rooms = list(rooms)
        self.calls: list[tuple[int, frozenset[int]]] = []

    def draw(self, room_count: int, exclusions: frozenset[int]) -> int:
        self.calls.append((room_count, exclusions))
        return self.rooms.pop(0)


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedRoomSource]:
    def _make(*rooms: int) -> ScriptedRoomSource:
        return ScriptedRoomSource(rooms)

    return _make


@pytest.fixture
def config() -> Config:
    return Config(seed=1234)


@pytest.fixture
def state() -> GameState:
    """Player in room 1 with the Wumpus next door in room 8.

    Rooms 2 and 5, the other exits of room 1, are empty.
    """
    return GameState(wumpus=8, bats=(12, 17), pits=(14, 20))


@pytest.fixture
def reset_structlog():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
