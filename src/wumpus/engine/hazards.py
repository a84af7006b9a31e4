"""Random placement of the Wumpus, the bats and the pits.

Draws go through a RoomSource so tests can supply a fixed sequence of rooms
instead of real randomness.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from random import Random
from typing import Protocol

from ..errors import RoomSpaceExhaustedError
from ..logging import get_logger
from .cave import ROOM_COUNT

logger = get_logger(__name__)


class RoomSource(Protocol):
    """Anything that can pick a room uniformly outside a set of exclusions."""

    def draw(self, room_count: int, exclusions: frozenset[int]) -> int: ...


class RandomRoomSource:
    """Default RoomSource backed by random.Random."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def draw(self, room_count: int, exclusions: frozenset[int]) -> int:
        candidates = [r for r in range(1, room_count + 1) if r not in exclusions]
        if not candidates:
            raise RoomSpaceExhaustedError(room_count, exclusions)
        return self._random.choice(candidates)


@dataclass(frozen=True)
class HazardLayout:
    """Rooms occupied by each hazard for one session."""

    wumpus: int
    bats: tuple[int, int]
    pits: tuple[int, int]

    @property
    def rooms(self) -> tuple[int, ...]:
        return (self.wumpus, *self.bats, *self.pits)


def place_hazard(
    source: RoomSource, room_count: int, exclusions: Iterable[int]
) -> int:
    """Draw one room in [1, room_count] that is not in exclusions."""
    excluded = frozenset(exclusions)
    free = sum(1 for r in range(1, room_count + 1) if r not in excluded)
    if free == 0:
        logger.warning(
            "room_space_exhausted",
            room_count=room_count,
            exclusions=sorted(excluded),
        )
        raise RoomSpaceExhaustedError(room_count, excluded)

    room = source.draw(room_count, excluded)
    # A source that hands back an excluded room would break hazard uniqueness.
    if room in excluded or not 1 <= room <= room_count:
        logger.warning(
            "room_source_misbehaved",
            room=room,
            room_count=room_count,
            exclusions=sorted(excluded),
        )
        raise RoomSpaceExhaustedError(room_count, excluded)
    return room


def place_hazards(
    source: RoomSource, start_room: int, room_count: int = ROOM_COUNT
) -> HazardLayout:
    """Place all hazards, each draw excluding the start room and prior draws.

    Order is fixed: the Wumpus, the two bats, then the two pits.
    """
    taken = [start_room]

    def _next() -> int:
        room = place_hazard(source, room_count, taken)
        taken.append(room)
        return room

    wumpus = _next()
    bats = (_next(), _next())
    pits = (_next(), _next())

    layout = HazardLayout(wumpus=wumpus, bats=bats, pits=pits)
    logger.debug(
        "hazards_placed",
        start_room=start_room,
        wumpus=layout.wumpus,
        bats=list(layout.bats),
        pits=list(layout.pits),
    )
    return layout
