"""Mutable per-session game state.

Holds only ints, tuples and strings, and no reference to the cave table.
A fresh state is built for every new session and thrown away at the end.
"""

from dataclasses import dataclass, field

from ..logging import get_logger
from .cave import ROOM_COUNT
from .hazards import HazardLayout, RandomRoomSource, RoomSource, place_hazards

logger = get_logger(__name__)

START_ROOM = 1
STARTING_ARROWS = 5


def opening_message(arrows: int) -> str:
    return (
        f"You've entered a clammy, dark cave, armed with {arrows} arrows.  "
        "You are very cold."
    )


@dataclass
class GameState:
    """All mutable state for one session."""

    wumpus: int
    bats: tuple[int, int]
    pits: tuple[int, int]
    current_room: int = START_ROOM
    arrows: int = STARTING_ARROWS  # not consumed yet; shooting is not implemented
    messages: list[str] = field(default_factory=list)
    # Terminal narrative once the player has died, None while playing
    ending: str | None = None

    @property
    def is_finished(self) -> bool:
        return self.ending is not None

    @property
    def hazards(self) -> HazardLayout:
        return HazardLayout(wumpus=self.wumpus, bats=self.bats, pits=self.pits)

    def add_message(self, text: str) -> None:
        self.messages.append(text)


def new_game_state(
    source: RoomSource | None = None,
    start_room: int = START_ROOM,
    arrows: int = STARTING_ARROWS,
    room_count: int = ROOM_COUNT,
) -> GameState:
    """Create a fresh game state with freshly placed hazards."""
    source = source or RandomRoomSource()
    layout = place_hazards(source, start_room, room_count)

    state = GameState(
        wumpus=layout.wumpus,
        bats=layout.bats,
        pits=layout.pits,
        current_room=start_room,
        arrows=arrows,
    )
    state.add_message(opening_message(arrows))

    logger.info("game_state_created", start_room=start_room, arrows=arrows)
    return state
