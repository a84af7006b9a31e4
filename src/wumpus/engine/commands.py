"""Movement, hazard warnings and the end-of-game check.

move_to(state, room) is the only function that mutates a GameState. It
validates the target, moves the player, and then either ends the game or
appends a warning for every hazard lurking behind an exit.

Message policy: a successful move logs the hazard warnings for the new room
and nothing else. There is no generic "moved to room N" line.
"""

from dataclasses import dataclass

from ..errors import GameFinishedError, IllegalMoveError, UnknownRoomError
from ..logging import get_logger
from .cave import exits, is_adjacent, is_room
from .state import GameState

logger = get_logger(__name__)

WUMPUS_WARNING = "You smell something horrific and rancid."
PIT_WARNING = "You feel a cold updraft from a nearby cavern."
BAT_WARNING = "You hear a faint but distinct flapping of wings."

WUMPUS_DEATH = (
    "You stumble into the Wumpus's lair. It wakes, and it is hungry. "
    "The Wumpus got you!"
)
PIT_DEATH = "The floor gives way beneath you. You fell into a bottomless pit!"


@dataclass(frozen=True)
class Continue:
    """The move succeeded and the game goes on."""


@dataclass(frozen=True)
class GameOver:
    """The move ended the game."""

    message: str


MoveOutcome = Continue | GameOver


def _warning_for_room(state: GameState, room: int) -> str | None:
    """The single warning a neighbouring room gives off, if any."""
    if room == state.wumpus:
        return WUMPUS_WARNING
    if room in state.pits:
        return PIT_WARNING
    if room in state.bats:
        return BAT_WARNING
    return None


def warnings_for(state: GameState) -> list[str]:
    """Warnings for the current room's exits, in exit order, one per exit at most."""
    found = []
    for room in exits(state.current_room):
        warning = _warning_for_room(state, room)
        if warning is not None:
            found.append(warning)
    return found


def check_terminal(state: GameState) -> str | None:
    """Return the death narrative if the current room kills the player."""
    if state.current_room == state.wumpus:
        return WUMPUS_DEATH
    if state.current_room in state.pits:
        return PIT_DEATH
    # Bats are harmless here; carrying the player off is not implemented.
    return None


def _validate_move(state: GameState, room: int) -> None:
    if state.is_finished:
        logger.warning("move_after_game_over", target=room)
        raise GameFinishedError("The game is over. Start a new game to play again.")
    if not is_room(room):
        logger.warning("unknown_room", target=room)
        raise UnknownRoomError(room)
    if not is_adjacent(state.current_room, room):
        logger.warning("illegal_move", current_room=state.current_room, target=room)
        raise IllegalMoveError(state.current_room, room)


def move_to(state: GameState, room: int) -> MoveOutcome:
    """Move the player to an adjacent room and report whether the game ended."""
    _validate_move(state, room)

    previous = state.current_room
    state.current_room = room
    logger.debug("player_moved", from_room=previous, to_room=room)

    ending = check_terminal(state)
    if ending is not None:
        state.ending = ending
        state.add_message(ending)
        logger.info("game_over", room=room)
        return GameOver(ending)

    for warning in warnings_for(state):
        state.add_message(warning)
    return Continue()
