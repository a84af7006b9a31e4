"""Session layer between a presentation shell and the game engine.

A session is always in exactly one of three states: NewGame before the first
start, Playing while a GameState accepts moves, and GameOver once the player
has died. Only Playing accepts moves; start() works from any state.
"""

import secrets
from dataclasses import dataclass

from .config import Config
from .engine.cave import exits
from .engine.commands import GameOver as GameOverOutcome
from .engine.commands import MoveOutcome, move_to
from .engine.hazards import RandomRoomSource, RoomSource
from .engine.state import GameState, new_game_state
from .errors import GameFinishedError, GameNotStartedError
from .logging import bind_session, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NewGame:
    pass


@dataclass(frozen=True)
class Playing:
    state: GameState


@dataclass(frozen=True)
class GameOver:
    message: str
    state: GameState


SessionStatus = NewGame | Playing | GameOver


def new_session(
    config: Config | None = None, source: RoomSource | None = None
) -> GameState:
    """Create a GameState for a new session with freshly placed hazards."""
    config = config or Config()
    source = source or RandomRoomSource(config.seed)
    return new_game_state(
        source, start_room=config.start_room, arrows=config.arrows,
    )


class HuntSession:
    """Wraps the session status and drives the engine on the shell's behalf."""

    def __init__(
        self, config: Config | None = None, source: RoomSource | None = None,
    ):
        self.config = config or Config()
        self.source = source or RandomRoomSource(self.config.seed)
        self.status: SessionStatus = NewGame()
        self.session_id: str | None = None

    def start(self) -> GameState:
        """Begin a fresh game, discarding any previous one."""
        self.session_id = secrets.token_hex(4)
        bind_session(self.session_id)
        state = new_session(self.config, self.source)
        self.status = Playing(state)
        logger.info("session_started", start_room=state.current_room)
        return state

    def move_to(self, room: int) -> MoveOutcome:
        """Move the player. Rejected unless a game is in progress."""
        if isinstance(self.status, NewGame):
            raise GameNotStartedError("No game in progress. Start a game first.")
        if isinstance(self.status, GameOver):
            raise GameFinishedError("The game is over. Start a new game to play again.")

        state = self.status.state
        outcome = move_to(state, room)
        if isinstance(outcome, GameOverOutcome):
            self.status = GameOver(outcome.message, state)
            logger.info("session_ended", room=state.current_room)
        return outcome

    @property
    def state(self) -> GameState | None:
        if isinstance(self.status, (Playing, GameOver)):
            return self.status.state
        return None

    @property
    def is_playing(self) -> bool:
        return isinstance(self.status, Playing)

    @property
    def current_room(self) -> int | None:
        state = self.state
        return state.current_room if state else None

    @property
    def arrows(self) -> int | None:
        state = self.state
        return state.arrows if state else None

    @property
    def messages(self) -> tuple[str, ...]:
        state = self.state
        return tuple(state.messages) if state else ()

    def exits(self) -> tuple[int, int, int]:
        """Exits of the player's room, for the shell to offer as moves."""
        state = self.state
        if state is None:
            raise GameNotStartedError("No game in progress. Start a game first.")
        return exits(state.current_room)
