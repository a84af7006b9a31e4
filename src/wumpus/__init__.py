"""Hunt the Wumpus: the cave simulation engine behind the game."""

from .config import Config
from .engine.cave import exits, room_exits
from .engine.commands import Continue, GameOver, MoveOutcome, move_to, warnings_for
from .engine.hazards import RandomRoomSource, RoomSource
from .engine.state import GameState
from .errors import (
    GameFinishedError,
    GameNotStartedError,
    IllegalMoveError,
    RoomSpaceExhaustedError,
    UnknownRoomError,
    WumpusError,
)
from .logging import configure_logging, get_logger
from .session import HuntSession, new_session

__all__ = [
    "Config",
    "Continue",
    "GameFinishedError",
    "GameNotStartedError",
    "GameOver",
    "GameState",
    "HuntSession",
    "IllegalMoveError",
    "MoveOutcome",
    "RandomRoomSource",
    "RoomSource",
    "RoomSpaceExhaustedError",
    "UnknownRoomError",
    "WumpusError",
    "configure_logging",
    "exits",
    "get_logger",
    "move_to",
    "new_session",
    "room_exits",
    "setup",
    "warnings_for",
]


def setup(config: Config | None = None) -> Config:
    """Configure logging for an embedding shell and return the config used."""
    config = config or Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "engine_configured",
        start_room=config.start_room,
        arrows=config.arrows,
        seeded=config.seed is not None,
    )
    return config
