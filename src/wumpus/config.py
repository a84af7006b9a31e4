"""Configuration for a game of Hunt the Wumpus."""

import os
from dataclasses import dataclass
from pathlib import Path

from .engine.cave import is_room
from .errors import UnknownRoomError


@dataclass
class Config:
    """Game and logging configuration."""

    start_room: int = 1
    arrows: int = 5
    seed: int | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False

    def __post_init__(self) -> None:
        if not is_room(self.start_room):
            raise UnknownRoomError(self.start_room)
        if self.arrows < 0:
            raise ValueError(f"arrows must be non-negative, got {self.arrows}")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        seed = os.getenv("WUMPUS_SEED")
        log_file = os.getenv("WUMPUS_LOG_FILE")

        return cls(
            start_room=int(os.getenv("WUMPUS_START_ROOM", str(cls.start_room))),
            arrows=int(os.getenv("WUMPUS_ARROWS", str(cls.arrows))),
            seed=int(seed) if seed else None,
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("WUMPUS_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
        )
