"""Exceptions raised by the cave engine."""


class WumpusError(Exception):
    """Base exception for the game core."""


class UnknownRoomError(WumpusError):
    """Raised when a room id is outside the cave."""

    def __init__(self, room: int):
        self.room = room
        super().__init__(f"There is no room {room} in this cave.")


class IllegalMoveError(WumpusError):
    """Raised when the target room is not an exit of the current room."""

    def __init__(self, current_room: int, target: int):
        self.current_room = current_room
        self.target = target
        super().__init__(f"Room {target} cannot be reached from room {current_room}.")


class RoomSpaceExhaustedError(WumpusError):
    """Raised when no room is left to place a hazard in."""

    def __init__(self, room_count: int, exclusions: frozenset[int]):
        self.room_count = room_count
        self.exclusions = exclusions
        super().__init__(
            f"No free room among {room_count} rooms "
            f"(excluded: {sorted(exclusions)})."
        )


class GameFinishedError(WumpusError):
    """Raised when a move is attempted after the game has ended."""


class GameNotStartedError(WumpusError):
    """Raised when a move is attempted before a game was started."""
