"""The fixed cave layout: twenty rooms joined like the edges of a dodecahedron.

Every room has exactly three exits. The table is hand-authored and shared by
all sessions; nothing in this module holds mutable state.
"""

from ..errors import UnknownRoomError

ROOM_COUNT = 20
ROOMS = range(1, ROOM_COUNT + 1)

ROOM_EXITS: dict[int, tuple[int, int, int]] = {
    1: (2, 5, 8),
    2: (1, 3, 10),
    3: (2, 4, 12),
    4: (3, 5, 14),
    5: (1, 4, 6),
    6: (5, 7, 15),
    7: (6, 8, 17),
    8: (1, 7, 11),
    9: (10, 12, 19),
    10: (2, 9, 11),
    11: (8, 10, 20),
    12: (3, 9, 13),
    13: (12, 14, 18),
    14: (4, 13, 15),
    15: (6, 14, 16),
    16: (15, 17, 18),
    17: (7, 16, 20),
    18: (13, 16, 19),
    19: (9, 18, 20),
    20: (11, 17, 19),
}


def room_exits(room: int) -> tuple[int, int, int] | None:
    """Return the three exits of room, or None if there is no such room."""
    return ROOM_EXITS.get(room)


def exits(room: int) -> tuple[int, int, int]:
    """Return the three exits of room, raising UnknownRoomError if invalid."""
    found = room_exits(room)
    if found is None:
        raise UnknownRoomError(room)
    return found


def is_room(room: int) -> bool:
    return room in ROOM_EXITS


def is_adjacent(room: int, target: int) -> bool:
    """True when target is one of room's exits."""
    found = room_exits(room)
    return found is not None and target in found
