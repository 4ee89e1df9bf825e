from enum import IntEnum


class SeatState(IntEnum):
    FREE = 0
    OCCUPIED = 1
