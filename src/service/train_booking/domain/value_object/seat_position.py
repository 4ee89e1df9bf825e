"""
Seat Position Value Object

Row/column coordinate inside a train's seat grid.
"""

from dataclasses import dataclass

from src.platform.exception.exceptions import SeatValidationError


@dataclass(frozen=True)
class SeatPosition:
    row: int
    col: int

    @property
    def label(self) -> str:
        return f'Row {self.row} Col {self.col}'

    def is_within(self, seats: list[list[int]]) -> bool:
        return 0 <= self.row < len(seats) and 0 <= self.col < len(seats[self.row])

    def validate_within(self, seats: list[list[int]]) -> None:
        if not self.is_within(seats):
            raise SeatValidationError(f'Invalid seat coordinates: {self.label}')
