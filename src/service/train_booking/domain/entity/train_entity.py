import copy

import attrs

from src.platform.exception.exceptions import DomainError, SeatConflictError
from src.service.train_booking.domain.enum.seat_state import SeatState
from src.service.train_booking.domain.value_object.seat_position import SeatPosition


def _validate_seats(instance: 'Train', attribute: attrs.Attribute, seats: list[list[int]]) -> None:
    for row in seats:
        for value in row:
            if value not in (SeatState.FREE, SeatState.OCCUPIED):
                raise DomainError(f'Seat values must be 0 or 1, got {value!r}')


@attrs.define
class Train:
    train_id: str
    train_no: str
    stations: list[str] = attrs.field(factory=list)
    station_times: dict[str, str] = attrs.field(factory=dict)
    seats: list[list[int]] = attrs.field(factory=list, validator=_validate_seats)

    @staticmethod
    def validate_train_id(train_id: str) -> None:
        if not train_id or not train_id.strip():
            raise DomainError('Train ID cannot be empty')

    @property
    def train_info(self) -> str:
        return f'Train ID: {self.train_id} Train No: {self.train_no}'

    @property
    def source(self) -> str:
        return self.stations[0]

    @property
    def destination(self) -> str:
        return self.stations[-1]

    def has_id(self, train_id: str) -> bool:
        return self.train_id.casefold() == train_id.casefold()

    def serves_route(self, source: str, destination: str) -> bool:
        """True when both stations are on the line and source comes strictly first."""
        station_order = [station.casefold() for station in self.stations]
        source_key = source.casefold()
        destination_key = destination.casefold()
        if source_key not in station_order or destination_key not in station_order:
            return False
        return station_order.index(source_key) < station_order.index(destination_key)

    def is_seat_free(self, position: SeatPosition) -> bool:
        position.validate_within(self.seats)
        return self.seats[position.row][position.col] == SeatState.FREE.value

    def occupy_seat(self, position: SeatPosition) -> None:
        if not self.is_seat_free(position):
            raise SeatConflictError(f'Seat already booked: {position.label}')
        self.seats[position.row][position.col] = SeatState.OCCUPIED.value

    def release_seat(self, position: SeatPosition) -> bool:
        """Free the seat; returns whether it was occupied beforehand."""
        was_occupied = not self.is_seat_free(position)
        self.seats[position.row][position.col] = SeatState.FREE.value
        return was_occupied

    def snapshot(self) -> 'Train':
        return attrs.evolve(
            self,
            stations=list(self.stations),
            station_times=dict(self.station_times),
            seats=copy.deepcopy(self.seats),
        )
