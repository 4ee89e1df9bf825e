from datetime import datetime, timezone

import attrs
import uuid_utils

from src.platform.exception.exceptions import DomainError
from src.service.train_booking.domain.entity.train_entity import Train
from src.service.train_booking.domain.value_object.seat_position import SeatPosition


@attrs.define
class Ticket:
    ticket_id: str
    user_id: str
    source: str
    destination: str
    date_of_travel: str
    train: Train  # Snapshot taken at booking time, not kept in sync with the catalog
    stations: dict[str, str] = attrs.field(factory=dict)
    seat_row: int = 0
    seat_col: int = 0

    @classmethod
    def issue(cls, *, user_id: str, train: Train, position: SeatPosition) -> 'Ticket':
        """Build a ticket for the whole line of `train` at `position`."""
        if not train.stations:
            raise DomainError(f'Train {train.train_id} has no stations')

        snapshot = train.snapshot()
        return cls(
            ticket_id=str(uuid_utils.uuid7()),
            user_id=user_id,
            source=snapshot.source,
            destination=snapshot.destination,
            date_of_travel=datetime.now(timezone.utc).isoformat(),
            train=snapshot,
            stations=dict(snapshot.station_times),
            seat_row=position.row,
            seat_col=position.col,
        )

    @property
    def seat_position(self) -> SeatPosition:
        return SeatPosition(row=self.seat_row, col=self.seat_col)

    @property
    def ticket_info(self) -> str:
        return (
            f'Ticket ID: {self.ticket_id}, From: {self.source}, To: {self.destination}, '
            f'Date: {self.date_of_travel}, Train ID: {self.train.train_id}, '
            f'Seat: {self.seat_position.label}'
        )
