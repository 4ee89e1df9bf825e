"""
Storage records for users.json - each user embeds its tickets, each ticket a train snapshot
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.service.train_booking.domain.entity.ticket_entity import Ticket
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.driven_adapter.model.train_record import TrainRecord


class TicketRecord(BaseModel):
    # Older users.json documents spell these three keys in camelCase
    model_config = ConfigDict(extra='ignore')

    ticket_id: str = Field(validation_alias=AliasChoices('ticket_id', 'ticketId'))
    user_id: str
    source: str
    destination: str
    date_of_travel: str = ''
    stations: dict[str, str] = Field(default_factory=dict)
    train: TrainRecord
    seat_row: int = Field(validation_alias=AliasChoices('seat_row', 'seatRow'))
    seat_col: int = Field(validation_alias=AliasChoices('seat_col', 'seatCol'))

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketRecord':
        return cls(
            ticket_id=ticket.ticket_id,
            user_id=ticket.user_id,
            source=ticket.source,
            destination=ticket.destination,
            date_of_travel=ticket.date_of_travel,
            stations=dict(ticket.stations),
            train=TrainRecord.from_entity(ticket.train),
            seat_row=ticket.seat_row,
            seat_col=ticket.seat_col,
        )

    def to_entity(self) -> Ticket:
        return Ticket(
            ticket_id=self.ticket_id,
            user_id=self.user_id,
            source=self.source,
            destination=self.destination,
            date_of_travel=self.date_of_travel,
            train=self.train.to_entity(),
            stations=dict(self.stations),
            seat_row=self.seat_row,
            seat_col=self.seat_col,
        )


class UserRecord(BaseModel):
    # Plaintext `password` from older documents is dropped on load
    model_config = ConfigDict(extra='ignore')

    name: str
    hashed_password: str = ''
    user_id: str
    tickets_booked: list[TicketRecord] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, user_entity: UserEntity) -> 'UserRecord':
        return cls(
            name=user_entity.name,
            hashed_password=user_entity.hashed_password,
            user_id=user_entity.user_id,
            tickets_booked=[TicketRecord.from_entity(t) for t in user_entity.tickets_booked],
        )

    def to_entity(self) -> UserEntity:
        return UserEntity(
            name=self.name,
            hashed_password=self.hashed_password,
            user_id=self.user_id,
            tickets_booked=[t.to_entity() for t in self.tickets_booked],
        )
