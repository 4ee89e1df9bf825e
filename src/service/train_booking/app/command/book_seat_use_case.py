from typing import Optional

from src.platform.exception.exceptions import (
    AuthenticationError,
    NotFoundError,
    PartialBookingError,
    StorageError,
)
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.ticket_entity import Ticket
from src.service.train_booking.domain.value_object.credentials import Credentials
from src.service.train_booking.domain.value_object.seat_position import SeatPosition


class BookSeatUseCase:
    """
    Reserve one seat and issue a ticket.

    The two stores are written in sequence, never atomically:
    1. Validate the coordinate and that the seat is free (no state touched on failure)
    2. Mark the seat occupied and upsert the train (seat state persisted first);
       on StorageError the seat is freed again in memory
    3. Re-resolve the session credentials against the user directory
    4. Issue the ticket, append it to the user and persist the directory

    A failure after step 2 raises PartialBookingError: the seat is consumed on disk
    but no ticket was recorded, in memory or on disk, and the error carries the
    coordinate for reconciliation.
    """

    def __init__(
        self,
        *,
        train_catalog_repo: ITrainCatalogRepo,
        user_directory_repo: IUserDirectoryRepo,
    ) -> None:
        self.train_catalog_repo = train_catalog_repo
        self.user_directory_repo = user_directory_repo

    @Logger.io
    def execute(
        self, *, train_id: str, row: int, col: int, credentials: Optional[Credentials]
    ) -> Ticket:
        if credentials is None:
            raise AuthenticationError('Please login first')

        train = self.train_catalog_repo.get_by_id(train_id)
        if not train:
            raise NotFoundError(f'Train {train_id} not found')

        position = SeatPosition(row=row, col=col)
        train.occupy_seat(position)
        try:
            self.train_catalog_repo.upsert(train)
        except StorageError:
            # Keep the in-memory grid in line with the document that failed to change
            train.release_seat(position)
            raise
        Logger.base.info(f'💺 [BOOK] Seat {position.label} occupied on train {train.train_id}')

        user = self.user_directory_repo.find_by_credentials(
            name=credentials.name, plain_password=credentials.password
        )
        if not user:
            raise PartialBookingError(
                f'Seat {position.label} on train {train.train_id} was reserved but the user '
                'could not be resolved; no ticket was issued',
                train_id=train.train_id,
                row=row,
                col=col,
            )

        ticket = Ticket.issue(user_id=user.user_id, train=train, position=position)
        user.add_ticket(ticket)
        try:
            self.user_directory_repo.persist()
        except StorageError as e:
            # Keep the in-memory user in line with the document that failed to change
            user.remove_ticket(ticket.ticket_id)
            raise PartialBookingError(
                f'Seat {position.label} on train {train.train_id} was reserved but ticket '
                f'{ticket.ticket_id} could not be saved: {e.message}',
                train_id=train.train_id,
                row=row,
                col=col,
            ) from e

        Logger.base.info(f'🎫 [BOOK] Issued ticket {ticket.ticket_id} to user {user.user_id}')
        return ticket
