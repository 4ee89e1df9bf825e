from typing import Optional

from src.platform.exception.exceptions import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    PartialCancellationError,
    StorageError,
)
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.ticket_entity import Ticket
from src.service.train_booking.domain.value_object.credentials import Credentials


class CancelTicketUseCase:
    """
    Cancel one of the requesting user's tickets.

    Flow:
    1. Resolve the user; the ticket is looked up in that user's list only
    2. Re-resolve the train from the catalog and check the seat still fits its grid
    3. Free the seat and upsert the train; on StorageError the seat is re-occupied in
       memory and the ticket list is untouched
    4. Remove the ticket and persist the directory; a failure here raises
       PartialCancellationError (seat freed on disk, ticket still recorded and the
       in-memory list restored so the cancel can be retried)
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
    def execute(self, *, ticket_id: str, credentials: Optional[Credentials]) -> Ticket:
        if not ticket_id or not ticket_id.strip():
            raise DomainError('Ticket ID cannot be empty')
        if credentials is None:
            raise AuthenticationError('Please login first')

        user = self.user_directory_repo.find_by_credentials(
            name=credentials.name, plain_password=credentials.password
        )
        if not user:
            raise AuthenticationError('User not found or invalid credentials')

        ticket = user.find_ticket(ticket_id)
        if not ticket:
            raise NotFoundError(f'No ticket found with ID {ticket_id}')

        train = self.train_catalog_repo.get_by_id(ticket.train.train_id)
        if not train:
            raise NotFoundError(f'Train {ticket.train.train_id} not found')

        position = ticket.seat_position
        was_occupied = train.release_seat(position)
        if not was_occupied:
            Logger.base.warning(
                f'⚠️ [CANCEL] Seat {position.label} on train {train.train_id} was already free'
            )
        try:
            self.train_catalog_repo.upsert(train)
        except StorageError:
            # Seat stays occupied and the ticket stays issued
            if was_occupied:
                train.occupy_seat(position)
            raise
        Logger.base.info(f'💺 [CANCEL] Seat {position.label} freed on train {train.train_id}')

        tickets_before = list(user.tickets_booked)
        user.remove_ticket(ticket_id)
        try:
            self.user_directory_repo.persist()
        except StorageError as e:
            user.tickets_booked = tickets_before
            raise PartialCancellationError(
                f'Seat {position.label} on train {train.train_id} was freed but ticket '
                f'{ticket_id} could not be removed from storage: {e.message}',
                train_id=train.train_id,
                row=position.row,
                col=position.col,
            ) from e

        Logger.base.info(f'🗑️ [CANCEL] Ticket {ticket_id} cancelled for user {user.user_id}')
        return ticket
