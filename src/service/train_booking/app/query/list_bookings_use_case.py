from typing import Optional

from src.platform.exception.exceptions import AuthenticationError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.ticket_entity import Ticket
from src.service.train_booking.domain.value_object.credentials import Credentials


class ListBookingsUseCase:
    def __init__(self, *, user_directory_repo: IUserDirectoryRepo) -> None:
        self.user_directory_repo = user_directory_repo

    @Logger.io
    def execute(self, *, credentials: Optional[Credentials]) -> list[Ticket]:
        if credentials is None:
            raise AuthenticationError('Please login first')

        user = self.user_directory_repo.find_by_credentials(
            name=credentials.name, plain_password=credentials.password
        )
        if not user:
            raise AuthenticationError('Invalid credentials or user not found')
        return list(user.tickets_booked)
