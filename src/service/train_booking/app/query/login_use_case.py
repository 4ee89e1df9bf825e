from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.domain.value_object.credentials import Credentials


class LoginUseCase:
    def __init__(self, *, user_directory_repo: IUserDirectoryRepo) -> None:
        self.user_directory_repo = user_directory_repo

    @Logger.io
    def execute(self, *, name: str, plain_password: SecretStr) -> tuple[UserEntity, Credentials]:
        user_entity = self.user_directory_repo.find_by_credentials(
            name=name, plain_password=plain_password
        )
        validated_user = UserEntity.validate_user_exists(user_entity)
        return validated_user, Credentials(name=name, password=plain_password)
