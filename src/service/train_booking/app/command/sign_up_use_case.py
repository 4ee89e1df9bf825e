from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity


class SignUpUseCase:
    def __init__(
        self,
        *,
        user_directory_repo: IUserDirectoryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_directory_repo = user_directory_repo
        self.password_hasher = password_hasher

    @Logger.io
    def execute(self, *, name: str, plain_password: SecretStr) -> UserEntity:
        user_entity = UserEntity.create(
            name=name, plain_password=plain_password, password_hasher=self.password_hasher
        )

        # Duplicate names are accepted; login resolves to the first user whose password matches
        if self.user_directory_repo.exists_by_name(name):
            Logger.base.warning(f'⚠️ [SIGNUP] Another user is already named {name!r}')

        return self.user_directory_repo.sign_up(user_entity)
