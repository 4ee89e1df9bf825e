from pathlib import Path
from typing import Optional

from pydantic import SecretStr, TypeAdapter, ValidationError

from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.app.interface.i_user_directory_repo import IUserDirectoryRepo
from src.service.train_booking.domain.entity.user_entity import UserEntity
from src.service.train_booking.driven_adapter.model.user_record import UserRecord
from src.service.train_booking.driven_adapter.repo.json_document_store import JsonDocumentStore


_USER_RECORDS = TypeAdapter(list[UserRecord])


class UserDirectoryRepoImpl(IUserDirectoryRepo):
    def __init__(self, *, document_path: Path, password_hasher: IPasswordHasher) -> None:
        self.document_store = JsonDocumentStore(document_path)
        self.password_hasher = password_hasher
        self.user_list: list[UserEntity] = []

    @Logger.io
    def load(self) -> None:
        try:
            records = _USER_RECORDS.validate_python(self.document_store.read())
        except ValidationError as e:
            raise StorageError(f'Invalid user document {self.document_store.path}: {e}') from e
        self.user_list = [record.to_entity() for record in records]
        Logger.base.info(f'👤 [DIRECTORY] Loaded {len(self.user_list)} users')

    @Logger.io
    def persist(self) -> None:
        self.document_store.write(
            [UserRecord.from_entity(user).model_dump() for user in self.user_list]
        )

    @Logger.io
    def find_by_credentials(
        self, *, name: str, plain_password: SecretStr
    ) -> Optional[UserEntity]:
        # Names are not unique: the first user whose hash also verifies wins
        for user in self.user_list:
            if user.name == name and self.password_hasher.verify_password(
                plain_password=plain_password, hashed_password=user.hashed_password
            ):
                return user
        return None

    def exists_by_name(self, name: str) -> bool:
        return any(user.name == name for user in self.user_list)

    @Logger.io
    def sign_up(self, user_entity: UserEntity) -> UserEntity:
        self.user_list.append(user_entity)
        self.persist()
        return user_entity

    def list_all(self) -> list[UserEntity]:
        return list(self.user_list)
