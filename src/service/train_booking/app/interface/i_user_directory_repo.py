from abc import ABC, abstractmethod
from typing import Optional

from pydantic import SecretStr

from src.service.train_booking.domain.entity.user_entity import UserEntity


class IUserDirectoryRepo(ABC):
    """Whole user list (tickets embedded) held in memory and rewritten on persist"""

    @abstractmethod
    def load(self) -> None:
        pass

    @abstractmethod
    def persist(self) -> None:
        pass

    @abstractmethod
    def find_by_credentials(
        self, *, name: str, plain_password: SecretStr
    ) -> Optional[UserEntity]:
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        pass

    @abstractmethod
    def sign_up(self, user_entity: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    def list_all(self) -> list[UserEntity]:
        pass
