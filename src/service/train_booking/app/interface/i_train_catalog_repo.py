from abc import ABC, abstractmethod
from typing import Optional

from src.service.train_booking.domain.entity.train_entity import Train


class ITrainCatalogRepo(ABC):
    """Whole train list held in memory, rewritten to storage on every upsert"""

    @abstractmethod
    def load(self) -> None:
        pass

    @abstractmethod
    def save(self) -> None:
        pass

    @abstractmethod
    def search(self, *, source: str, destination: str) -> list[Train]:
        pass

    @abstractmethod
    def get_by_id(self, train_id: str) -> Optional[Train]:
        pass

    @abstractmethod
    def list_all(self) -> list[Train]:
        pass

    @abstractmethod
    def upsert(self, train: Train) -> Train:
        pass
