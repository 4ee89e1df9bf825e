from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo
from src.service.train_booking.domain.entity.train_entity import Train


class SearchTrainsUseCase:
    def __init__(self, *, train_catalog_repo: ITrainCatalogRepo) -> None:
        self.train_catalog_repo = train_catalog_repo

    @Logger.io
    def execute(self, *, source: str, destination: str) -> list[Train]:
        """Trains calling at `source` before `destination`; empty when none do."""
        if not source or not source.strip() or not destination or not destination.strip():
            raise DomainError('Source and destination stations are required')

        return self.train_catalog_repo.search(
            source=source.strip(), destination=destination.strip()
        )
