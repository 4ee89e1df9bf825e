from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo


class GetSeatGridUseCase:
    def __init__(self, *, train_catalog_repo: ITrainCatalogRepo) -> None:
        self.train_catalog_repo = train_catalog_repo

    @Logger.io
    def execute(self, *, train_id: str) -> list[list[int]]:
        """Copy of the catalog's current grid, 0 = free and 1 = occupied."""
        train = self.train_catalog_repo.get_by_id(train_id)
        if not train:
            raise NotFoundError(f'Train {train_id} not found')
        return [list(row) for row in train.seats]
