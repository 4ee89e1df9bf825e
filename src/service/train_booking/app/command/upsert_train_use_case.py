from typing import Optional

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo
from src.service.train_booking.domain.entity.train_entity import Train


class UpsertTrainUseCase:
    """Add a train to the catalog or replace the one with the same id"""

    def __init__(self, *, train_catalog_repo: ITrainCatalogRepo) -> None:
        self.train_catalog_repo = train_catalog_repo

    @Logger.io
    def execute(
        self,
        *,
        train_id: str,
        train_no: str,
        stations: list[str],
        station_times: dict[str, str],
        seats: Optional[list[list[int]]] = None,
        rows: int = 0,
        cols: int = 0,
    ) -> Train:
        Train.validate_train_id(train_id)
        if len(stations) < 2:
            raise DomainError('A train needs at least two stations')

        existing = self.train_catalog_repo.get_by_id(train_id)
        if seats is None:
            if existing:
                seats = existing.seats
            else:
                if rows <= 0 or cols <= 0:
                    raise DomainError('rows and cols must be positive for a new train')
                seats = [[0] * cols for _ in range(rows)]
        elif existing and [len(row) for row in seats] != [len(row) for row in existing.seats]:
            raise DomainError(f'Seat grid of train {train_id} cannot change dimensions')

        train = Train(
            train_id=train_id,
            train_no=train_no,
            stations=list(stations),
            station_times=dict(station_times),
            seats=[list(row) for row in seats],
        )
        return self.train_catalog_repo.upsert(train)
