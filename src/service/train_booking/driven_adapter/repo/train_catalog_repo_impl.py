from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.interface.i_train_catalog_repo import ITrainCatalogRepo
from src.service.train_booking.domain.entity.train_entity import Train
from src.service.train_booking.driven_adapter.model.train_record import TrainRecord
from src.service.train_booking.driven_adapter.repo.json_document_store import JsonDocumentStore


_TRAIN_RECORDS = TypeAdapter(list[TrainRecord])


class TrainCatalogRepoImpl(ITrainCatalogRepo):
    def __init__(self, *, document_path: Path) -> None:
        self.document_store = JsonDocumentStore(document_path)
        self.train_list: list[Train] = []

    @Logger.io
    def load(self) -> None:
        try:
            records = _TRAIN_RECORDS.validate_python(self.document_store.read())
        except ValidationError as e:
            raise StorageError(f'Invalid train document {self.document_store.path}: {e}') from e
        self.train_list = [record.to_entity() for record in records]
        Logger.base.info(f'🚆 [CATALOG] Loaded {len(self.train_list)} trains')

    @Logger.io
    def save(self) -> None:
        self.document_store.write(
            [TrainRecord.from_entity(train).model_dump() for train in self.train_list]
        )

    @Logger.io
    def search(self, *, source: str, destination: str) -> list[Train]:
        return [train for train in self.train_list if train.serves_route(source, destination)]

    @Logger.io
    def get_by_id(self, train_id: str) -> Optional[Train]:
        return next((train for train in self.train_list if train.has_id(train_id)), None)

    def list_all(self) -> list[Train]:
        return list(self.train_list)

    @Logger.io
    def upsert(self, train: Train) -> Train:
        """
        Replace the train with the same id (case-insensitive) or append it, then save.

        A failed save raises StorageError; the in-memory list keeps the change.
        """
        Train.validate_train_id(train.train_id)
        index = next(
            (i for i, existing in enumerate(self.train_list) if existing.has_id(train.train_id)),
            None,
        )
        if index is None:
            self.train_list.append(train)
        else:
            self.train_list[index] = train

        self.save()
        return train
