"""
Unit tests for TrainCatalogRepoImpl

Search, upsert-by-identity and whole-document persistence of trains.json.
"""

from unittest.mock import patch

import orjson
import pytest

from src.platform.exception.exceptions import DomainError, StorageError
from src.service.train_booking.driven_adapter.repo.train_catalog_repo_impl import (
    TrainCatalogRepoImpl,
)


@pytest.mark.unit
class TestSearch:
    def test_forward_route_matches(self, train_catalog_repo, sample_train):
        assert train_catalog_repo.search(source='A', destination='C') == [sample_train]

    def test_reverse_route_is_empty(self, train_catalog_repo, sample_train):
        assert train_catalog_repo.search(source='C', destination='A') == []

    def test_unknown_station_is_empty(self, train_catalog_repo, sample_train):
        assert train_catalog_repo.search(source='A', destination='Z') == []

    def test_only_trains_serving_the_route_in_order(self, train_catalog_repo, make_train):
        forward = train_catalog_repo.upsert(make_train(train_id='F1', stations=['x', 'y', 'z']))
        train_catalog_repo.upsert(make_train(train_id='R1', stations=['z', 'y', 'x']))
        partial = train_catalog_repo.upsert(make_train(train_id='P1', stations=['w', 'X', 'Y']))

        assert train_catalog_repo.search(source='X', destination='y') == [forward, partial]

    def test_empty_catalog(self, train_catalog_repo):
        assert train_catalog_repo.search(source='A', destination='B') == []


@pytest.mark.unit
class TestUpsert:
    def test_appends_new_train_and_writes_document(
        self, train_catalog_repo, make_train, trains_path
    ):
        train_catalog_repo.upsert(make_train())

        documents = orjson.loads(trains_path.read_bytes())
        assert documents == [
            {
                'train_id': 'T1',
                'train_no': '12345',
                'stations': ['A', 'B', 'C'],
                'station_times': {'A': '08:00:00', 'B': '09:30:00', 'C': '11:00:00'},
                'seats': [[0, 0], [0, 0]],
            }
        ]

    def test_replaces_train_with_same_id_ignoring_case(self, train_catalog_repo, make_train):
        train_catalog_repo.upsert(make_train(train_id='t1'))
        train_catalog_repo.upsert(make_train(train_id='OTHER'))
        replacement = make_train(train_id='T1', train_no='99999')

        train_catalog_repo.upsert(replacement)

        trains = train_catalog_repo.list_all()
        assert [t.train_id for t in trains] == ['T1', 'OTHER']
        assert trains[0] is replacement

    def test_empty_id_is_rejected(self, train_catalog_repo, make_train):
        with pytest.raises(DomainError, match='Train ID cannot be empty'):
            train_catalog_repo.upsert(make_train(train_id='  '))

        assert train_catalog_repo.list_all() == []

    def test_failed_write_is_reported_without_rolling_back_memory(
        self, train_catalog_repo, make_train, trains_path
    ):
        with patch.object(
            train_catalog_repo.document_store, 'write', side_effect=StorageError('disk full')
        ):
            with pytest.raises(StorageError, match='disk full'):
                train_catalog_repo.upsert(make_train())

        assert [t.train_id for t in train_catalog_repo.list_all()] == ['T1']
        assert not trains_path.exists()


@pytest.mark.unit
class TestLoad:
    def test_reload_restores_persisted_trains(self, train_catalog_repo, sample_train, trains_path):
        reloaded = TrainCatalogRepoImpl(document_path=trains_path)
        reloaded.load()

        assert reloaded.list_all() == [sample_train]
        assert reloaded.get_by_id('t1') == sample_train

    def test_missing_document_starts_empty(self, tmp_path):
        repo = TrainCatalogRepoImpl(document_path=tmp_path / 'nowhere' / 'trains.json')
        repo.load()

        assert repo.list_all() == []

    def test_malformed_json_raises_storage_error(self, trains_path):
        trains_path.write_text('{not json')
        repo = TrainCatalogRepoImpl(document_path=trains_path)

        with pytest.raises(StorageError, match='Malformed JSON'):
            repo.load()

    def test_record_missing_fields_raises_storage_error(self, trains_path):
        trains_path.write_bytes(orjson.dumps([{'train_no': '1'}]))
        repo = TrainCatalogRepoImpl(document_path=trains_path)

        with pytest.raises(StorageError, match='Invalid train document'):
            repo.load()

    def test_get_by_id_unknown_returns_none(self, train_catalog_repo, sample_train):
        assert train_catalog_repo.get_by_id('T2') is None
