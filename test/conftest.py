"""
Test Configuration and Fixtures

This module provides:
- Test environment variables set before any application import
- Repositories backed by per-test JSON documents under tmp_path
- Use cases wired to those repositories
- A signed-up user and the sample train used across scenarios
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Minimum bcrypt cost keeps hashing fast in tests
    os.environ['BCRYPT_ROUNDS'] = '4'
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('LOG_LEVEL', 'WARNING')


_early_setup_test_environment()

from collections.abc import Callable  # noqa: E402
import copy  # noqa: E402
from typing import Any  # noqa: E402

from pydantic import SecretStr  # noqa: E402
import pytest  # noqa: E402

from src.service.train_booking.app.command.book_seat_use_case import BookSeatUseCase  # noqa: E402
from src.service.train_booking.app.command.cancel_ticket_use_case import (  # noqa: E402
    CancelTicketUseCase,
)
from src.service.train_booking.app.command.sign_up_use_case import SignUpUseCase  # noqa: E402
from src.service.train_booking.app.query.login_use_case import LoginUseCase  # noqa: E402
from src.service.train_booking.domain.entity.train_entity import Train  # noqa: E402
from src.service.train_booking.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.train_booking.domain.value_object.credentials import Credentials  # noqa: E402
from src.service.train_booking.driven_adapter.repo.train_catalog_repo_impl import (  # noqa: E402
    TrainCatalogRepoImpl,
)
from src.service.train_booking.driven_adapter.repo.user_directory_repo_impl import (  # noqa: E402
    UserDirectoryRepoImpl,
)
from src.service.train_booking.driven_adapter.security.bcrypt_password_hasher import (  # noqa: E402
    BcryptPasswordHasher,
)


DEFAULT_PASSWORD = 'P@ssw0rd'
TEST_USER_NAME = 'alice'
ANOTHER_USER_NAME = 'bob'

SAMPLE_TRAIN_DATA: dict[str, Any] = {
    'train_id': 'T1',
    'train_no': '12345',
    'stations': ['A', 'B', 'C'],
    'station_times': {'A': '08:00:00', 'B': '09:30:00', 'C': '11:00:00'},
    'seats': [[0, 0], [0, 0]],
}


# =============================================================================
# Storage
# =============================================================================
@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / 'local_db'
    path.mkdir()
    return path


@pytest.fixture
def trains_path(data_dir: Path) -> Path:
    return data_dir / 'trains.json'


@pytest.fixture
def users_path(data_dir: Path) -> Path:
    return data_dir / 'users.json'


@pytest.fixture(scope='session')
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def train_catalog_repo(trains_path: Path) -> TrainCatalogRepoImpl:
    repo = TrainCatalogRepoImpl(document_path=trains_path)
    repo.load()
    return repo


@pytest.fixture
def user_directory_repo(
    users_path: Path, password_hasher: BcryptPasswordHasher
) -> UserDirectoryRepoImpl:
    repo = UserDirectoryRepoImpl(document_path=users_path, password_hasher=password_hasher)
    repo.load()
    return repo


# =============================================================================
# Domain data
# =============================================================================
@pytest.fixture
def make_train() -> Callable[..., Train]:
    def _make_train(**overrides: Any) -> Train:
        data = copy.deepcopy(SAMPLE_TRAIN_DATA)
        data.update(overrides)
        return Train(**data)

    return _make_train


@pytest.fixture
def sample_train(train_catalog_repo: TrainCatalogRepoImpl, make_train) -> Train:
    return train_catalog_repo.upsert(make_train())


@pytest.fixture
def sign_up_use_case(
    user_directory_repo: UserDirectoryRepoImpl, password_hasher: BcryptPasswordHasher
) -> SignUpUseCase:
    return SignUpUseCase(user_directory_repo=user_directory_repo, password_hasher=password_hasher)


@pytest.fixture
def login_use_case(user_directory_repo: UserDirectoryRepoImpl) -> LoginUseCase:
    return LoginUseCase(user_directory_repo=user_directory_repo)


@pytest.fixture
def registered_user(sign_up_use_case: SignUpUseCase) -> UserEntity:
    return sign_up_use_case.execute(
        name=TEST_USER_NAME, plain_password=SecretStr(DEFAULT_PASSWORD)
    )


@pytest.fixture
def credentials(registered_user: UserEntity) -> Credentials:
    return Credentials(name=registered_user.name, password=SecretStr(DEFAULT_PASSWORD))


@pytest.fixture
def another_credentials(sign_up_use_case: SignUpUseCase) -> Credentials:
    sign_up_use_case.execute(name=ANOTHER_USER_NAME, plain_password=SecretStr(DEFAULT_PASSWORD))
    return Credentials(name=ANOTHER_USER_NAME, password=SecretStr(DEFAULT_PASSWORD))


# =============================================================================
# Booking engine
# =============================================================================
@pytest.fixture
def book_seat_use_case(
    train_catalog_repo: TrainCatalogRepoImpl, user_directory_repo: UserDirectoryRepoImpl
) -> BookSeatUseCase:
    return BookSeatUseCase(
        train_catalog_repo=train_catalog_repo, user_directory_repo=user_directory_repo
    )


@pytest.fixture
def cancel_ticket_use_case(
    train_catalog_repo: TrainCatalogRepoImpl, user_directory_repo: UserDirectoryRepoImpl
) -> CancelTicketUseCase:
    return CancelTicketUseCase(
        train_catalog_repo=train_catalog_repo, user_directory_repo=user_directory_repo
    )
