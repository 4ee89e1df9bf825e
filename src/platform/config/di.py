"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.train_booking.app.command.book_seat_use_case import BookSeatUseCase
from src.service.train_booking.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.train_booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.train_booking.app.command.upsert_train_use_case import UpsertTrainUseCase
from src.service.train_booking.app.query.get_seat_grid_use_case import GetSeatGridUseCase
from src.service.train_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.train_booking.app.query.login_use_case import LoginUseCase
from src.service.train_booking.app.query.search_trains_use_case import SearchTrainsUseCase
from src.service.train_booking.driven_adapter.repo.train_catalog_repo_impl import (
    TrainCatalogRepoImpl,
)
from src.service.train_booking.driven_adapter.repo.user_directory_repo_impl import (
    UserDirectoryRepoImpl,
)
from src.service.train_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.train_booking.driving_adapter.cli.booking_shell import BookingShell


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Security
    password_hasher = providers.Singleton(
        BcryptPasswordHasher, rounds=config_service.provided.BCRYPT_ROUNDS
    )

    # Repositories (whole JSON documents held in memory for the session)
    train_catalog_repo = providers.Singleton(
        TrainCatalogRepoImpl, document_path=config_service.provided.TRAINS_DB_PATH
    )
    user_directory_repo = providers.Singleton(
        UserDirectoryRepoImpl,
        document_path=config_service.provided.USERS_DB_PATH,
        password_hasher=password_hasher,
    )

    # Command use cases
    sign_up_use_case = providers.Singleton(
        SignUpUseCase, user_directory_repo=user_directory_repo, password_hasher=password_hasher
    )
    upsert_train_use_case = providers.Singleton(
        UpsertTrainUseCase, train_catalog_repo=train_catalog_repo
    )
    book_seat_use_case = providers.Singleton(
        BookSeatUseCase,
        train_catalog_repo=train_catalog_repo,
        user_directory_repo=user_directory_repo,
    )
    cancel_ticket_use_case = providers.Singleton(
        CancelTicketUseCase,
        train_catalog_repo=train_catalog_repo,
        user_directory_repo=user_directory_repo,
    )

    # Query use cases
    login_use_case = providers.Singleton(LoginUseCase, user_directory_repo=user_directory_repo)
    list_bookings_use_case = providers.Singleton(
        ListBookingsUseCase, user_directory_repo=user_directory_repo
    )
    search_trains_use_case = providers.Singleton(
        SearchTrainsUseCase, train_catalog_repo=train_catalog_repo
    )
    get_seat_grid_use_case = providers.Singleton(
        GetSeatGridUseCase, train_catalog_repo=train_catalog_repo
    )

    # Driving adapter
    booking_shell = providers.Factory(
        BookingShell,
        sign_up_use_case=sign_up_use_case,
        login_use_case=login_use_case,
        list_bookings_use_case=list_bookings_use_case,
        search_trains_use_case=search_trains_use_case,
        get_seat_grid_use_case=get_seat_grid_use_case,
        book_seat_use_case=book_seat_use_case,
        cancel_ticket_use_case=cancel_ticket_use_case,
    )


container = Container()


def setup() -> None:
    """Load both JSON documents into memory for the session."""
    container.config_service()
    container.train_catalog_repo().load()
    container.user_directory_repo().load()


def cleanup() -> None:
    container.reset_singletons()
