"""
Interactive menu driving the booking use cases.

Domain errors are rendered at this boundary and never end the loop.
"""

from enum import IntEnum
from typing import Callable, Optional

from pydantic import SecretStr

from src.platform.exception.exceptions import CustomBaseError, PartialFailureError
from src.platform.logging.loguru_io import Logger
from src.service.train_booking.app.command.book_seat_use_case import BookSeatUseCase
from src.service.train_booking.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.train_booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.train_booking.app.query.get_seat_grid_use_case import GetSeatGridUseCase
from src.service.train_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.train_booking.app.query.login_use_case import LoginUseCase
from src.service.train_booking.app.query.search_trains_use_case import SearchTrainsUseCase
from src.service.train_booking.driving_adapter.cli.session import Session


class MenuOption(IntEnum):
    SIGN_UP = 1
    LOGIN = 2
    FETCH_BOOKINGS = 3
    SEARCH_TRAINS = 4
    BOOK_SEAT = 5
    CANCEL_BOOKING = 6
    EXIT = 7


MENU_LABELS = {
    MenuOption.SIGN_UP: 'Sign Up',
    MenuOption.LOGIN: 'Login',
    MenuOption.FETCH_BOOKINGS: 'Fetch Bookings',
    MenuOption.SEARCH_TRAINS: 'Search Trains',
    MenuOption.BOOK_SEAT: 'Book a Seat',
    MenuOption.CANCEL_BOOKING: 'Cancel a Booking',
    MenuOption.EXIT: 'Exit',
}


def format_seat_grid(seats: list[list[int]]) -> str:
    return '\n'.join(' '.join(str(seat) for seat in row) for row in seats)


class BookingShell:
    def __init__(
        self,
        *,
        sign_up_use_case: SignUpUseCase,
        login_use_case: LoginUseCase,
        list_bookings_use_case: ListBookingsUseCase,
        search_trains_use_case: SearchTrainsUseCase,
        get_seat_grid_use_case: GetSeatGridUseCase,
        book_seat_use_case: BookSeatUseCase,
        cancel_ticket_use_case: CancelTicketUseCase,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.sign_up_use_case = sign_up_use_case
        self.login_use_case = login_use_case
        self.list_bookings_use_case = list_bookings_use_case
        self.search_trains_use_case = search_trains_use_case
        self.get_seat_grid_use_case = get_seat_grid_use_case
        self.book_seat_use_case = book_seat_use_case
        self.cancel_ticket_use_case = cancel_ticket_use_case
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.session = Session()
        self._handlers: dict[MenuOption, Callable[[], None]] = {
            MenuOption.SIGN_UP: self.sign_up,
            MenuOption.LOGIN: self.login,
            MenuOption.FETCH_BOOKINGS: self.fetch_bookings,
            MenuOption.SEARCH_TRAINS: self.search_trains,
            MenuOption.BOOK_SEAT: self.book_seat,
            MenuOption.CANCEL_BOOKING: self.cancel_booking,
        }

    def run(self) -> None:
        self.output_fn('Welcome to Train Booking System')
        while True:
            self._print_menu()
            try:
                option = self._prompt_int('')
            except EOFError:
                break
            if option is None:
                continue
            if not self.dispatch(option):
                break
        self.output_fn('Exiting... Thank you for using the Train Booking System.')

    def dispatch(self, option: int) -> bool:
        """Run one menu option; False means the loop should stop."""
        if option == MenuOption.EXIT:
            return False

        handler = self._handlers.get(option)  # type: ignore[call-overload]
        if handler is None:
            self.output_fn('Invalid option. Try again.')
            return True

        try:
            handler()
        except PartialFailureError as e:
            self.output_fn(
                f'{e.message}\nReconcile train {e.train_id} seat row {e.row} col {e.col}.'
            )
        except CustomBaseError as e:
            self.output_fn(e.message)
        except EOFError:
            return False
        return True

    def sign_up(self) -> None:
        name = self._prompt('Enter username to sign up:')
        password = SecretStr(self._prompt('Enter password:', strip=False))
        self.sign_up_use_case.execute(name=name, plain_password=password)
        self.output_fn('Sign up successful.')

    def login(self) -> None:
        name = self._prompt('Enter username to log in:')
        password = SecretStr(self._prompt('Enter password:', strip=False))
        _, credentials = self.login_use_case.execute(name=name, plain_password=password)
        self.session.credentials = credentials
        self.output_fn('Login successful.')

    def fetch_bookings(self) -> None:
        if not self._require_login():
            return
        tickets = self.list_bookings_use_case.execute(credentials=self.session.credentials)
        if not tickets:
            self.output_fn('No bookings found.')
            return
        self.output_fn('Your bookings:')
        for ticket in tickets:
            self.output_fn(ticket.ticket_info)

    def search_trains(self) -> None:
        source = self._prompt('Enter source station:')
        destination = self._prompt('Enter destination station:')
        trains = self.search_trains_use_case.execute(source=source, destination=destination)
        if not trains:
            self.output_fn('No trains found between these stations.')
            return

        self.output_fn('Available trains:')
        for i, train in enumerate(trains, start=1):
            self.output_fn(f'{i}. {train.train_info}')
            for station, time in train.station_times.items():
                self.output_fn(f'   {station} at {time}')

        train_index = self._prompt_int('Select a train by typing its number:')
        if train_index is None or not 1 <= train_index <= len(trains):
            self.output_fn('Invalid selection.')
            return
        self.session.selected_train_id = trains[train_index - 1].train_id
        self.output_fn(f'Train selected: {self.session.selected_train_id}')

    def book_seat(self) -> None:
        if not self._require_login():
            return
        if not self.session.has_selected_train:
            self.output_fn('Please select a train first (option 4).')
            return

        train_id = self.session.selected_train_id
        seats = self.get_seat_grid_use_case.execute(train_id=train_id)
        self.output_fn('Available seats (0 = empty, 1 = booked):')
        self.output_fn(format_seat_grid(seats))

        row = self._prompt_int('Enter seat row number:')
        col = self._prompt_int('Enter seat column number:')
        if row is None or col is None:
            return

        self.output_fn('Booking your seat...')
        ticket = self.book_seat_use_case.execute(
            train_id=train_id, row=row, col=col, credentials=self.session.credentials
        )
        self.output_fn(f'Seat booked successfully. Ticket ID: {ticket.ticket_id}')

    def cancel_booking(self) -> None:
        if not self._require_login():
            return
        ticket_id = self._prompt('Enter ticket ID to cancel:')
        self.cancel_ticket_use_case.execute(
            ticket_id=ticket_id, credentials=self.session.credentials
        )
        self.output_fn(f'Ticket with ID {ticket_id} has been cancelled.')

    def _require_login(self) -> bool:
        if not self.session.is_logged_in:
            self.output_fn('Please login first.')
            return False
        return True

    def _print_menu(self) -> None:
        self.output_fn('\nChoose an option:')
        for option, label in MENU_LABELS.items():
            self.output_fn(f'{option.value}. {label}')

    def _prompt(self, message: str, *, strip: bool = True) -> str:
        if message:
            self.output_fn(message)
        raw = self.input_fn('> ')
        # Passwords are read verbatim, surrounding spaces included
        return raw.strip() if strip else raw

    def _prompt_int(self, message: str) -> Optional[int]:
        raw = self._prompt(message)
        try:
            return int(raw)
        except ValueError:
            Logger.base.debug(f'Non-numeric input: {raw!r}')
            self.output_fn(f'Please enter a number, got {raw!r}.')
            return None
