"""
Unit tests for the interactive BookingShell

The shell is driven with scripted input lines; output lines are collected for assertions.
Running out of input behaves like end-of-file on stdin and ends the loop.
"""

from collections.abc import Iterable
from unittest.mock import patch

import orjson
import pytest

from src.platform.exception.exceptions import StorageError
from src.service.train_booking.app.query.get_seat_grid_use_case import GetSeatGridUseCase
from src.service.train_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.train_booking.app.query.search_trains_use_case import SearchTrainsUseCase
from src.service.train_booking.driving_adapter.cli.booking_shell import (
    BookingShell,
    MenuOption,
    format_seat_grid,
)


class ScriptedConsole:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def print(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture
def make_shell(
    sign_up_use_case,
    login_use_case,
    book_seat_use_case,
    cancel_ticket_use_case,
    train_catalog_repo,
    user_directory_repo,
):
    def _make_shell(lines: Iterable[str]) -> tuple[BookingShell, ScriptedConsole]:
        console = ScriptedConsole(lines)
        shell = BookingShell(
            sign_up_use_case=sign_up_use_case,
            login_use_case=login_use_case,
            list_bookings_use_case=ListBookingsUseCase(user_directory_repo=user_directory_repo),
            search_trains_use_case=SearchTrainsUseCase(train_catalog_repo=train_catalog_repo),
            get_seat_grid_use_case=GetSeatGridUseCase(train_catalog_repo=train_catalog_repo),
            book_seat_use_case=book_seat_use_case,
            cancel_ticket_use_case=cancel_ticket_use_case,
            input_fn=console.input,
            output_fn=console.print,
        )
        return shell, console

    return _make_shell


def test_format_seat_grid():
    assert format_seat_grid([[0, 1], [1, 0]]) == '0 1\n1 0'


@pytest.mark.unit
class TestMenuLoop:
    def test_exit_option_ends_loop(self, make_shell):
        shell, console = make_shell(['7'])

        shell.run()

        assert console.output[0] == 'Welcome to Train Booking System'
        assert '1. Sign Up' in console.output
        assert '7. Exit' in console.output
        assert console.output[-1] == 'Exiting... Thank you for using the Train Booking System.'

    def test_end_of_input_ends_loop(self, make_shell):
        shell, console = make_shell([])

        shell.run()

        assert console.output[-1].startswith('Exiting...')

    def test_unknown_and_non_numeric_options_keep_looping(self, make_shell):
        shell, console = make_shell(['9', 'abc', '7'])

        shell.run()

        assert 'Invalid option. Try again.' in console.output
        assert "Please enter a number, got 'abc'." in console.output
        assert console.output[-1].startswith('Exiting...')

    def test_dispatch_exit_returns_false(self, make_shell):
        shell, _ = make_shell([])

        assert shell.dispatch(MenuOption.EXIT) is False


@pytest.mark.unit
class TestSessionGuards:
    @pytest.mark.parametrize(
        'option', [MenuOption.FETCH_BOOKINGS, MenuOption.BOOK_SEAT, MenuOption.CANCEL_BOOKING]
    )
    def test_login_required(self, make_shell, option):
        shell, console = make_shell([])

        assert shell.dispatch(option) is True
        assert console.output == ['Please login first.']

    def test_book_requires_selected_train(self, make_shell, credentials):
        shell, console = make_shell([])
        shell.session.credentials = credentials

        shell.dispatch(MenuOption.BOOK_SEAT)

        assert console.output == ['Please select a train first (option 4).']

    def test_wrong_password_keeps_session_logged_out(self, make_shell, registered_user):
        shell, console = make_shell(['alice', 'wrong'])

        shell.dispatch(MenuOption.LOGIN)

        assert 'Invalid credentials' in console.output
        assert not shell.session.is_logged_in

    def test_password_is_read_without_trimming(self, make_shell):
        shell, console = make_shell(['carol', ' pw ', 'carol', 'pw', 'carol', ' pw '])

        shell.dispatch(MenuOption.SIGN_UP)
        shell.dispatch(MenuOption.LOGIN)

        assert console.output[-1] == 'Invalid credentials'
        assert not shell.session.is_logged_in

        shell.dispatch(MenuOption.LOGIN)

        assert console.output[-1] == 'Login successful.'
        assert shell.session.credentials.password.get_secret_value() == ' pw '


@pytest.mark.unit
class TestBookingJourney:
    def test_sign_up_login_search_book_list_cancel(self, make_shell, sample_train, trains_path):
        shell, console = make_shell(
            [
                '1', 'dave', 'pw',  # sign up
                '2', 'dave', 'pw',  # login
                '4', 'a', 'c', '1',  # search and select
                '5', '1', '0',  # book row 1 col 0
                '3',  # fetch bookings
            ]
        )  # fmt: skip

        shell.run()

        assert 'Sign up successful.' in console.output
        assert 'Login successful.' in console.output
        assert '1. Train ID: T1 Train No: 12345' in console.output
        assert 'Train selected: T1' in console.output
        assert '0 0\n0 0' in console.output
        assert orjson.loads(trains_path.read_bytes())[0]['seats'] == [[0, 0], [1, 0]]

        booked_line = next(line for line in console.output if line.startswith('Seat booked'))
        ticket_id = booked_line.rsplit(' ', 1)[-1]
        assert any(line.startswith(f'Ticket ID: {ticket_id}') for line in console.output)

        shell, console = make_shell(['2', 'dave', 'pw', '6', ticket_id])
        shell.run()

        assert f'Ticket with ID {ticket_id} has been cancelled.' in console.output
        assert orjson.loads(trains_path.read_bytes())[0]['seats'] == [[0, 0], [0, 0]]

    def test_search_without_results(self, make_shell, sample_train):
        shell, console = make_shell(['C', 'A'])

        shell.dispatch(MenuOption.SEARCH_TRAINS)

        assert console.output[-1] == 'No trains found between these stations.'
        assert shell.session.selected_train_id is None

    @pytest.mark.parametrize('choice', ['0', '2', 'x'])
    def test_invalid_train_selection(self, make_shell, sample_train, choice):
        shell, console = make_shell(['A', 'C', choice])

        shell.dispatch(MenuOption.SEARCH_TRAINS)

        assert console.output[-1] == 'Invalid selection.'
        assert shell.session.selected_train_id is None

    def test_taken_seat_message_keeps_loop_alive(
        self, make_shell, book_seat_use_case, credentials, sample_train
    ):
        book_seat_use_case.execute(train_id='T1', row=0, col=0, credentials=credentials)
        shell, console = make_shell(['0', '0'])
        shell.session.credentials = credentials
        shell.session.selected_train_id = 'T1'

        assert shell.dispatch(MenuOption.BOOK_SEAT) is True
        assert console.output[-1] == 'Seat already booked: Row 0 Col 0'

    def test_partial_booking_prints_reconcile_hint(
        self, make_shell, user_directory_repo, credentials, sample_train
    ):
        shell, console = make_shell(['1', '1'])
        shell.session.credentials = credentials
        shell.session.selected_train_id = 'T1'

        with patch.object(
            user_directory_repo.document_store, 'write', side_effect=StorageError('disk full')
        ):
            assert shell.dispatch(MenuOption.BOOK_SEAT) is True

        assert console.output[-1].endswith('Reconcile train T1 seat row 1 col 1.')

