class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class SeatValidationError(DomainError):
    """Seat coordinate outside the train's seat grid"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """Seat already occupied"""


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class LoginError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class StorageError(CustomBaseError):
    """Whole-document write or read of a JSON store failed"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class PartialFailureError(CustomBaseError):
    """
    One of the two coupled stores was written before the second step failed.

    Carries the seat coordinate so a caller can reconcile the train store with
    the user store by hand.
    """

    def __init__(self, message: str, *, train_id: str, row: int, col: int) -> None:
        super().__init__(message, 207)
        self.train_id = train_id
        self.row = row
        self.col = col


class PartialBookingError(PartialFailureError):
    """Seat marked occupied on disk but no ticket was issued"""


class PartialCancellationError(PartialFailureError):
    """Seat freed on disk but the ticket is still in the user store"""
