"""Train Booking Domain Value Objects"""

from src.service.train_booking.domain.value_object.credentials import Credentials
from src.service.train_booking.domain.value_object.seat_position import SeatPosition

__all__ = ['Credentials', 'SeatPosition']
