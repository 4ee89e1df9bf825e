"""Train Booking Domain Enums"""

from src.service.train_booking.domain.enum.seat_state import SeatState

__all__ = ['SeatState']
