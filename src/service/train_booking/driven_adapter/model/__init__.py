"""
Storage Records

Pydantic models for the documents in trains.json and users.json
"""

from src.service.train_booking.driven_adapter.model.train_record import TrainRecord
from src.service.train_booking.driven_adapter.model.user_record import TicketRecord, UserRecord

__all__ = [
    'TicketRecord',
    'TrainRecord',
    'UserRecord',
]
