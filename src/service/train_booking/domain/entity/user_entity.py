from typing import Optional

import attrs
from pydantic import SecretStr
import uuid_utils

from src.platform.exception.exceptions import DomainError, LoginError
from src.service.train_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.train_booking.domain.entity.ticket_entity import Ticket


BCRYPT_MAX_PASSWORD_BYTES = 72


@attrs.define
class UserEntity:
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    user_id: str = ''
    tickets_booked: list[Ticket] = attrs.field(factory=list)

    @classmethod
    def create(
        cls, *, name: str, plain_password: SecretStr, password_hasher: IPasswordHasher
    ) -> 'UserEntity':
        cls.validate_name(name)
        user_entity = cls(name=name, user_id=str(uuid_utils.uuid7()))
        user_entity.set_password(plain_password, password_hasher)
        return user_entity

    @staticmethod
    def validate_name(name: str) -> None:
        if not name or not name.strip():
            raise DomainError('User name cannot be empty')

    @staticmethod
    def validate_password(plain_password: SecretStr) -> None:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if not password_bytes:
            raise DomainError('Password cannot be empty')
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            raise DomainError(f'Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes')

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        if not user_entity:
            raise LoginError('Invalid credentials')

        return user_entity

    def set_password(self, plain_password: SecretStr, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.validate_password(plain_password)
        self.hashed_password = password_hasher.hash_password(plain_password=plain_password)

    def find_ticket(self, ticket_id: str) -> Ticket | None:
        return next((t for t in self.tickets_booked if t.ticket_id == ticket_id), None)

    def add_ticket(self, ticket: Ticket) -> None:
        self.tickets_booked.append(ticket)

    def remove_ticket(self, ticket_id: str) -> bool:
        remaining = [t for t in self.tickets_booked if t.ticket_id != ticket_id]
        removed = len(remaining) != len(self.tickets_booked)
        self.tickets_booked = remaining
        return removed
