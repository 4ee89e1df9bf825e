from dataclasses import dataclass

from pydantic import SecretStr


@dataclass(frozen=True)
class Credentials:
    """Name and plaintext password held by a logged-in session, re-checked on every mutation"""

    name: str
    password: SecretStr
