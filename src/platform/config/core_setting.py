from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import LOCAL_DB_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Train Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Writes DEBUG logs to LOG_DIR when enabled
    LOG_LEVEL: str = 'WARNING'  # Console level; the menu shares the terminal

    # JSON documents
    DATA_DIR: Path = LOCAL_DB_DIR
    TRAINS_DB_FILE: str = 'trains.json'
    USERS_DB_FILE: str = 'users.json'

    # Security
    BCRYPT_ROUNDS: int = 12  # bcrypt.gensalt default

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator('BCRYPT_ROUNDS')
    @classmethod
    def check_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError('BCRYPT_ROUNDS must be between 4 and 31')
        return v

    @property
    def TRAINS_DB_PATH(self) -> Path:
        return Path(self.DATA_DIR) / self.TRAINS_DB_FILE

    @property
    def USERS_DB_PATH(self) -> Path:
        return Path(self.DATA_DIR) / self.USERS_DB_FILE


settings = Settings()  # type: ignore
