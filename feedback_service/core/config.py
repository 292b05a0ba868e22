# feedback_service/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Feedback Service"

    # Any SQLAlchemy URL; "sqlite://" keeps everything in memory
    database_url: str = "sqlite:///./feedback.db"

    session_cookie_name: str = "session_id"
    session_max_age_seconds: int = 24 * 60 * 60
    secure_cookies: bool = False

    # werkzeug hash method, e.g. "scrypt" or "pbkdf2:sha256:600000"
    password_hash_method: str = "pbkdf2:sha256:600000"

    log_level: str = "INFO"

    # Tell pydantic-settings to load from .env at project root
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore any extra stuff in .env
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
