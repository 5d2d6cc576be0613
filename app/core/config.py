"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL (default deployment database)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "career_user"
    postgres_password: str = "password"
    postgres_db: str = "career_guidance"

    # Full SQLAlchemy URL, wins over the postgres_* parts when set
    # e.g. sqlite:// or mysql+pymysql://root:@localhost:3308/career_guidance
    database_url: str = ""
    db_pool_size: int = 5
    db_max_overflow: int = 10
    auto_create_schema: bool = True

    # Uploads
    upload_dir: str = "uploads"
    max_upload_mb: int = 5

    # Password hashing
    bcrypt_rounds: int = 10

    # App
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    debug: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        """Effective database URL"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
