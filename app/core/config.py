"""
Application settings.
Loaded from environment variables and an optional .env file.
"""
import os
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # Database. DATABASE_URL wins; otherwise DB_* builds a PostgreSQL URL;
    # otherwise a local SQLite file is used.
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: int = 5432
    DB_NAME: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None

    # Create tables on startup (use Alembic migrations in production)
    AUTO_CREATE_TABLES: bool = True

    # Optional
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PROJECT_NAME: str = "Contacts API"
    CORS_ORIGINS: List[str] = ["*"]

    # Static files are served from PUBLIC_DIR at /public; avatars live in a subdirectory
    PUBLIC_DIR: str = "public"
    AVATAR_SUBDIR: str = "uploads"
    MAX_AVATAR_SIZE: int = 5 * 1024 * 1024  # 5 MiB

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return (
                f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASS}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
            )
        return "sqlite:///./contacts.db"

    @property
    def avatar_dir(self) -> str:
        return os.path.join(self.PUBLIC_DIR, self.AVATAR_SUBDIR)

    @property
    def avatar_url_prefix(self) -> str:
        return f"/public/{self.AVATAR_SUBDIR}"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
