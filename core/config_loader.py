from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./shift_roster.db"
    BACKEND_CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # dev conveniences; production runs `alembic upgrade head` instead
    AUTO_CREATE_TABLES: bool = True
    SEED_DEFAULT_WORKERS: bool = True

    STATIC_DIR: str = "public"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
