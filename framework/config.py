from typing import Literal, Optional
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Pet Breeders API"
    APP_DESCRIPTION: str = "Dog, cat and breeder catalog backed by MySQL or in-memory fixtures"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Database (MySQL/SQLModel) ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "mariadb"
    DB_PASSWORD: str = "myverysecretpassword"
    DB_NAME: str = "breeders"
    DB_CHARSET: str = "utf8mb4"

    @property
    def DATABASE_URL(self) -> str:
        # Build async MySQL connection URL
        safe_password = quote_plus(self.DB_PASSWORD)
        return (
            f"mysql+aiomysql://{self.DB_USER}:{safe_password}@{self.DB_HOST}:{self.DB_PORT}"
            f"/{self.DB_NAME}?charset={self.DB_CHARSET}"
        )

    # --- Connection pool ---
    DB_POOL_SIZE: int = 25  # Connections kept open (idle cap)
    DB_MAX_OVERFLOW: int = 0  # No connections beyond the pool size
    DB_POOL_RECYCLE: int = 300  # Seconds before a connection is recycled
    DB_CONNECT_TIMEOUT: int = 5

    # --- Per-operation storage timeout (seconds) ---
    DB_QUERY_TIMEOUT: float = 3.0

    # --- Repository backend: mysql (live store) or fixture (in-memory) ---
    REPOSITORY_BACKEND: Literal["mysql", "fixture"] = "mysql"

    # --- Logging ---
    LOG_DIR: str = "logs"

    # --- API route prefix ---
    API_PREFIX: str = "/api"

    # --- Gunicorn process name (optional) ---
    GUNICORN_PROC_NAME: Optional[str] = None  # Fallback to APP_NAME when empty

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
