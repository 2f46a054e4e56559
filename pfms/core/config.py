# pfms/core/config.py

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "PFMS API"
    DEBUG: bool = False
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    PORT: int = 3000

    # Database Configuration
    DATABASE_URL: str = f"sqlite+aiosqlite:///{BASE_DIR / 'pfms.db'}"
    DB_ECHO: bool = False

    # Session token configuration
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080
    REQUIRE_AUTH: bool = False

    # Seed login created on startup when missing
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    # Optional directory with the browser dashboard (index.html, assets/...)
    STATIC_DIR: str = ""

    @property
    def is_sqlite(self) -> bool:
        """Check if we're running on a SQLite file/memory database"""
        return self.DATABASE_URL.startswith("sqlite")

# Create a global settings instance
settings = Settings()
