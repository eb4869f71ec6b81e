"""
Application Configuration
Loads settings from environment variables
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from .env file"""

    # Application
    APP_ENV: str = "development"
    APP_NAME: str = "TPO Portal"
    DEBUG: bool = True

    # Database
    DATABASE_URL: str = "sqlite:///./tpo_portal.db"

    # JWT
    JWT_SECRET_KEY: str = "development-secret-key"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_HOURS: int = 24

    # Default TPO account, created on startup when a password is set
    DEFAULT_ADMIN_USERNAME: str = "tpo_admin"
    DEFAULT_ADMIN_PASSWORD: Optional[str] = None

    # File Upload
    MAX_UPLOAD_SIZE: int = 5242880  # 5MB

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
