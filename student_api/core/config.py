from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Student API"
    APP_VERSION: str = "1.0.0"
    DESCRIPTION: str = "A simple API for managing students"
    DEBUG: bool = False
    DOCS_URL: str = "/api-docs"

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # =============================================================================
    # MARIADB DATABASE - Individual components
    # =============================================================================
    DB_DRIVER: str = "mysql+aiomysql"
    DB_USER: str = "root"
    DB_PASSWORD: str = "root"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "sample"

    # Set directly, or built from the DB_* components
    DATABASE_URL: Optional[str] = None

    # =============================================================================
    # DATABASE POOL SETTINGS
    # =============================================================================
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO_SQL: bool = False
    DB_CREATE_TABLES: bool = False

    # =============================================================================
    # REMOTE FUNCTION (proxy target)
    # =============================================================================
    REMOTE_FUNCTION_URL: str = "http://localhost:7071/api/Function"
    REMOTE_FUNCTION_TIMEOUT: float = 5.0

    # =============================================================================
    # CORS
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = []

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def build_database_url(cls, v: Optional[str], info) -> str:
        """
        Build DATABASE_URL from components if not provided.

        Priority:
        1. Use DATABASE_URL if explicitly set in .env
        2. Build from DB_* components
        """
        if isinstance(v, str) and v:
            return v

        driver = info.data.get("DB_DRIVER")
        user = info.data.get("DB_USER")
        password = info.data.get("DB_PASSWORD")
        host = info.data.get("DB_HOST")
        port = info.data.get("DB_PORT")
        db = info.data.get("DB_NAME")

        return f"{driver}://{user}:{password}@{host}:{port}/{db}"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            import json
            return json.loads(v)
        return v

    def masked_database_url(self) -> str:
        """DATABASE_URL with the password hidden, safe for logs."""
        return make_url(self.DATABASE_URL).render_as_string(hide_password=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


def get_settings() -> Settings:
    """Load settings once at process start."""
    return Settings()
