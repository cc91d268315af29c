from typing import List, Optional
from pydantic import Field, field_validator
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
    PROJECT_NAME: str = "Student Records API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # =============================================================================
    # POSTGRESQL DATABASE - Individual components
    # =============================================================================
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "student_db"

    # Explicit URL wins, otherwise built from the components above
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # =============================================================================
    # DATABASE POOL SETTINGS
    # =============================================================================
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO_SQL: bool = False

    # Development shortcut; production uses Alembic migrations
    AUTO_CREATE_TABLES: bool = False

    # =============================================================================
    # CORS
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

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
        2. Build from POSTGRES_* components
        """
        if isinstance(v, str) and v:
            return v

        user = info.data.get("POSTGRES_USER")
        password = info.data.get("POSTGRES_PASSWORD")
        host = info.data.get("POSTGRES_HOST")
        port = info.data.get("POSTGRES_PORT")
        db = info.data.get("POSTGRES_DB")

        return f"postgresql://{user}:{password}@{host}:{port}/{db}"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from a JSON string, a comma separated string or a list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                import json
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()


def print_config(config: Optional[Settings] = None):
    """Print current configuration (hide sensitive data)."""
    config = config or settings
    password = config.POSTGRES_PASSWORD
    url = make_url(config.DATABASE_URL).render_as_string(hide_password=True)

    print("=" * 80)
    print("CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {config.PROJECT_NAME}")
    print(f"Version: {config.APP_VERSION}")
    print(f"Debug Mode: {config.DEBUG}")
    print(f"API Prefix: {config.API_PREFIX}")
    print("-" * 80)
    print(f"Database Host: {config.POSTGRES_HOST}:{config.POSTGRES_PORT}")
    print(f"Database Name: {config.POSTGRES_DB}")
    print(f"Database User: {config.POSTGRES_USER}")
    print(f"Database Password: {'*' * len(password)}")
    print(f"Database URL: {url}")
    print("-" * 80)
    print(f"Pool Size: {config.DB_POOL_SIZE}")
    print(f"Max Overflow: {config.DB_MAX_OVERFLOW}")
    print(f"Echo SQL: {config.DB_ECHO_SQL}")
    print(f"Auto Create Tables: {config.AUTO_CREATE_TABLES}")
    print("=" * 80)


if __name__ == "__main__":
    print_config()
