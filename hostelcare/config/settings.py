"""
Environment configuration for the HostelCare API.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = Field(
        default="HostelCare API",
        validation_alias=AliasChoices("APP_NAME", "PROJECT_NAME"),
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "PROJECT_VERSION"),
    )
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # JSON list or comma separated string
    CORS_ORIGINS: Union[List[str], str] = Field(
        default=["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "BACKEND_CORS_ORIGINS"),
    )

    # Database configuration - DATABASE_URL wins over the individual fields
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "hostelcare"
    DB_POOL_SIZE: int = 10
    DB_POOL_OVERFLOW: int = 10
    DB_ECHO: bool = False
    SLOW_QUERY_SECONDS: float = 0.5
    AUTO_CREATE_TABLES: bool = True

    # Security configuration
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # Bootstrap admin, created on startup when both are set
    FIRST_ADMIN_USERNAME: Optional[str] = None
    FIRST_ADMIN_PASSWORD: Optional[str] = None
    FIRST_ADMIN_FULL_NAME: str = "System Administrator"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "logs"

    # Reporting
    DASHBOARD_MAX_WORKERS: int = 6

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from a JSON list or comma separated string"""
        if isinstance(v, str):
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    def get_database_url(self) -> str:
        """Construct database URL from components or use provided URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
