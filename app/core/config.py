from enum import StrEnum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    DEVELOPMENT = "development"
    TEST = "test"
    ACCEPTANCE = "acceptance"
    LIVE = "live"


TEST_ENVIRONMENTS = frozenset({Environment.DEVELOPMENT, Environment.TEST})


def to_environment(value: Environment | str) -> Environment:
    """Case-insensitive lookup, so "Test" and "LIVE" are accepted."""
    return Environment(str(value).strip().lower())


def is_test_environment(environment: Environment | str) -> bool:
    """Development and test use the PayNL sandbox credentials and test mode."""
    return to_environment(environment) in TEST_ENVIRONMENTS


class Settings(BaseSettings):
    APP_NAME: str = "PayNL Payment Adapter"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str
    DB_POOL_SIZE: int = 3
    DB_MAX_OVERFLOW: int = 2
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 300
    DB_ECHO: bool = False

    # Key for the AES-encrypted values in payment_service_provider_details
    SECRET_ENCRYPTION_KEY: str

    # ── PayNL gateway settings ──
    PAYNL_BASE_URL: str = "https://rest.pay.nl/"
    PAYNL_TIMEOUT_SECONDS: float = 30.0

    CORS_ORIGINS: str = "*"
    CORS_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_test_environment(self) -> bool:
        return is_test_environment(self.ENVIRONMENT)

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if "asyncpg" not in v:
            raise ValueError("DATABASE_URL must use asyncpg driver")
        return v

    @field_validator("ENVIRONMENT", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = [e.value for e in Environment]
        if str(v).lower() not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return str(v).lower()


settings = Settings()
