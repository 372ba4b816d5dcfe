from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parents[3] / ".env"  # noqa: E402
load_dotenv(dotenv_path=ENV_PATH)  # noqa: E402

import os
from enum import Enum
from typing import Literal
import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

POSTGRES_PREFIXES = ("postgresql://", "postgresql+asyncpg://", "postgresql+psycopg://")


def _default_pool_size() -> int:
    return max(1, min(50, os.cpu_count() or 1))


class OrderStore(str, Enum):
    POSTGRES = "postgres"
    MEMORY = "memory"


class Settings(BaseSettings):
    # ============= DATABASE =============
    db_url: str = Field(
        ...,
        validation_alias=AliasChoices("database_url", "db_url"),
        description="PostgreSQL connection URL"
    )
    db_pool_size: int = Field(
        default_factory=_default_pool_size,
        ge=1,
        le=50,
        description="Defaults to the number of available CPUs"
    )
    db_max_overflow: int = Field(
        default=10,
        ge=0,
        le=100
    )
    db_pool_timeout: int = Field(
        default=30,
        ge=1
    )
    db_pool_recycle: int = Field(
        default=3600,
        description="Recycle connections after N seconds"
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements"
    )
    db_statement_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Upper bound in seconds for a single store operation"
    )
    db_create_schema: bool = Field(
        default=True,
        description="Create missing tables on startup"
    )

    # ============= HEALTH =============
    health_check_timeout: float = Field(
        default=2.0,
        gt=0
    )

    # ============= ORDERS =============
    order_store: OrderStore = Field(default=OrderStore.POSTGRES)

    # ============= APPLICATION =============
    app_name: str = Field(default="Order Management API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)

    # ============= LOGGING =============
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        validate_default=True,
        env_prefix="",
        populate_by_name=True,
    )

    # ============= COMPUTED PROPERTIES =============
    @property
    def async_database_url(self) -> str:
        if self.db_url.startswith("postgresql://"):
            return self.db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif self.db_url.startswith("postgresql+psycopg://"):
            return self.db_url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
        return self.db_url

    @property
    def uses_postgres(self) -> bool:
        return self.order_store == OrderStore.POSTGRES

    # ============= VALIDATORS =============
    @field_validator("db_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Database URL cannot be empty")
        if not v.startswith(POSTGRES_PREFIXES):
            raise ValueError("Database URL must be a valid PostgreSQL URL")
        return v

    def get_logging_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": self.log_format
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": self.log_level,
                }
            },
            "root": {
                "level": self.log_level,
                "handlers": ["console"]
            },
            "loggers": {
                "uvicorn": {
                    "level": self.log_level,
                    "handlers": ["console"],
                    "propagate": False
                },
                "sqlalchemy": {
                    "level": "WARNING" if not self.db_echo else "INFO",
                    "handlers": ["console"],
                    "propagate": False
                },
                "sqlalchemy.engine": {
                    "level": "INFO" if self.db_echo else "WARNING",
                    "handlers": ["console"],
                    "propagate": False
                }
            }
        }
