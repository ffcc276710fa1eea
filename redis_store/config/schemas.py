"""
redis-store — Configuration Schemas

Defines typed configuration models using Pydantic for validation and type safety.
All configuration is validated before a store is constructed.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class CacheConfig(BaseModel):
    """Redis cache store configuration."""

    prefix: str = Field(default="", description="Prefix prepended verbatim to every cache key")
    host: str = Field(default="127.0.0.1", description="Redis host")
    port: str = Field(default="6379", description="Redis port")
    db: int = Field(default=0, ge=0, description="Redis database index")
    password: str = Field(default="", description="Redis password (empty = no AUTH)")

    socket_timeout: float = Field(default=5.0, gt=0, description="Redis socket timeout in seconds")
    max_connections: int = Field(default=10, ge=1, description="Redis connection pool size")

    @field_validator("host", mode="before")
    @classmethod
    def default_host(cls, v: str | None) -> str:
        """Fall back to the loopback address when the host is blank."""
        return v or "127.0.0.1"

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v: str | int | None) -> str:
        """Accept ints or numeric strings; blank means the default port."""
        if v is None or v == "":
            return "6379"
        port = str(v).strip()
        if not port.isdigit() or not 1 <= int(port) <= 65535:
            raise ValueError(f"port must be a number between 1 and 65535, got {v!r}")
        return port

    @property
    def address(self) -> str:
        """host:port pair used in log messages and errors."""
        return f"{self.host}:{self.port}"

    model_config = ConfigDict(frozen=True)


class StoreConfig(BaseModel):
    """Root configuration for redis-store."""

    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Runtime environment")
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")

    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)
