"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field


def _env_int(name: str, default: int):
    return field(default_factory=lambda: int(os.getenv(name, str(default))))


def _env_flag(name: str, default: bool):
    fallback = "true" if default else "false"
    return field(default_factory=lambda: os.getenv(name, fallback).lower() == "true")


def _parse_cors_origins() -> list[str]:
    """Parse the comma-separated CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["GET", "POST"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting for the health endpoint."""

    enabled: bool = _env_flag("RATE_LIMIT_ENABLED", True)
    requests_per_minute: int = _env_int("RATE_LIMIT_RPM", 120)


@dataclass(frozen=True)
class SecurityConfig:
    """Key used to sign session tokens."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY") or secrets.token_urlsafe(32)
    )


@dataclass(frozen=True)
class RedisConfig:
    """Redis connection for the session store."""

    host: str = field(default_factory=lambda: os.getenv("REDIS_HOST", "localhost"))
    port: int = _env_int("REDIS_PORT", 6379)
    db: int = _env_int("REDIS_DB", 0)
    password: str | None = field(default_factory=lambda: os.getenv("REDIS_PASSWORD"))

    @property
    def url(self) -> str:
        """Build Redis connection URL."""
        auth = f":{self.password}@" if self.password else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"


@dataclass(frozen=True)
class TableConfig:
    """Setup used when a new table session does not specify one."""

    decks: int = _env_int("ADVISOR_DECKS", 2)
    players: int = _env_int("ADVISOR_PLAYERS", 4)


@dataclass(frozen=True)
class LoggingConfig:
    """Root logger level and format."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = _env_flag("DEBUG", False)
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = _env_int("PORT", 8000)
    session_ttl: int = _env_int("SESSION_TTL", 8 * 3600)  # One playing session

    redis: RedisConfig = field(default_factory=RedisConfig)
    table: TableConfig = field(default_factory=TableConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
