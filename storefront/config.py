"""
Centralized configuration with environment variable overrides.

Business details, server binding, store location and client settings are
all configurable here. Nothing is hardcoded in the API or form logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from storefront.logging_context import RequestIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(request_id)s] %(levelname)s: %(message)s"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BusinessConfig:
    """Storefront identity shown to customers."""

    name: str = os.getenv("BUSINESS_NAME", "Dev Electricals")
    support_phone: str = os.getenv("SUPPORT_PHONE", "1800-338-000")


@dataclass(frozen=True)
class ServerConfig:
    """Where the booking API listens."""

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = _safe_int("API_PORT", "5000")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    def allowed_origins(self) -> list[str]:
        """Comma-separated CORS_ORIGINS as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@dataclass(frozen=True)
class StoreConfig:
    """Repair record storage. An empty path keeps records in memory."""

    repair_store_path: str = os.getenv("REPAIR_STORE_PATH", "")


@dataclass(frozen=True)
class ClientConfig:
    """Settings for the booking form's API client."""

    api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    timeout_seconds: float = _safe_float("API_TIMEOUT_SECONDS", "10.0")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    client: ClientConfig = field(default_factory=ClientConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not 1 <= config.server.port <= 65535:
        raise ValueError(
            f"API_PORT must be between 1 and 65535, got {config.server.port}"
        )
    if config.client.timeout_seconds <= 0:
        raise ValueError(
            f"API_TIMEOUT_SECONDS must be > 0, got {config.client.timeout_seconds}"
        )
    if not config.client.api_base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"API_BASE_URL must be an http(s) URL, got {config.client.api_base_url!r}"
        )
    if not config.business.name.strip():
        raise ValueError("BUSINESS_NAME must not be empty")


def configure_logging(level: str) -> None:
    """Configure root logging and stamp request_id on every handled record.

    The filter sits on the root handlers, so records from plain
    ``logging.getLogger`` loggers format cleanly too.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    configure_logging(config.log_level)
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
