"""
Application Settings

Process-wide configuration loaded once at startup from environment
variables (and an optional .env file). The resulting Settings object is
immutable and handed to the app factory.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

logger = logging.getLogger("taskhub.config")

DEFAULT_DATABASE_URL = "sqlite:///./taskhub.db"
DEFAULT_JWT_ISSUER = "taskhub"
DEFAULT_JWT_AUDIENCE = "taskhub-clients"
DEFAULT_TOKEN_LIFETIME_MINUTES = 60


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


@dataclass(frozen=True)
class Settings:
    """Immutable runtime configuration."""
    database_url: str = DEFAULT_DATABASE_URL
    jwt_key: Optional[str] = None
    jwt_issuer: str = DEFAULT_JWT_ISSUER
    jwt_audience: str = DEFAULT_JWT_AUDIENCE
    token_lifetime_minutes: int = DEFAULT_TOKEN_LIFETIME_MINUTES
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = True


def load_settings() -> Settings:
    """Build Settings from the environment."""
    load_dotenv()

    return Settings(
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        jwt_key=os.getenv("JWT_KEY") or None,
        jwt_issuer=os.getenv("JWT_ISSUER") or DEFAULT_JWT_ISSUER,
        jwt_audience=os.getenv("JWT_AUDIENCE") or DEFAULT_JWT_AUDIENCE,
        token_lifetime_minutes=_env_int("JWT_LIFETIME_MINUTES", DEFAULT_TOKEN_LIFETIME_MINUTES),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_dir=os.getenv("LOG_DIR") or "logs",
        log_to_file=_env_bool("LOG_TO_FILE", True),
    )
