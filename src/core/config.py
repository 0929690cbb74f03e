"""Environment-level configuration.

Keeps deployment dependent values (database URL, log level) away from the game logic.
"""

import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "TICTACTOE_"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Environment / deployment settings."""

    # in-memory database: games live as long as the process does
    database_url: str = "sqlite:///:memory:"
    database_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        defaults = cls()
        return cls(
            database_url=os.getenv(f"{ENV_PREFIX}DATABASE_URL", defaults.database_url),
            database_echo=_env_flag(f"{ENV_PREFIX}DB_ECHO", defaults.database_echo),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()


def configure_logging(settings: Settings | None = None) -> None:
    """Set root level and format once at startup."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
