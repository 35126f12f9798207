"""Environment-level configuration.

Isolates the things that depend on the deployment environment (database location, log verbosity)
from the game-domain logic.
"""

import os
from dataclasses import dataclass
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///hareandhounds.db"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Environment / deployment settings."""

    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    echo_sql: bool = False

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from environment variables."""
        return cls(
            database_url=os.getenv("HAREANDHOUNDS_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=os.getenv("HAREANDHOUNDS_LOG_LEVEL", "INFO").upper(),
            echo_sql=_env_flag("HAREANDHOUNDS_SQL_ECHO"),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()
