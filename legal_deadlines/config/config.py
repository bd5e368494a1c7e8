"""Configuration for the deadline engine CLI."""

from datetime import date
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from ..timeline.dates import Clock, fixed_clock, system_clock

ENV_PREFIX = "LEGAL_DEADLINES_"


class Config(BaseSettings):
    """Application configuration from environment variables.

    All settings are optional; ``LEGAL_DEADLINES_TODAY`` pins the clock
    for reproducible runs.
    """

    log_level: str = "INFO"
    today: Optional[date] = None
    json_indent: int = 2

    model_config = {"env_prefix": ENV_PREFIX, "env_file": ".env", "case_sensitive": False, "extra": "ignore"}


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError naming every variable that failed to parse.
    """
    try:
        return Config()
    except ValidationError as exc:
        bad = []
        for err in exc.errors():
            loc = err.get("loc") or ("?",)
            bad.append(f"{ENV_PREFIX}{str(loc[0]).upper()}")
        if bad:
            raise ValueError(
                f"Invalid environment variable(s): {', '.join(bad)}. "
                "Check your .env file or environment."
            ) from exc
        raise


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()


def build_clock(config: Config) -> Clock:
    """Fixed clock when ``today`` is configured, otherwise the system clock."""
    if config.today is not None:
        return fixed_clock(config.today)
    return system_clock
