"""Environment-driven configuration."""

from .config import Config, build_clock, load_config, validate_config

__all__ = ["Config", "build_clock", "load_config", "validate_config"]
