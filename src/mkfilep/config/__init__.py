"""Configuration models and loaders for mkfilep."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, load_config
from .models import CreationConfig, LoggingConfig, MkfilepConfig

__all__ = [
    "ConfigError",
    "CreationConfig",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "MkfilepConfig",
    "load_config",
]
