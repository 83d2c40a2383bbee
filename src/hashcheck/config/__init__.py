"""Configuration models and loaders for hashcheck."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import HashCheckConfig, HashingConfig, LoggingConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HashCheckConfig",
    "HashingConfig",
    "LoggingConfig",
    "dump_example_config",
    "load_config",
]
