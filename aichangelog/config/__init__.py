"""Configuration module."""

from .settings import (
    Config,
    DEFAULT_PROVIDER,
    KNOWN_PROVIDERS,
    get_config,
    load_json_config,
    find_config_file,
    create_sample_config,
)

__all__ = [
    "Config",
    "DEFAULT_PROVIDER",
    "KNOWN_PROVIDERS",
    "get_config",
    "load_json_config",
    "find_config_file",
    "create_sample_config",
]
