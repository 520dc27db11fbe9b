"""Configuration management for ai-changelog."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)

KNOWN_PROVIDERS = ("openai", "xai")
DEFAULT_PROVIDER = "xai"


class Config(BaseSettings):
    """Configuration settings for ai-changelog."""

    model_config = SettingsConfigDict(env_prefix="AI_CHANGELOG_", case_sensitive=False)

    provider: str = DEFAULT_PROVIDER
    openai_api_key: Optional[str] = None
    xai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    xai_model: str = "grok-3"
    xai_base_url: str = "https://api.x.ai/v1"
    timeout: float = 60.0
    changelog_file: str = "CHANGELOG.md"

    @field_validator('provider')
    @classmethod
    def normalize_provider(cls, v):
        """Lowercase the provider name and make sure it is one we know."""
        v = (v or DEFAULT_PROVIDER).strip().lower()
        if v not in KNOWN_PROVIDERS:
            raise ValueError(f"Unknown provider '{v}'. Available providers: {', '.join(KNOWN_PROVIDERS)}")
        return v

    @field_validator('xai_base_url')
    @classmethod
    def normalize_base_url(cls, v):
        """Ensure the base URL has a protocol and no trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        return v.rstrip('/')

    def api_key_for(self, provider: str) -> Optional[str]:
        """Return the credential configured for a provider.

        Args:
            provider: Provider name (openai or xai)

        Returns:
            API key or None if not configured
        """
        return {
            'openai': self.openai_api_key,
            'xai': self.xai_api_key,
        }.get(provider)


def load_json_config(config_path: str) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Error loading config file {config_path}: expected a JSON object")
    return data


def find_config_file() -> Optional[str]:
    """Find configuration file in common locations.

    Returns:
        Path to config file or None if not found
    """
    search_paths = [
        "ai-changelog.json",
        ".ai-changelog.json",
        "~/.ai-changelog.json",
        "~/.config/ai-changelog/config.json",
    ]

    for path_str in search_paths:
        path = Path(path_str).expanduser()
        if path.exists() and path.is_file():
            return str(path)

    return None


def get_config(config_file: Optional[str] = None) -> Config:
    """Load configuration from a JSON file and the environment.

    Environment variables take precedence over values from the file.

    Args:
        config_file: Optional path to JSON config file

    Returns:
        Configuration object
    """
    config_data = {}

    json_config_path = config_file or find_config_file()
    if json_config_path:
        try:
            config_data.update(load_json_config(json_config_path))
            logger.debug(f"Loaded configuration from {json_config_path}")
        except ValueError as e:
            logger.warning(f"{e}; falling back to environment variables")

    env_config = {
        'provider': os.getenv('AI_CHANGELOG_PROVIDER'),
        'openai_api_key': os.getenv('OPENAI_API_KEY'),
        'xai_api_key': os.getenv('XAI_API_KEY') or os.getenv('GITHUB_TOKEN'),
        'openai_model': os.getenv('AI_CHANGELOG_OPENAI_MODEL'),
        'xai_model': os.getenv('AI_CHANGELOG_XAI_MODEL'),
        'xai_base_url': os.getenv('AI_CHANGELOG_XAI_BASE_URL'),
    }

    env_config = {k: v for k, v in env_config.items() if v is not None}
    config_data.update(env_config)

    return Config(**config_data)


def create_sample_config(path: str = "ai-changelog.json") -> None:
    """Create a sample configuration file.

    Args:
        path: Path where to create the sample config file
    """
    sample_config = {
        "provider": DEFAULT_PROVIDER,
        "openai_api_key": "your-openai-api-key-here",
        "xai_api_key": "your-xai-api-key-here",
        "openai_model": "gpt-4o-mini",
        "xai_model": "grok-3",
        "changelog_file": "CHANGELOG.md",
    }

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)
