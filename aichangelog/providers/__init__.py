"""Changelog providers and the registry used to pick one by name."""

from typing import Dict, Type

from .base import ChangelogProvider
from .breaking import DEFAULT_BREAKING_RULES, bang_marker, breaking_footer, is_breaking
from .errors import (
    AuthenticationError,
    EmptyResponseError,
    NetworkError,
    ProviderError,
    UpstreamError,
)
from .models import ChangelogRequest, Commit, CommitEntry
from .openai import OpenAIProvider
from .xai import XAIProvider


PROVIDERS: Dict[str, Type[ChangelogProvider]] = {
    "openai": OpenAIProvider,
    "xai": XAIProvider,
}


def get_provider(name: str, api_key: str, **options) -> ChangelogProvider:
    """Instantiate the provider registered under ``name``.

    Args:
        name: Provider name (case insensitive)
        api_key: Credential for the backend, validated on first use
        **options: Extra keyword arguments for the adapter (model, timeout, ...)

    Returns:
        Provider instance
    """
    key = (name or "").strip().lower()
    if key not in PROVIDERS:
        raise ValueError(f"Unknown provider: {name}. Available providers: {', '.join(PROVIDERS)}")
    return PROVIDERS[key](api_key, **options)


__all__ = [
    "PROVIDERS",
    "get_provider",
    "ChangelogProvider",
    "OpenAIProvider",
    "XAIProvider",
    "ChangelogRequest",
    "Commit",
    "CommitEntry",
    "ProviderError",
    "AuthenticationError",
    "NetworkError",
    "UpstreamError",
    "EmptyResponseError",
    "DEFAULT_BREAKING_RULES",
    "breaking_footer",
    "bang_marker",
    "is_breaking",
]
