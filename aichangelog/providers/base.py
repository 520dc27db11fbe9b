"""Provider interface implemented by every LLM backend adapter."""

from abc import ABC, abstractmethod

from .errors import AuthenticationError, EmptyResponseError
from .models import ChangelogRequest


class ChangelogProvider(ABC):
    """Turn a ChangelogRequest into a single Markdown changelog section.

    The credential is stored as given. It is not checked until the first call
    to :meth:`generate_changelog`, which raises AuthenticationError when it is
    empty. Each call performs exactly one request against the backend.
    """

    #: Name used in error messages, e.g. ``"OpenAI API error: ..."``.
    display_name = "Provider"

    def __init__(self, api_key: str):
        self.api_key = api_key

    @abstractmethod
    def generate_changelog(self, request: ChangelogRequest) -> str:
        """Return a non-empty Markdown section for ``request``.

        Raises:
            ProviderError: one of AuthenticationError, NetworkError,
                UpstreamError or EmptyResponseError.
        """

    def _require_api_key(self) -> str:
        if not self.api_key or not self.api_key.strip():
            raise AuthenticationError(self.display_name, "API key is missing or empty")
        return self.api_key

    def _clean_output(self, text) -> str:
        if not isinstance(text, str) or not text.strip():
            raise EmptyResponseError(self.display_name)
        return text.strip()

    def __repr__(self):
        return f"{type(self).__name__}(api_key=<redacted>)"
