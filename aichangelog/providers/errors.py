"""Error taxonomy shared by all changelog providers."""

from typing import Optional


class ProviderError(RuntimeError):
    """Base class for failures raised by a changelog provider.

    The message always starts with ``"<provider> API error: "`` so callers can
    tell which backend failed without inspecting the exception type.
    """

    def __init__(self, provider: str, detail: str):
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider} API error: {detail}")


class AuthenticationError(ProviderError):
    """Missing or rejected credential."""


class NetworkError(ProviderError):
    """Transport failure: connection refused, timeout, DNS."""


class UpstreamError(ProviderError):
    """Backend answered with a non-success status or a malformed envelope."""

    def __init__(self, provider: str, detail: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(provider, detail)


class EmptyResponseError(ProviderError):
    """Backend answered successfully but produced no usable text."""

    def __init__(self, provider: str, detail: str = "No changelog content generated"):
        super().__init__(provider, detail)
