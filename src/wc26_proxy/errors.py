"""Exceptions raised by services and repositories.

Handlers are the boundary: they catch these and turn them into
JSON responses with an explicit status code.
"""


class ProxyError(Exception):
    """Base class for all proxy errors."""


class ValidationError(ProxyError):
    """The inbound request body or one of its fields is invalid (400)."""


class MethodNotAllowedError(ProxyError):
    """The inbound HTTP method is not supported (405)."""


class ConfigurationError(ProxyError):
    """Server-side credentials are missing (500, operator-fixable)."""


class UpstreamError(ProxyError):
    """An upstream provider call failed.

    Attributes:
        status_code: Provider status code, or None for network-level failures
        provider_message: Message reported by the provider, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.provider_message = provider_message

    @property
    def is_network_error(self) -> bool:
        """True when the provider was never reached (no status code)."""
        return self.status_code is None
