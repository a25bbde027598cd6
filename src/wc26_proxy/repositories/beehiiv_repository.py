"""Beehiiv repository.

Creates newsletter subscriptions through the Beehiiv v2 API.
"""

from wc26_proxy.config import settings
from wc26_proxy.errors import ConfigurationError, UpstreamError
from wc26_proxy.protocols import HttpFetcher


class BeehiivRepository:
    """Data access for the Beehiiv subscriptions endpoint.

    Credentials are optional at construction time so a misconfigured
    deployment still starts; ``create_subscription`` refuses to run
    without them.

    Example:
        ```python
        repo = BeehiivRepository.create(fetcher=HttpxFetcher.create())
        await repo.create_subscription("fan@example.com", utm_source="wc26-pwa", utm_medium="gate")
        ```
    """

    def __init__(
        self,
        fetcher: HttpFetcher,
        api_key: str | None,
        publication_id: str | None,
        base_url: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            fetcher: Outbound HTTP transport (required).
            api_key: Bearer token for the Beehiiv API.
            publication_id: Beehiiv publication id.
            base_url: API base URL. Defaults to settings.
        """
        self._fetcher = fetcher
        self._api_key = api_key
        self._publication_id = publication_id
        self._base_url = (base_url or settings.beehiiv_base_url).rstrip("/")

    @classmethod
    def create(cls, fetcher: HttpFetcher) -> "BeehiivRepository":
        """Factory method to create BeehiivRepository from settings."""
        return cls(
            fetcher=fetcher,
            api_key=settings.beehiiv_api_key,
            publication_id=settings.beehiiv_pub_id,
        )

    @property
    def is_configured(self) -> bool:
        """True when both the API key and the publication id are set."""
        return bool(self._api_key) and bool(self._publication_id)

    async def create_subscription(self, email: str, utm_source: str, utm_medium: str) -> None:
        """Subscribe an email address to the publication.

        Existing subscribers are not reactivated and new ones get the
        welcome email.

        Raises:
            ConfigurationError: If credentials are missing (no request is sent)
            UpstreamError: On network failure or a non-2xx provider response
        """
        if not self.is_configured:
            raise ConfigurationError("Beehiiv API key or publication id is not configured")

        response = await self._fetcher.fetch(
            "POST",
            f"{self._base_url}/v2/publications/{self._publication_id}/subscriptions",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._api_key}",
            },
            json={
                "email": email,
                "reactivate_existing": False,
                "send_welcome_email": True,
                "utm_source": utm_source,
                "utm_medium": utm_medium,
            },
        )

        if not response.ok:
            message = None
            if isinstance(response.body, dict) and isinstance(response.body.get("message"), str):
                message = response.body["message"] or None
            raise UpstreamError(
                f"Beehiiv API error {response.status_code}: {response.body}",
                status_code=response.status_code,
                provider_message=message,
            )
