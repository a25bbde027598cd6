"""Subscription service.

Validates an email address and forwards it to Beehiiv.
"""

import logging
import re

from wc26_proxy.config import settings
from wc26_proxy.errors import ValidationError
from wc26_proxy.repositories import BeehiivRepository

# local@domain.tld, no whitespace; not RFC 5322
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: object) -> bool:
    """Check that ``value`` is a string shaped like an email address."""
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


class SubscriptionService:
    """Newsletter subscription business logic.

    No retries: a failed subscription is reported back to the user,
    who can submit the form again.
    """

    def __init__(
        self,
        repository: BeehiivRepository,
        utm_source: str | None = None,
        utm_medium: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._utm_source = utm_source or settings.subscribe_utm_source
        self._utm_medium = utm_medium or settings.subscribe_utm_medium
        self._logger = logger or logging.getLogger(__name__)

    @property
    def is_configured(self) -> bool:
        """True when provider credentials are present."""
        return self._repository.is_configured

    async def subscribe(self, email: object) -> None:
        """Subscribe ``email`` to the newsletter.

        Raises:
            ValidationError: If the email address is missing or malformed
            ConfigurationError: If provider credentials are missing
            UpstreamError: If the provider rejects the request or is unreachable
        """
        if not is_valid_email(email):
            raise ValidationError("Invalid email address")

        await self._repository.create_subscription(
            email,
            utm_source=self._utm_source,
            utm_medium=self._utm_medium,
        )
        self._logger.info("Subscribed %s", _mask(email))


def _mask(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"
