"""HTTP handler for newsletter subscriptions.

Order of checks: preflight, method, body, email, configuration, then the
provider call. Nothing is sent upstream until every local check passes.
"""

import json
import logging

from fastapi import status

from wc26_proxy.dto import ErrorResponse, HandlerRequest, HandlerResponse, SubscribeResponse
from wc26_proxy.errors import ConfigurationError, MethodNotAllowedError, UpstreamError, ValidationError
from wc26_proxy.services import SubscriptionService

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


class SubscriptionHandler:
    """Accepts POST (and OPTIONS preflight) with ``{"email": ...}``.

    Provider errors are reduced to their status code and message field;
    ``detail`` is only added for 500 responses.

    Example:
        ```python
        handler = SubscriptionHandler(subscription_service=service)
        response = await handler.handle(
            HandlerRequest(method="POST", body='{"email": "fan@example.com"}')
        )
        ```
    """

    def __init__(
        self,
        subscription_service: SubscriptionService,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            subscription_service: Subscription business logic (required).
            logger: Logger for failures.
        """
        self._service = subscription_service
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, request: HandlerRequest) -> HandlerResponse:
        """Handle a subscription request.

        Returns:
            200 ``{"success": true}``, or an error response (400/405/500 or
            the provider's status code)
        """
        if request.method == "OPTIONS":
            return HandlerResponse(status_code=status.HTTP_200_OK, headers=dict(CORS_HEADERS), body="")

        try:
            email = self._parse_email(request)
            await self._service.subscribe(email)
        except MethodNotAllowedError:
            return self._error(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")
        except ValidationError as e:
            return self._error(status.HTTP_400_BAD_REQUEST, str(e))
        except ConfigurationError as e:
            self._logger.error("subscribe configuration error: %s", e)
            return self._error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server configuration error")
        except UpstreamError as e:
            if e.is_network_error:
                self._logger.error("subscribe function error: %s", e)
                return self._error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error", detail=str(e))
            self._logger.error("Beehiiv API error: %s", e)
            return self._error(e.status_code, e.provider_message or "Subscription failed")
        except Exception as e:
            self._logger.exception("Unexpected subscribe handler error")
            return self._error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error", detail=str(e))

        return HandlerResponse.from_content(status.HTTP_200_OK, CORS_HEADERS, SubscribeResponse())

    @staticmethod
    def _parse_email(request: HandlerRequest) -> object:
        """Return the raw ``email`` field of a POST body.

        A body that is valid JSON but not an object (``null``, ``[]``,
        ``"x"``) is rejected as "Invalid request body" rather than
        "Invalid email address".

        Raises:
            MethodNotAllowedError: If the method is not POST
            ValidationError: If the body is not a JSON object
        """
        if request.method != "POST":
            raise MethodNotAllowedError(request.method)

        try:
            data = json.loads(request.body)
        except (TypeError, ValueError) as e:
            raise ValidationError("Invalid request body") from e

        if not isinstance(data, dict):
            raise ValidationError("Invalid request body")

        return data.get("email")

    @staticmethod
    def _error(status_code: int, error: str, detail: str | None = None) -> HandlerResponse:
        return HandlerResponse.from_content(status_code, CORS_HEADERS, ErrorResponse(error=error, detail=detail))

    @property
    def is_configured(self) -> bool:
        """True when provider credentials are present."""
        return self._service.is_configured
