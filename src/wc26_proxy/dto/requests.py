"""Request DTOs for handlers."""

from pydantic import BaseModel, Field


class HandlerRequest(BaseModel):
    """Framework-neutral inbound request.

    Built by the FastAPI routes and the serverless entrypoints, consumed
    by the handlers.
    """

    method: str = Field("GET", description="HTTP method, upper case")
    body: str | None = Field(None, description="Raw request body, if any")

    @classmethod
    def from_event(cls, event: dict) -> "HandlerRequest":
        """Build from a Netlify/Lambda-style event (``httpMethod``, ``body``)."""
        return cls(
            method=(event.get("httpMethod") or "GET").upper(),
            body=event.get("body"),
        )
