"""Response DTOs for handlers."""

import json
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body. ``detail`` is only set on 500-class responses."""

    error: str = Field(..., description="Short user-visible error message")
    detail: str | None = Field(None, description="Diagnostic message for server errors")


class SubscribeResponse(BaseModel):
    """Body of a successful subscription."""

    success: bool = Field(True, description="Whether the subscription was accepted")


class HandlerResponse(BaseModel):
    """Framework-neutral response: status, headers and a serialized body."""

    status_code: int = Field(..., description="HTTP status code")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: str = Field("", description="Serialized JSON body (empty for preflight)")

    @classmethod
    def from_content(cls, status_code: int, headers: dict[str, str], content: Any) -> "HandlerResponse":
        """Build a response with a JSON body.

        Pydantic models are dumped without unset optional fields.
        """
        if isinstance(content, BaseModel):
            content = content.model_dump(exclude_none=True)
        return cls(status_code=status_code, headers=dict(headers), body=json.dumps(content))

    def to_event_result(self) -> dict[str, Any]:
        """Return the Netlify/Lambda-style result dict."""
        return {"statusCode": self.status_code, "headers": self.headers, "body": self.body}
