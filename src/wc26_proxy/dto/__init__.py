"""Data Transfer Objects for handler contracts.

These Pydantic models define the request/response shapes that handlers
exchange with the hosting layer (FastAPI routes or serverless events).

Internal domain logic should use entities from the entities package.
"""

from .requests import HandlerRequest
from .responses import ErrorResponse, HandlerResponse, SubscribeResponse

__all__ = [
    "HandlerRequest",
    "HandlerResponse",
    "ErrorResponse",
    "SubscribeResponse",
]
