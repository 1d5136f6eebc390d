"""Pydantic request/response schemas."""

from kedjora.schemas.auth import (
    AuthenticatedIdentity,
    LoginRequest,
    LoginResponse,
    SessionResponse,
    SessionUser,
)
from kedjora.schemas.health import HealthResponse

__all__ = [
    "AuthenticatedIdentity",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "SessionResponse",
    "SessionUser",
]
