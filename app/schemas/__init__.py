"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    ProtectedResponse,
    PublicUser,
    RefreshResponse,
    RegisterRequest,
    TokenClaims,
)
from app.schemas.health import HealthResponse
from app.schemas.user import UserRecord, UserWrite

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "ProtectedResponse",
    "PublicUser",
    "RefreshResponse",
    "RegisterRequest",
    "TokenClaims",
    "UserRecord",
    "UserWrite",
]
