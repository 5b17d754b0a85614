"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Fields for self-registration. status is always 'Active' on creation."""

    name: str | None = Field(default=None, max_length=255, description="Display name")
    email: str = Field(..., min_length=1, max_length=255, description="Login email")
    password: str = Field(..., description="Plain-text password (hashed before storage); no complexity rules")
    role: str = Field(default="user", max_length=64, description="Free-form role, e.g. admin or user")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., description="Login email")
    password: str = Field(..., description="Password")


class PublicUser(BaseModel):
    """Public user projection (no password, status or timestamps)."""

    id: int
    name: str | None
    email: str
    role: str | None

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    """Signed access token plus the authenticated user."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: PublicUser


class RefreshResponse(BaseModel):
    """Re-signed access token with a fresh expiry."""

    token: str


class TokenClaims(BaseModel):
    """Decoded claim set of a verified access token."""

    id: int
    email: str
    role: str | None
    iat: int | None = None
    exp: int | None = None


class ProtectedResponse(BaseModel):
    """Response for GET /protected: echoes the caller's claims."""

    message: str = "Access granted"
    user: TokenClaims
