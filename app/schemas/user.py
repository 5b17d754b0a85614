"""Request/response schemas for the users CRUD endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserWrite(BaseModel):
    """Body for POST /users and PUT /users/{id} (full replace; no password)."""

    name: str | None = Field(default=None, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    role: str | None = Field(default=None, max_length=64)
    status: str = Field(default="Active", max_length=32, description="Only 'Active' permits login")


class UserRecord(BaseModel):
    """Stored user row as returned by the users endpoints. Never carries the password hash."""

    id: int
    name: str | None
    email: str
    role: str | None
    status: str
    last_login: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
