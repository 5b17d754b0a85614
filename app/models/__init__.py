"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.user import ACTIVE_STATUS, User

__all__ = ["ACTIVE_STATUS", "Base", "User"]
