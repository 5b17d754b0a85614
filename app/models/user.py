"""ORM model for application users (credentials, role and status gate)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

# Only this status value permits login.
ACTIVE_STATUS = "Active"


class User(Base):
    """
    User account for registration, login and the users CRUD endpoints.

    password_hash holds a bcrypt hash and is NULL for rows created through
    POST /users. role is free-form (e.g. 'admin', 'user').
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=True)
    role = Column(String(64), nullable=True)
    status = Column(String(32), nullable=False, default=ACTIVE_STATUS, server_default=ACTIVE_STATUS)
    last_login = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
