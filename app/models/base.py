"""SQLAlchemy declarative Base shared by the ORM models and create_all."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
