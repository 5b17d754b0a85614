"""Credential store: single-statement queries over the users table.

All values reach the database as bound parameters. SQLAlchemy errors are not
caught here; callers map them to a store failure.
"""

from datetime import datetime

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from app.models import ACTIVE_STATUS, User


def find_by_email(db: Session, email: str) -> User | None:
    """Return the user with this email, or None."""
    return db.query(User).filter(User.email == email).first()


def find_by_id(db: Session, user_id: int) -> User | None:
    """Return the user with this id, or None."""
    return db.query(User).filter(User.id == user_id).first()


def insert_user(
    db: Session,
    *,
    name: str | None,
    email: str,
    role: str | None,
    status: str | None = ACTIVE_STATUS,
    password_hash: str | None = None,
) -> User:
    """Insert a user row and return it with store-assigned id and timestamps."""
    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        status=status or ACTIVE_STATUS,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_last_login(db: Session, user_id: int, when: datetime | None = None) -> None:
    """Set last_login to `when` (database time when omitted)."""
    db.query(User).filter(User.id == user_id).update(
        {User.last_login: when if when is not None else func.now()},
        synchronize_session=False,
    )
    db.commit()


def update_user(
    db: Session,
    user_id: int,
    *,
    name: str | None,
    email: str,
    role: str | None,
    status: str | None,
) -> User | None:
    """Replace name, email, role and status; return the updated row or None if missing."""
    user = db.execute(
        update(User)
        .where(User.id == user_id)
        .values(
            name=name,
            email=email,
            role=role,
            status=status or ACTIVE_STATUS,
            updated_at=func.now(),
        )
        .returning(User)
    ).scalar_one_or_none()
    db.commit()
    if user is not None:
        db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> int:
    """Physically delete a user; return the number of rows removed (0 or 1)."""
    deleted_count = (
        db.query(User)
        .filter(User.id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted_count


def list_users(
    db: Session,
    role: str | None = None,
    status: str | None = None,
) -> list[User]:
    """
    Return users ordered by id, optionally filtered by role and/or status.

    Empty strings count as "no filter", matching how query strings arrive.
    """
    query = db.query(User)
    if role:
        query = query.filter(User.role == role)
    if status:
        query = query.filter(User.status == status)
    return query.order_by(User.id).all()
