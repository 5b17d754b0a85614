"""Users CRUD endpoints: list, filter, get, create, replace, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.errors import store_failure
from app.core.database import get_db
from app.schemas.user import UserRecord, UserWrite
from app.services import users as store

router = APIRouter()

USER_NOT_FOUND = "User not found"


@router.get("", response_model=list[UserRecord])
def list_users(
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRecord]:
    """Return every user row, ordered by id."""
    try:
        users = store.list_users(db)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e
    return [UserRecord.model_validate(u) for u in users]


# Declared before /{user_id} so "filter" is never parsed as an id.
@router.get("/filter", response_model=list[UserRecord])
def filter_users(
    db: Annotated[Session, Depends(get_db)],
    role: str | None = None,
    status_: Annotated[str | None, Query(alias="status")] = None,
) -> list[UserRecord]:
    """Return users matching role and/or status; omitted filters match everything."""
    try:
        users = store.list_users(db, role=role, status=status_)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e
    return [UserRecord.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserRecord)
def get_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UserRecord:
    try:
        user = store.find_by_id(db, user_id)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserRecord.model_validate(user)


@router.post("", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserWrite,
    db: Annotated[Session, Depends(get_db)],
) -> UserRecord:
    """
    Create a user without a password (it cannot log in until one is set elsewhere).
    No duplicate pre-check: a taken email surfaces as a store failure.
    """
    try:
        user = store.insert_user(
            db,
            name=body.name,
            email=body.email,
            role=body.role,
            status=body.status,
        )
        return UserRecord.model_validate(user)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e


@router.put("/{user_id}", response_model=UserRecord)
def replace_user(
    user_id: int,
    body: UserWrite,
    db: Annotated[Session, Depends(get_db)],
) -> UserRecord:
    """Replace name, email, role and status; refreshes updated_at."""
    try:
        user = store.update_user(
            db,
            user_id,
            name=body.name,
            email=body.email,
            role=body.role,
            status=body.status,
        )
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
        return UserRecord.model_validate(user)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    try:
        deleted_count = store.delete_user(db, user_id)
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e
    if deleted_count == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
