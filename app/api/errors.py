"""Translate service and store failures into HTTP errors. The only place statuses are chosen."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.services.auth import (
    AccountInactiveError,
    AuthError,
    DuplicateCredentialError,
    InvalidCredentialsError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

# Anything unlisted (InvalidOrExpiredTokenError) is a 403.
AUTH_ERROR_STATUS: dict[type[AuthError], int] = {
    DuplicateCredentialError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_400_BAD_REQUEST,
    AccountInactiveError: status.HTTP_403_FORBIDDEN,
    MissingTokenError: status.HTTP_401_UNAUTHORIZED,
}


def auth_error_to_http(err: AuthError) -> HTTPException:
    """Map an auth service error to its HTTP status."""
    code = AUTH_ERROR_STATUS.get(type(err), status.HTTP_403_FORBIDDEN)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(err, MissingTokenError) else None
    return HTTPException(status_code=code, detail=err.message, headers=headers)


def driver_message(err: SQLAlchemyError) -> str:
    """The DBAPI error text alone, without the SQL statement or bound parameters."""
    orig = getattr(err, "orig", None)
    return str(orig) if orig is not None else str(err)


def store_failure(db: Session, err: SQLAlchemyError) -> HTTPException:
    """Roll back and turn a persistence error into a 500 carrying the driver message."""
    db.rollback()
    message = driver_message(err)
    logger.error("Store failure: %s", message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )
