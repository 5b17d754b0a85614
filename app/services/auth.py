"""Auth service: registration, login, and access-token verify/refresh.

Transport-agnostic: failures are raised as AuthError subclasses and the
routing layer decides the HTTP status. Token checks are purely
cryptographic and time-based; they never consult the users table, so a
token stays valid until it expires even if the account is later
deactivated or deleted.
"""

import logging
from dataclasses import dataclass

import jwt
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from app.models import ACTIVE_STATUS, User
from app.schemas.auth import PublicUser, TokenClaims
from app.services import users as store

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for auth failures the caller can act on."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateCredentialError(AuthError):
    """A user with this email already exists."""


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password (indistinguishable to the caller)."""


class AccountInactiveError(AuthError):
    """Credentials belong to an account whose status is not 'Active'."""


class MissingTokenError(AuthError):
    """No bearer token was presented."""


class InvalidOrExpiredTokenError(AuthError):
    """Bad signature, malformed claims, or expiry has passed."""


@dataclass
class LoginResult:
    token: str
    user: PublicUser


def register_user(
    db: Session,
    *,
    name: str | None,
    email: str,
    password: str,
    role: str | None,
) -> User:
    """
    Create an Active user with a bcrypt-hashed password.

    Raises DuplicateCredentialError if the email is taken.
    """
    if store.find_by_email(db, email) is not None:
        logger.info("Registration rejected: email already registered")
        raise DuplicateCredentialError("User already exists")
    user = store.insert_user(
        db,
        name=name,
        email=email,
        role=role,
        status=ACTIVE_STATUS,
        password_hash=hash_password(password),
    )
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def login_user(db: Session, email: str, password: str) -> LoginResult:
    """
    Authenticate by email and password and issue an access token.

    Order: lookup, status gate, password check, last_login update, token.
    The last_login update is best-effort; a failure there is logged and the
    login still succeeds.
    """
    user = store.find_by_email(db, email)
    if user is None:
        raise InvalidCredentialsError("Invalid credentials")
    if user.status != ACTIVE_STATUS:
        logger.warning("Login rejected for inactive user id=%s", user.id)
        raise AccountInactiveError("User account is inactive")
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("Invalid credentials")

    public = PublicUser.model_validate(user)
    claims = {"id": public.id, "email": public.email, "role": public.role}
    try:
        store.update_last_login(db, public.id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Could not update last_login for user id=%s: %s", public.id, e)

    token = create_access_token(claims)
    logger.info("Login succeeded for user id=%s", claims["id"])
    return LoginResult(token=token, user=public)


def verify_token(token: str | None) -> TokenClaims:
    """Return the decoded claims of a valid token."""
    if not token:
        raise MissingTokenError("Not authenticated")
    try:
        payload = decode_access_token(token)
        return TokenClaims.model_validate(payload)
    except (jwt.PyJWTError, ValidationError):
        raise InvalidOrExpiredTokenError("Invalid or expired token")


def refresh_token(claims: TokenClaims) -> str:
    """Re-sign the same id/email/role with a fresh expiry. No store access."""
    return create_access_token(claims.model_dump(include={"id", "email", "role"}))
