"""Registration, login, token refresh and the get_current_claims dependency."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.errors import auth_error_to_http, store_failure
from app.core.database import get_db
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    ProtectedResponse,
    PublicUser,
    RefreshResponse,
    RegisterRequest,
    TokenClaims,
)
from app.services.auth import (
    AuthError,
    login_user,
    refresh_token,
    register_user,
    verify_token,
)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT. 401 if missing, 403 if invalid or expired."""
    token = credentials.credentials if credentials is not None else None
    try:
        return verify_token(token)
    except AuthError as e:
        raise auth_error_to_http(e) from e


@router.post("/register", response_model=PublicUser, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> PublicUser:
    """Create an Active user with a hashed password. The password is never returned."""
    try:
        user = register_user(
            db,
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role,
        )
        return PublicUser.model_validate(user)
    except AuthError as e:
        raise auth_error_to_http(e) from e
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        result = login_user(db, body.email, body.password)
    except AuthError as e:
        raise auth_error_to_http(e) from e
    except SQLAlchemyError as e:
        raise store_failure(db, e) from e
    return LoginResponse(token=result.token, user=result.user)


@router.get("/protected", response_model=ProtectedResponse)
def protected(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> ProtectedResponse:
    """Example protected route; echoes the decoded token claims."""
    return ProtectedResponse(user=claims)


@router.post("/refresh-token", response_model=RefreshResponse)
def refresh(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
) -> RefreshResponse:
    """Re-issue the caller's token with the same claims and a fresh expiry."""
    return RefreshResponse(token=refresh_token(claims))
