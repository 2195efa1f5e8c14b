"""Login endpoint and the bearer-token auth dependency (get_current_user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import InvalidTokenError, create_access_token, verify_access_token
from app.core.storage import get_credential_store
from app.schemas.auth import CurrentUser, LoginRequest, LoginResponse, PublicUser
from app.services.credentials import CredentialStore

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("", response_model=LoginResponse)
def login(
    credential_store: Annotated[CredentialStore, Depends(get_credential_store)],
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT and the public user view.
    Include the token in the Authorization header as: Bearer <token>
    """
    if body is None:
        body = LoginRequest()
    if not body.username or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password required",
        )

    user = credential_store.authenticate(body.username, body.password)
    if user is None:
        logger.info("Login failed", extra={"username": body.username[:255]})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    identity = CurrentUser(id=user.id, username=user.username, role=user.role)
    token = create_access_token(identity)
    logger.info("Login succeeded", extra={"username": user.username, "role": user.role})
    return LoginResponse(token=token, user=PublicUser.model_validate(user))


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """
    Dependency: require a valid Bearer JWT and return the identity it carries.

    Raises 401 when the header or token is missing, 403 when the token is invalid or expired.
    No role checks: any authenticated identity may use any item operation.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verify_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token", extra={"reason": type(e.cause).__name__})
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message,
        ) from e
