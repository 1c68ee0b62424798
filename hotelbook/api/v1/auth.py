"""Registration/login routes and auth dependencies (get_current_user, require_admin, require_self_or_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hotelbook.core.database import get_db
from hotelbook.core.errors import AuthorizationError
from hotelbook.core.security import identity_from_token, is_admin, is_self_or_admin
from hotelbook.schemas.account import AccountRead
from hotelbook.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from hotelbook.schemas.common import MessageResponse
from hotelbook.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/register", response_model=MessageResponse)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an account. Username and email must both be unused."""
    auth_service.register(db, body)
    return MessageResponse(message="User has been created.")


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns the account and a JWT.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    account, token = auth_service.login(db, body)
    return LoginResponse(
        account=AccountRead.model_validate(account),
        access_token=token,
        token_type="bearer",
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the identity it carries. 401 otherwise."""
    token = credentials.credentials if credentials is not None else None
    return identity_from_token(token)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require an admin token. Raises 403 for non-admin."""
    if not is_admin(current_user):
        logger.info("Admin access denied", extra={"account_id": current_user.id})
        raise AuthorizationError()
    return current_user


def require_self_or_admin(
    account_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: the token must belong to the {account_id} in the path, or to an admin."""
    if not is_self_or_admin(current_user, account_id):
        logger.info(
            "Account access denied",
            extra={"account_id": current_user.id, "target_account_id": account_id},
        )
        raise AuthorizationError()
    return current_user
