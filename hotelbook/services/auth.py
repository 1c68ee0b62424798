"""Session issuer: registration and credential login."""

import logging

from sqlalchemy.orm import Session

from hotelbook.core.errors import AuthenticationError, NotFoundError
from hotelbook.core.security import create_access_token, hash_password, verify_password
from hotelbook.models import Account
from hotelbook.schemas.auth import LoginRequest, RegisterRequest
from hotelbook.services.accounts import commit_account, ensure_unique_identity

logger = logging.getLogger(__name__)


def register(db: Session, body: RegisterRequest) -> Account:
    """Create a non-admin account. Raises ConflictError if username or email is taken."""
    ensure_unique_identity(db, body.username, body.email)
    account = Account(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        phone=body.phone,
        country=body.country,
        city=body.city,
        img=body.img,
        is_admin=False,
    )
    db.add(account)
    commit_account(db)
    db.refresh(account)
    logger.info("Account registered", extra={"account_id": account.id})
    return account


def login(db: Session, body: LoginRequest) -> tuple[Account, str]:
    """
    Check credentials and mint a session token.

    Returns (account, token). Raises NotFoundError for an unknown username and
    AuthenticationError for a wrong password.
    """
    account = db.query(Account).filter(Account.username == body.username).first()
    if account is None:
        logger.info("Login rejected: unknown username")
        raise NotFoundError("User not found!")
    if not verify_password(body.password, account.password_hash):
        logger.info("Login rejected: wrong password", extra={"account_id": account.id})
        raise AuthenticationError("Wrong password or username!")
    token = create_access_token(sub=account.id, is_admin=account.is_admin)
    logger.info("Login succeeded", extra={"account_id": account.id})
    return account, token
