"""Account reads and owner/admin mutations."""

import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hotelbook.core.errors import AuthorizationError, ConflictError, NotFoundError
from hotelbook.core.security import hash_password
from hotelbook.models import Account
from hotelbook.schemas.account import AccountUpdate
from hotelbook.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


def ensure_unique_identity(
    db: Session,
    username: str | None,
    email: str | None,
    exclude_id: int | None = None,
) -> None:
    """Raise ConflictError if another account already uses the username or email."""
    clauses = []
    if username is not None:
        clauses.append(Account.username == username)
    if email is not None:
        clauses.append(Account.email == email)
    if not clauses:
        return
    query = db.query(Account).filter(or_(*clauses))
    if exclude_id is not None:
        query = query.filter(Account.id != exclude_id)
    existing = query.first()
    if existing is None:
        return
    if username is not None and existing.username == username:
        raise ConflictError(f"Username '{username}' is already taken.")
    raise ConflictError(f"Email '{email}' is already registered.")


def commit_account(db: Session) -> None:
    """Commit, turning a unique-index race into ConflictError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username or email already exists.") from e


def get_account(db: Session, account_id: int) -> Account:
    account = db.get(Account, account_id)
    if account is None:
        raise NotFoundError("User not found!")
    return account


def list_accounts(db: Session) -> list[Account]:
    return db.query(Account).order_by(Account.id).all()


def update_account(
    db: Session,
    account_id: int,
    patch: AccountUpdate,
    actor: CurrentUser,
) -> Account:
    """
    Apply the fields set on ``patch`` to the account and return it.

    Only admins may change is_admin. A changed username or email is checked
    for uniqueness against every other account; a new password is re-hashed.
    """
    account = get_account(db, account_id)
    changes = patch.model_dump(exclude_unset=True)

    if "is_admin" in changes and not actor.is_admin:
        raise AuthorizationError("Only admins can change admin rights.")

    new_username = changes.get("username")
    new_email = changes.get("email")
    ensure_unique_identity(
        db,
        new_username if new_username != account.username else None,
        new_email if new_email != account.email else None,
        exclude_id=account.id,
    )

    password = changes.pop("password", None)
    if password is not None:
        account.password_hash = hash_password(password)
    for field, value in changes.items():
        setattr(account, field, value)

    commit_account(db)
    db.refresh(account)
    logger.info(
        "Account updated",
        extra={
            "account_id": account.id,
            "actor_id": actor.id,
            "fields": sorted(patch.model_fields_set),
        },
    )
    return account


def delete_account(db: Session, account_id: int) -> None:
    account = get_account(db, account_id)
    db.delete(account)
    db.commit()
    logger.info("Account deleted", extra={"account_id": account_id})
