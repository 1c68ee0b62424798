"""Account routes: owners manage their own account, admins manage all of them."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotelbook.api.v1.auth import require_admin, require_self_or_admin
from hotelbook.core.database import get_db
from hotelbook.schemas.account import AccountRead, AccountUpdate
from hotelbook.schemas.auth import CurrentUser
from hotelbook.schemas.common import MessageResponse
from hotelbook.services import accounts as account_service

router = APIRouter()


@router.get("", response_model=list[AccountRead])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[AccountRead]:
    """List all accounts (admin only)."""
    return [AccountRead.model_validate(a) for a in account_service.list_accounts(db)]


@router.get("/{account_id}", response_model=AccountRead)
def get_user(
    account_id: int,
    _user: Annotated[CurrentUser, Depends(require_self_or_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountRead:
    return AccountRead.model_validate(account_service.get_account(db, account_id))


@router.put("/{account_id}", response_model=AccountRead)
def update_user(
    account_id: int,
    body: AccountUpdate,
    current_user: Annotated[CurrentUser, Depends(require_self_or_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AccountRead:
    """
    Change profile fields of an account. Only the fields present in the body
    are touched; is_admin may only be changed by an admin.
    """
    account = account_service.update_account(db, account_id, body, actor=current_user)
    return AccountRead.model_validate(account)


@router.delete("/{account_id}", response_model=MessageResponse)
def delete_user(
    account_id: int,
    _user: Annotated[CurrentUser, Depends(require_self_or_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    account_service.delete_account(db, account_id)
    return MessageResponse(message="User has been deleted.")
