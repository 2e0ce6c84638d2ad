"""
Account operations shared by the auth, member-management and billing routes.
"""
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from gymhub.core.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    ValidationError,
)
from gymhub.core.logging_config import logger
from gymhub.core.types import is_valid_id
from gymhub.models import Account, AccountRole, Bill, Notification
from gymhub.services.crud_service import CRUDService

account_crud = CRUDService(
    Account, "Member", unique_field="username", conflict_message="User already exists"
)


async def get_account(db: AsyncSession, account_id: str) -> Account:
    account = await db.get(Account, account_id) if is_valid_id(account_id) else None
    if account is None:
        raise AccountNotFoundError(account_id)
    return account


async def get_by_username(db: AsyncSession, username: str) -> Optional[Account]:
    result = await db.execute(select(Account).where(Account.username == username))
    return result.scalar_one_or_none()


async def create_account(
    db: AsyncSession,
    username: str,
    password: str,
    role: AccountRole = AccountRole.USER
) -> Account:
    """Create an account; the password is hashed exactly once, here"""
    await account_crud.ensure_unique(db, username)

    account = Account(username=username, role=role)
    account.set_password(password)
    db.add(account)
    await account_crud._commit(db)
    return account


async def authenticate(db: AsyncSession, username: str, password: str) -> Account:
    """Username/password check; the same error for unknown user and wrong password"""
    account = await get_by_username(db, username)
    if account is None or not account.check_password(password):
        raise AuthenticationError("Invalid username or password")
    return account


async def update_account(
    db: AsyncSession,
    account: Account,
    username: Optional[str] = None,
    role: Optional[AccountRole] = None,
    password: Optional[str] = None,
) -> Account:
    if username is not None and username != account.username:
        await account_crud.ensure_unique(db, username, exclude_id=account.id)
        account.username = username
    if role is not None:
        account.role = role
    if password is not None:
        account.set_password(password)

    await account_crud._commit(db)
    logger.log_admin_action("update", "Member", str(account.id))
    return account


async def delete_account(db: AsyncSession, account: Account, actor: Account) -> None:
    """Delete an account together with its bills and notifications"""
    if account.id == actor.id:
        raise ValidationError("Cannot delete your own account via this route")

    account_id = account.id
    await db.execute(delete(Bill).where(Bill.member_id == account_id))
    await db.execute(delete(Notification).where(Notification.member_id == account_id))
    await db.delete(account)
    await db.commit()
    logger.log_admin_action("delete", "Member", str(account_id))


async def resolve_billable_member(db: AsyncSession, member_id: str) -> Account:
    """
    Bills and notifications may only point at an existing Member or User
    account, never at an administrator.
    """
    account = await db.get(Account, member_id) if is_valid_id(member_id) else None
    if account is None or account.role == AccountRole.ADMIN:
        raise ValidationError("Invalid or non-member user ID provided", field="memberId")
    return account


async def count_by_role(db: AsyncSession, role: AccountRole) -> int:
    return await db.scalar(select(func.count(Account.id)).where(Account.role == role)) or 0


__all__ = [
    "account_crud",
    "authenticate",
    "count_by_role",
    "create_account",
    "delete_account",
    "get_account",
    "get_by_username",
    "resolve_billable_member",
    "update_account",
]
