"""
Member management (administrators) and self-access routes (any account).

The /my/* routes are declared before /{member_id} so they are matched first.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.core.exceptions import AuthorizationError, ValidationError
from gymhub.core.logging_config import logger
from gymhub.models import Account, Bill, Notification
from gymhub.modules.auth.dependencies import get_current_admin, get_current_user
from gymhub.schemas import (
    AccountResponse,
    AssignPackageRequest,
    AssignPackageResponse,
    BillResponse,
    MemberCreate,
    MemberUpdate,
    MessageResponse,
    NotificationReadUpdate,
    NotificationResponse,
)
from gymhub.services import account_service, membership_service
from gymhub.services.resources import bill_service, notification_service

router = APIRouter()


# ==================== Self access ====================

@router.get("/my/bills", response_model=List[BillResponse])
async def my_bills(
    db: AsyncSession = Depends(get_db),
    current_user: Account = Depends(get_current_user)
):
    """Bills owned by the caller, newest first"""
    return await bill_service.list(
        db, Bill.member_id == current_user.id, order_by=Bill.date.desc()
    )


@router.get("/my/notifications", response_model=List[NotificationResponse])
async def my_notifications(
    db: AsyncSession = Depends(get_db),
    current_user: Account = Depends(get_current_user)
):
    return await notification_service.list(db, Notification.member_id == current_user.id)


@router.put("/my/notifications/{notification_id}", response_model=NotificationResponse)
async def mark_my_notification(
    notification_id: str,
    update_data: NotificationReadUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: Account = Depends(get_current_user)
):
    """Flip the read flag on one of the caller's notifications"""
    if update_data.read is None:
        raise ValidationError("Invalid update data provided", field="read")

    notification = await notification_service.get(db, notification_id)
    if notification.member_id != current_user.id:
        logger.warning(
            f"[Access] {current_user.username} tried to update notification {notification_id}"
        )
        raise AuthorizationError("Not authorized to update this notification")

    notification.read = update_data.read
    await db.commit()
    return notification


# ==================== Administration ====================

@router.get("", response_model=List[AccountResponse])
async def list_members(
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    """Every account except the calling administrator"""
    return await account_service.account_crud.list(db, Account.id != current_admin.id)


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_member(
    member_data: MemberCreate,
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    account = await account_service.create_account(
        db, member_data.username, member_data.password, member_data.role
    )
    logger.log_admin_action("create", "Member", str(account.id), role=account.role.value)
    return account


@router.get("/{member_id}", response_model=AccountResponse)
async def get_member(
    member_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    return await account_service.get_account(db, member_id)


@router.put("/{member_id}", response_model=AccountResponse)
async def update_member(
    member_id: str,
    update_data: MemberUpdate,
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    """Change username, role or password; omitted fields are left alone"""
    account = await account_service.get_account(db, member_id)
    return await account_service.update_account(
        db,
        account,
        username=update_data.username,
        role=update_data.role,
        password=update_data.password,
    )


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_member(
    member_id: str,
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    account = await account_service.get_account(db, member_id)
    await account_service.delete_account(db, account, actor=current_admin)
    return MessageResponse(message="User removed")


@router.put("/{member_id}/assign-package", response_model=AssignPackageResponse)
async def assign_package(
    member_id: str,
    assignment: AssignPackageRequest,
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    """Put a member on a fee package and compute the membership window"""
    account = await membership_service.assign_package(
        db, member_id, assignment.package_id, assignment.start_date
    )
    response = AccountResponse.model_validate(account)
    return AssignPackageResponse(
        **response.model_dump(),
        message=f"Membership assigned successfully to {account.username}",
    )
