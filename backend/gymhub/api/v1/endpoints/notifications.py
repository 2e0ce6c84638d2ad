from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import (
    MessageResponse,
    NotificationCreate,
    NotificationResponse,
    NotificationUpdate,
)
from gymhub.services.account_service import resolve_billable_member
from gymhub.services.resources import notification_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(db: AsyncSession = Depends(get_db)):
    return await notification_service.list(db)


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_data: NotificationCreate,
    db: AsyncSession = Depends(get_db)
):
    """Send a notification to a member or user account"""
    member = await resolve_billable_member(db, notification_data.member_id)
    data = notification_data.model_dump(exclude={"member_id"})
    data["member"] = member
    return await notification_service.create(db, data)


@router.get("/{notification_id}", response_model=NotificationResponse)
async def get_notification(notification_id: str, db: AsyncSession = Depends(get_db)):
    return await notification_service.get(db, notification_id)


@router.put("/{notification_id}", response_model=NotificationResponse)
async def update_notification(
    notification_id: str,
    update_data: NotificationUpdate,
    db: AsyncSession = Depends(get_db)
):
    notification = await notification_service.get(db, notification_id)
    return await notification_service.update(
        db, notification, update_data.model_dump(exclude_unset=True)
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(notification_id: str, db: AsyncSession = Depends(get_db)):
    notification = await notification_service.get(db, notification_id)
    await notification_service.delete(db, notification)
    return MessageResponse(message="Notification removed")
