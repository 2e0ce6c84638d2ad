from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import BillCreate, BillResponse, BillUpdate, MessageResponse
from gymhub.services.account_service import resolve_billable_member
from gymhub.services.resources import bill_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[BillResponse])
async def list_bills(db: AsyncSession = Depends(get_db)):
    """All bills with their member summary"""
    return await bill_service.list(db)


@router.post("", response_model=BillResponse, status_code=status.HTTP_201_CREATED)
async def create_bill(bill_data: BillCreate, db: AsyncSession = Depends(get_db)):
    member = await resolve_billable_member(db, bill_data.member_id)
    data = bill_data.model_dump(exclude={"member_id"})
    data["member"] = member
    return await bill_service.create(db, data)


@router.get("/{bill_id}", response_model=BillResponse)
async def get_bill(bill_id: str, db: AsyncSession = Depends(get_db)):
    return await bill_service.get(db, bill_id)


@router.put("/{bill_id}", response_model=BillResponse)
async def update_bill(bill_id: str, update_data: BillUpdate, db: AsyncSession = Depends(get_db)):
    bill = await bill_service.get(db, bill_id)

    changes = update_data.model_dump(exclude_unset=True)
    member_id = changes.pop("member_id", None)
    if member_id is not None:
        changes["member"] = await resolve_billable_member(db, member_id)

    return await bill_service.update(db, bill, changes)


@router.delete("/{bill_id}", response_model=MessageResponse)
async def delete_bill(bill_id: str, db: AsyncSession = Depends(get_db)):
    bill = await bill_service.get(db, bill_id)
    await bill_service.delete(db, bill)
    return MessageResponse(message="Bill removed")
