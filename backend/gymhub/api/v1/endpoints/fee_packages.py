from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.models import Account
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import (
    FeePackageCreate,
    FeePackageResponse,
    FeePackageUpdate,
    MessageResponse,
)
from gymhub.services.resources import fee_package_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[FeePackageResponse])
async def list_fee_packages(db: AsyncSession = Depends(get_db)):
    return await fee_package_service.list(db)


@router.post("", response_model=FeePackageResponse, status_code=status.HTTP_201_CREATED)
async def create_fee_package(package_data: FeePackageCreate, db: AsyncSession = Depends(get_db)):
    return await fee_package_service.create(db, package_data.model_dump())


@router.get("/{package_id}", response_model=FeePackageResponse)
async def get_fee_package(package_id: str, db: AsyncSession = Depends(get_db)):
    return await fee_package_service.get(db, package_id)


@router.put("/{package_id}", response_model=FeePackageResponse)
async def update_fee_package(
    package_id: str,
    update_data: FeePackageUpdate,
    db: AsyncSession = Depends(get_db)
):
    package = await fee_package_service.get(db, package_id)
    return await fee_package_service.update(db, package, update_data.model_dump(exclude_unset=True))


@router.delete("/{package_id}", response_model=MessageResponse)
async def delete_fee_package(package_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a package. Accounts on it lose the reference but keep their
    membership dates.
    """
    package = await fee_package_service.get(db, package_id)

    result = await db.execute(select(Account).where(Account.current_membership_id == package.id))
    for account in result.scalars().unique():
        account.current_membership = None

    await fee_package_service.delete(db, package)
    return MessageResponse(message="Fee package removed")
