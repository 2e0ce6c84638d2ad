from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import (
    MessageResponse,
    SupplementCreate,
    SupplementResponse,
    SupplementUpdate,
)
from gymhub.services.resources import supplement_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[SupplementResponse])
async def list_supplements(db: AsyncSession = Depends(get_db)):
    return await supplement_service.list(db)


@router.post("", response_model=SupplementResponse, status_code=status.HTTP_201_CREATED)
async def create_supplement(supplement_data: SupplementCreate, db: AsyncSession = Depends(get_db)):
    return await supplement_service.create(db, supplement_data.model_dump())


@router.get("/{supplement_id}", response_model=SupplementResponse)
async def get_supplement(supplement_id: str, db: AsyncSession = Depends(get_db)):
    return await supplement_service.get(db, supplement_id)


@router.put("/{supplement_id}", response_model=SupplementResponse)
async def update_supplement(
    supplement_id: str,
    update_data: SupplementUpdate,
    db: AsyncSession = Depends(get_db)
):
    supplement = await supplement_service.get(db, supplement_id)
    return await supplement_service.update(db, supplement, update_data.model_dump(exclude_unset=True))


@router.delete("/{supplement_id}", response_model=MessageResponse)
async def delete_supplement(supplement_id: str, db: AsyncSession = Depends(get_db)):
    supplement = await supplement_service.get(db, supplement_id)
    await supplement_service.delete(db, supplement)
    return MessageResponse(message="Supplement removed")
