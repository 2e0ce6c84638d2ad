from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from gymhub.core.database import get_db
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import (
    DietDetailCreate,
    DietDetailResponse,
    DietDetailUpdate,
    MessageResponse,
)
from gymhub.services.resources import diet_detail_service

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=List[DietDetailResponse])
async def list_diet_details(db: AsyncSession = Depends(get_db)):
    return await diet_detail_service.list(db)


@router.post("", response_model=DietDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_diet_detail(detail_data: DietDetailCreate, db: AsyncSession = Depends(get_db)):
    return await diet_detail_service.create(db, detail_data.model_dump())


@router.get("/{detail_id}", response_model=DietDetailResponse)
async def get_diet_detail(detail_id: str, db: AsyncSession = Depends(get_db)):
    return await diet_detail_service.get(db, detail_id)


@router.put("/{detail_id}", response_model=DietDetailResponse)
async def update_diet_detail(
    detail_id: str,
    update_data: DietDetailUpdate,
    db: AsyncSession = Depends(get_db)
):
    detail = await diet_detail_service.get(db, detail_id)
    return await diet_detail_service.update(db, detail, update_data.model_dump(exclude_unset=True))


@router.delete("/{detail_id}", response_model=MessageResponse)
async def delete_diet_detail(detail_id: str, db: AsyncSession = Depends(get_db)):
    detail = await diet_detail_service.get(db, detail_id)
    await diet_detail_service.delete(db, detail)
    return MessageResponse(message="Diet detail removed")
