"""Schemas for the administrator-owned catalogue: fee packages, supplements, diet details"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from gymhub.schemas.common import strip_required


# ==================== Fee Packages ====================

class FeePackageCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    duration: str = Field(..., min_length=1, max_length=50)
    cost: float = Field(0, ge=0)
    description: Optional[str] = None

    @field_validator("name", "duration")
    @classmethod
    def clean_text(cls, value: str) -> str:
        return strip_required(value)


class FeePackageUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    duration: Optional[str] = Field(None, min_length=1, max_length=50)
    cost: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None

    @field_validator("name", "duration")
    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value) if value is not None else value


class FeePackageResponse(BaseModel):
    id: str
    name: str
    duration: str
    cost: float
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ==================== Supplements ====================

class SupplementCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    price: float = Field(0, ge=0)
    stock: int = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        return strip_required(value)


class SupplementUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)

    @field_validator("name")
    @classmethod
    def clean_name(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value) if value is not None else value


class SupplementResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ==================== Diet Details ====================

class DietDetailCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)

    @field_validator("title", "content")
    @classmethod
    def clean_text(cls, value: str) -> str:
        return strip_required(value)


class DietDetailUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)

    @field_validator("title", "content")
    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value) if value is not None else value


class DietDetailResponse(BaseModel):
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
