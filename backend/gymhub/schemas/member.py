from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime

from gymhub.models.user import AccountRole
from gymhub.schemas.common import strip_required


class FeePackageSummary(BaseModel):
    id: str
    name: str
    duration: str
    cost: float

    class Config:
        from_attributes = True


class MemberSummary(BaseModel):
    """Owner details embedded in bills and notifications"""
    id: str
    username: str
    role: AccountRole

    class Config:
        from_attributes = True


class AccountResponse(BaseModel):
    """Account as exposed over the API (never includes the password hash)"""
    id: str
    username: str
    role: AccountRole
    current_membership: Optional[FeePackageSummary] = None
    membership_start_date: Optional[date] = None
    membership_end_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MemberCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=6, max_length=128)
    role: AccountRole = AccountRole.MEMBER

    @field_validator("username")
    @classmethod
    def clean_username(cls, value: str) -> str:
        return strip_required(value)


class MemberUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[AccountRole] = None
    password: Optional[str] = Field(None, min_length=6, max_length=128)

    @field_validator("username")
    @classmethod
    def clean_username(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value) if value is not None else value


class AssignPackageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    package_id: str = Field(..., alias="packageId", min_length=1)
    # Omitted or null means "today"; anything else must parse as a date
    start_date: Optional[str] = Field(None, alias="startDate")


class AssignPackageResponse(AccountResponse):
    message: str
