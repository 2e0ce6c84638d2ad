from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from gymhub.schemas.common import strip_required
from gymhub.schemas.member import MemberSummary


class NotificationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    member_id: str = Field(..., alias="memberId", min_length=1)
    message: str = Field(..., min_length=1)
    type: str = Field("Other", max_length=100)

    @field_validator("message", "type")
    @classmethod
    def clean_text(cls, value: str) -> str:
        return strip_required(value)


class NotificationUpdate(BaseModel):
    message: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, max_length=100)
    read: Optional[bool] = None

    @field_validator("message", "type")
    @classmethod
    def clean_text(cls, value: Optional[str]) -> Optional[str]:
        return strip_required(value)


class NotificationReadUpdate(BaseModel):
    """Body accepted from the owning account: only the read flag"""
    read: Optional[bool] = None


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    member_id: str
    member: Optional[MemberSummary] = None
    message: str
    type: str
    read: bool
    created_at: datetime
    updated_at: datetime
