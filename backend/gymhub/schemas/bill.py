from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date as Date, datetime

from gymhub.models.bill import BillStatus
from gymhub.schemas.member import MemberSummary


class BillCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    member_id: str = Field(..., alias="memberId", min_length=1)
    amount: float = Field(..., ge=0)
    date: Date
    status: BillStatus = BillStatus.PENDING


class BillUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    member_id: Optional[str] = Field(None, alias="memberId", min_length=1)
    amount: Optional[float] = Field(None, ge=0)
    date: Optional[Date] = None
    status: Optional[BillStatus] = None


class BillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    member_id: str
    member: Optional[MemberSummary] = None
    amount: float
    date: Date
    status: BillStatus
    created_at: datetime
    updated_at: datetime
