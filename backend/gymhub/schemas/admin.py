from pydantic import BaseModel
from typing import List
from datetime import datetime

from gymhub.schemas.member import AccountResponse


class DashboardStats(BaseModel):
    """Administrator dashboard counters"""
    total_members: int
    total_admins: int
    total_users: int
    pending_bills: int
    total_revenue: float  # sum of Paid bill amounts


class ExportReportResponse(BaseModel):
    message: str
    generated_at: datetime
    count: int
    data: List[AccountResponse]
