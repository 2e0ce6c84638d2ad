"""
Admin dashboard endpoints - counters and the account export.
"""
from fastapi import APIRouter, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from gymhub.core.database import get_db
from gymhub.core.logging_config import logger
from gymhub.core.types import utcnow
from gymhub.models import Account, AccountRole, Bill, BillStatus
from gymhub.modules.auth.dependencies import get_current_admin
from gymhub.schemas import AccountResponse, DashboardStats, ExportReportResponse
from gymhub.services.account_service import account_crud, count_by_role

router = APIRouter()


@router.get("/dashboard-stats", response_model=DashboardStats)
async def get_dashboard_stats(
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    """Account counts per role, pending bills and paid revenue"""
    pending_bills = await db.scalar(
        select(func.count(Bill.id)).where(Bill.status == BillStatus.PENDING)
    )
    total_revenue = await db.scalar(
        select(func.coalesce(func.sum(Bill.amount), 0)).where(Bill.status == BillStatus.PAID)
    )

    return DashboardStats(
        total_members=await count_by_role(db, AccountRole.MEMBER),
        total_admins=await count_by_role(db, AccountRole.ADMIN),
        total_users=await count_by_role(db, AccountRole.USER),
        pending_bills=pending_bills or 0,
        total_revenue=float(total_revenue or 0),
    )


@router.get("/export-report", response_model=ExportReportResponse)
async def export_report(
    db: AsyncSession = Depends(get_db),
    current_admin: Account = Depends(get_current_admin)
):
    """Every account, for download"""
    accounts = await account_crud.list(db, order_by=Account.created_at.asc())
    logger.log_admin_action("export", "Report", count=len(accounts))

    return ExportReportResponse(
        message="Report export generated",
        generated_at=utcnow(),
        count=len(accounts),
        data=[AccountResponse.model_validate(account) for account in accounts],
    )
