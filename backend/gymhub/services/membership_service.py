from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from gymhub.core.exceptions import FeePackageNotFoundError
from gymhub.core.logging_config import logger
from gymhub.core.types import is_valid_id, utcnow
from gymhub.models import Account, AccountRole, FeePackage
from gymhub.modules.membership import compute_end_date, parse_start_date
from gymhub.services.account_service import get_account


async def get_fee_package(db: AsyncSession, package_id: str) -> FeePackage:
    package = await db.get(FeePackage, package_id) if is_valid_id(package_id) else None
    if package is None:
        raise FeePackageNotFoundError(package_id)
    return package


async def assign_package(
    db: AsyncSession,
    account_id: str,
    package_id: str,
    start_date: Optional[str] = None
) -> Account:
    """
    Put an account on a fee package.

    The start date defaults to today only when none was supplied; an explicit
    value that does not parse is rejected. The end date is computed before the
    account is touched, so a bad duration leaves it unchanged. On success the
    package reference, both dates and the Member role are written in a single
    commit.
    """
    account = await get_account(db, account_id)
    package = await get_fee_package(db, package_id)

    start = utcnow().date() if start_date is None else parse_start_date(start_date)
    end = compute_end_date(start, package.duration)

    account.current_membership = package
    account.membership_start_date = start
    account.membership_end_date = end
    account.role = AccountRole.MEMBER
    await db.commit()

    logger.log_admin_action(
        "assign_package",
        "Member",
        str(account.id),
        package_id=str(package.id),
        start_date=start.isoformat(),
        end_date=end.isoformat(),
    )
    return account
