"""Create the default administrator account (DEFAULT_ADMIN_USERNAME / DEFAULT_ADMIN_PASSWORD)"""
import asyncio
import sys

from gymhub.core.config import settings
from gymhub.core.database import close_db, get_session_local, init_db
from gymhub.models.user import AccountRole
from gymhub.services.account_service import create_account, get_by_username


async def create_admin(username: str, password: str) -> bool:
    """Returns False when an account with that username already exists"""
    await init_db()

    session_local = get_session_local()
    async with session_local() as db:
        existing = await get_by_username(db, username)
        if existing:
            print(f"Account already exists: {existing.username} ({existing.role.value})")
            return False

        account = await create_account(db, username, password, AccountRole.ADMIN)
        print(f"Created administrator: {account.username}")
        return True


def main() -> int:
    if not settings.DEFAULT_ADMIN_PASSWORD:
        print("DEFAULT_ADMIN_PASSWORD is not set", file=sys.stderr)
        return 1

    async def run():
        try:
            await create_admin(settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD)
        finally:
            await close_db()

    asyncio.run(run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
