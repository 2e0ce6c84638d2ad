from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Callable, Optional

from gymhub.core.database import get_db
from gymhub.core.exceptions import AuthenticationError, AuthorizationError, InvalidTokenError
from gymhub.core.logging_config import logger, set_user_id
from gymhub.core.security import verify_token
from gymhub.core.types import is_valid_id
from gymhub.models.user import Account, AccountRole

# auto_error=False: a missing header must be a 401 from us, not HTTPBearer's 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Account:
    """Resolve the bearer token on the request to an Account"""

    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, no token")

    try:
        account_id = verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.log_auth_event(event="token", success=False, reason=e.message, path=request.url.path)
        raise

    if not is_valid_id(account_id):
        raise InvalidTokenError("Not authorized, invalid token payload")

    account = await db.get(Account, account_id)
    if not account:
        logger.log_auth_event(event="token", success=False, reason="account no longer exists")
        raise AuthenticationError("Not authorized, user not found")

    set_user_id(str(account.id))
    return account


def require_role(role: AccountRole) -> Callable:
    """
    Dependency factory: the authenticated account must hold exactly `role`.

    Usage:
        @router.get("/", dependencies=[Depends(require_role(AccountRole.ADMIN))])
    """
    required = AccountRole(role)

    async def role_checker(current_user: Account = Depends(get_current_user)) -> Account:
        if current_user.role != required:
            logger.warning(
                f"[Access] {current_user.username} ({current_user.role.value}) "
                f"denied, requires {required.value}"
            )
            if required == AccountRole.ADMIN:
                raise AuthorizationError("Not authorized as an admin")
            raise AuthorizationError(f"Not authorized, requires {required.value} role")
        return current_user

    role_checker.__name__ = f"require_{required.name.lower()}"
    return role_checker


get_current_admin = require_role(AccountRole.ADMIN)
