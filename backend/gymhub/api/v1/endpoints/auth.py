from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gymhub.core.database import get_db
from gymhub.core.exceptions import AuthenticationError, ConflictError
from gymhub.core.logging_config import logger
from gymhub.core.rate_limiter import auth_rate_limit
from gymhub.core.security import create_access_token
from gymhub.models.user import Account, AccountRole
from gymhub.schemas.auth import AuthResponse, SignInRequest, SignUpRequest
from gymhub.services import account_service

router = APIRouter()


def _auth_response(account: Account) -> AuthResponse:
    return AuthResponse(
        id=str(account.id),
        username=account.username,
        role=account.role,
        token=create_access_token(str(account.id)),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@auth_rate_limit()
async def signup(
    request: Request,
    user_data: SignUpRequest,
    db: AsyncSession = Depends(get_db)
):
    """Register a new account and return a token for it"""
    client_ip = request.client.host if request.client else "unknown"
    role = user_data.role or AccountRole.USER

    try:
        account = await account_service.create_account(
            db, user_data.username, user_data.password, role
        )
    except ConflictError as e:
        logger.log_auth_event(
            event="signup",
            success=False,
            username=user_data.username,
            reason=e.message,
            client_ip=client_ip
        )
        raise

    logger.log_auth_event(event="signup", success=True, username=account.username, client_ip=client_ip)
    return _auth_response(account)


@router.post("/signin", response_model=AuthResponse)
@auth_rate_limit()
async def signin(
    request: Request,
    credentials: SignInRequest,
    db: AsyncSession = Depends(get_db)
):
    """Exchange username and password for a token"""
    client_ip = request.client.host if request.client else "unknown"

    try:
        account = await account_service.authenticate(db, credentials.username, credentials.password)
    except AuthenticationError as e:
        logger.log_auth_event(
            event="signin",
            success=False,
            username=credentials.username,
            reason=e.message,
            client_ip=client_ip
        )
        raise

    logger.log_auth_event(event="signin", success=True, username=account.username, client_ip=client_ip)
    return _auth_response(account)
