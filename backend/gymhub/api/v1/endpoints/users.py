from fastapi import APIRouter, Depends

from gymhub.models.user import Account
from gymhub.modules.auth.dependencies import get_current_user
from gymhub.schemas.member import AccountResponse

router = APIRouter()


@router.get("/profile", response_model=AccountResponse)
async def get_profile(current_user: Account = Depends(get_current_user)):
    """The caller's own account"""
    return current_user
