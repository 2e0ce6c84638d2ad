from fastapi import APIRouter
from gymhub.api.v1.endpoints import (
    admin,
    auth,
    bills,
    diet_details,
    fee_packages,
    members,
    notifications,
    supplements,
    users,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(members.router, prefix="/members", tags=["Members"])
api_router.include_router(bills.router, prefix="/bills", tags=["Bills"])
api_router.include_router(fee_packages.router, prefix="/fee-packages", tags=["Fee Packages"])
api_router.include_router(supplements.router, prefix="/supplements", tags=["Supplements"])
api_router.include_router(diet_details.router, prefix="/diet-details", tags=["Diet Details"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
