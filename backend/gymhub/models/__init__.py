# Re-export all models for convenient imports
from gymhub.models.user import Account, AccountRole
from gymhub.models.fee_package import FeePackage
from gymhub.models.bill import Bill, BillStatus
from gymhub.models.notification import Notification
from gymhub.models.supplement import Supplement
from gymhub.models.diet_detail import DietDetail

__all__ = [
    "Account",
    "AccountRole",
    "FeePackage",
    "Bill",
    "BillStatus",
    "Notification",
    "Supplement",
    "DietDetail",
]
