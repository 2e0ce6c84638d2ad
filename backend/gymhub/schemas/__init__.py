from gymhub.schemas.common import MessageResponse
from gymhub.schemas.auth import SignUpRequest, SignInRequest, AuthResponse
from gymhub.schemas.member import (
    AccountResponse,
    AssignPackageRequest,
    AssignPackageResponse,
    FeePackageSummary,
    MemberCreate,
    MemberSummary,
    MemberUpdate,
)
from gymhub.schemas.bill import BillCreate, BillUpdate, BillResponse
from gymhub.schemas.notification import (
    NotificationCreate,
    NotificationUpdate,
    NotificationReadUpdate,
    NotificationResponse,
)
from gymhub.schemas.catalog import (
    FeePackageCreate,
    FeePackageUpdate,
    FeePackageResponse,
    SupplementCreate,
    SupplementUpdate,
    SupplementResponse,
    DietDetailCreate,
    DietDetailUpdate,
    DietDetailResponse,
)
from gymhub.schemas.admin import DashboardStats, ExportReportResponse
