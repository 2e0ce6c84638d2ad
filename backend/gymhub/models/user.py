from sqlalchemy import Column, String, Date, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
import enum

from gymhub.core.database import Base
from gymhub.core.security import get_password_hash, verify_password
from gymhub.core.types import GUID, generate_uuid, utcnow


class AccountRole(str, enum.Enum):
    """Closed set of account roles"""
    ADMIN = "Admin"
    MEMBER = "Member"
    USER = "User"


class Account(Base):
    """Account model (administrators, members and plain users)"""
    __tablename__ = "accounts"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    username = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)

    role = Column(
        SQLEnum(AccountRole, values_callable=lambda roles: [r.value for r in roles]),
        default=AccountRole.USER,
        nullable=False,
    )

    # Membership window; start and end are both set or both empty
    current_membership_id = Column(
        GUID, ForeignKey("fee_packages.id", ondelete="SET NULL"), nullable=True, index=True
    )
    membership_start_date = Column(Date, nullable=True)
    membership_end_date = Column(Date, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    current_membership = relationship("FeePackage", lazy="joined")

    def __init__(self, **kwargs):
        # A new account starts without a package; setting the relationship
        # explicitly keeps it loaded so it never needs a lazy load later
        if "current_membership" not in kwargs and "current_membership_id" not in kwargs:
            kwargs["current_membership"] = None
        super().__init__(**kwargs)

    def set_password(self, password: str) -> None:
        """Hash and store a new plaintext password"""
        self.hashed_password = get_password_hash(password)

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.hashed_password)

    def __repr__(self):
        return f"<Account {self.username} ({self.role.value if self.role else '-'})>"
