from sqlalchemy import Column, Float, Date, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.orm import relationship
import enum

from gymhub.core.database import Base
from gymhub.core.types import GUID, generate_uuid, utcnow


class BillStatus(str, enum.Enum):
    PENDING = "Pending"
    PAID = "Paid"
    DUE = "Due"


class Bill(Base):
    """Bill issued to a member or user account"""
    __tablename__ = "bills"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    member_id = Column(GUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Float, nullable=False, default=0)
    date = Column(Date, nullable=False)
    status = Column(
        SQLEnum(BillStatus, values_callable=lambda statuses: [s.value for s in statuses]),
        default=BillStatus.PENDING,
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    member = relationship("Account", lazy="joined")

    def __repr__(self):
        return f"<Bill {self.id} {self.amount} {self.status.value if self.status else '-'}>"
