from sqlalchemy import Column, String, Float, Text, DateTime

from gymhub.core.database import Base
from gymhub.core.types import GUID, generate_uuid, utcnow


class FeePackage(Base):
    """Membership plan an administrator can assign to an account"""
    __tablename__ = "fee_packages"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    name = Column(String(150), unique=True, index=True, nullable=False)
    duration = Column(String(50), nullable=False)  # e.g. "1 Month", "3 Months", "1 Year"
    cost = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<FeePackage {self.name} ({self.duration})>"
