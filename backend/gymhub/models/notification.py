from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from gymhub.core.database import Base
from gymhub.core.types import GUID, generate_uuid, utcnow


class Notification(Base):
    """Message addressed to one account"""
    __tablename__ = "notifications"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    member_id = Column(GUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    message = Column(Text, nullable=False)
    type = Column(String(100), nullable=False, default="Other")  # "Fee Reminder", "Announcement", ...
    read = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    member = relationship("Account", lazy="joined")

    def __repr__(self):
        return f"<Notification {self.id} read={self.read}>"
