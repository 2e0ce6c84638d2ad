from sqlalchemy import Column, String, Text, DateTime

from gymhub.core.database import Base
from gymhub.core.types import GUID, generate_uuid, utcnow


class DietDetail(Base):
    """General diet advice published by administrators"""
    __tablename__ = "diet_details"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    title = Column(String(200), unique=True, index=True, nullable=False)
    content = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<DietDetail {self.title}>"
