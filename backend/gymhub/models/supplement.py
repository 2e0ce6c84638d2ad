from sqlalchemy import Column, String, Text, Float, Integer, DateTime

from gymhub.core.database import Base
from gymhub.core.types import GUID, generate_uuid, utcnow


class Supplement(Base):
    __tablename__ = "supplements"

    id = Column(GUID, primary_key=True, default=generate_uuid)
    name = Column(String(150), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Supplement {self.name}>"
