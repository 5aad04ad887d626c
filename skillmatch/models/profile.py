from sqlalchemy import Column, String, Text, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from skillmatch.db.base import Base


class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(UUID(as_uuid=False), primary_key=True)
    full_name = Column(String(255))
    contact_link = Column(Text)
    avatar_url = Column(Text)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
