from sqlalchemy import Column, String, Text, Boolean, DateTime
from ..database import Base
from .base import new_id, utcnow


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), unique=True, index=True, nullable=False)
    full_name = Column(String(200))
    dream_job = Column(Text)
    onboarding_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
