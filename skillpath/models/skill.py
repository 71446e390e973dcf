from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint, CheckConstraint
from ..database import Base
from .base import new_id, utcnow


class UserSkill(Base):
    __tablename__ = "user_skills"
    __table_args__ = (
        UniqueConstraint("user_id", "skill_name", name="uq_user_skill"),
        CheckConstraint("proficiency_level BETWEEN 1 AND 5", name="ck_proficiency_range"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), index=True, nullable=False)
    skill_name = Column(String(200), nullable=False)
    proficiency_level = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
