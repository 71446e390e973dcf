from sqlalchemy import Column, String, Text, Boolean, DateTime, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from ..database import Base
from .base import new_id, utcnow


class LearningPath(Base):
    __tablename__ = "learning_paths"
    __table_args__ = (
        CheckConstraint(
            "path_type IN ('recommended', 'easier', 'professional')", name="ck_path_type"
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), index=True, nullable=False)
    path_type = Column(String(20), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text)
    skills = Column(JSON, default=list, nullable=False)   # [{name, priority, estimatedHours}]
    estimated_duration = Column(String(100))
    market_demand = Column(Text)
    salary_impact = Column(Text)
    is_selected = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    roadmaps = relationship(
        "SkillRoadmap",
        back_populates="learning_path",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def skill_names(self) -> list[str]:
        return [s.get("name", "") for s in (self.skills or [])]
