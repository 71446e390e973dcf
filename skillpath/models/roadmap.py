from sqlalchemy import (
    Column, String, Text, Boolean, Integer, DateTime, JSON, ForeignKey,
    UniqueConstraint, CheckConstraint,
)
from sqlalchemy.orm import relationship
from ..database import Base
from .base import new_id, utcnow


class SkillRoadmap(Base):
    __tablename__ = "skill_roadmaps"
    __table_args__ = (
        UniqueConstraint("user_id", "learning_path_id", "skill_name", name="uq_roadmap_skill"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), index=True, nullable=False)
    learning_path_id = Column(String(36), ForeignKey("learning_paths.id", ondelete="CASCADE"), nullable=False)
    skill_name = Column(String(200), nullable=False)
    roadmap_data = Column(JSON, default=dict, nullable=False)  # {"skillName", "topics": [...]}
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    learning_path = relationship("LearningPath", back_populates="roadmaps")
    progress = relationship(
        "TopicProgress",
        back_populates="roadmap",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def topics(self) -> list[dict]:
        return (self.roadmap_data or {}).get("topics", [])

    def find_subtopic(self, topic_id: str, subtopic_id: str):
        """Return (topic, subtopic) dicts, or (None, None) when either id is unknown."""
        for topic in self.topics:
            if topic.get("id") != topic_id:
                continue
            for subtopic in topic.get("subtopics", []):
                if subtopic.get("id") == subtopic_id:
                    return topic, subtopic
        return None, None

    @property
    def subtopic_count(self) -> int:
        return sum(len(t.get("subtopics", [])) for t in self.topics)


class TopicProgress(Base):
    __tablename__ = "topic_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "roadmap_id", "topic_id", "subtopic_id", name="uq_progress_subtopic"),
        CheckConstraint("completion_percentage BETWEEN 0 AND 100", name="ck_completion_range"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(64), index=True, nullable=False)
    roadmap_id = Column(String(36), ForeignKey("skill_roadmaps.id", ondelete="CASCADE"), nullable=False)
    topic_id = Column(String(100), nullable=False)
    subtopic_id = Column(String(100), nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    completion_percentage = Column(Integer, default=0, nullable=False)
    lesson_content = Column(Text)        # JSON: {"sections", "content": {title: md}, "quiz"}
    completed_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    roadmap = relationship("SkillRoadmap", back_populates="progress")
