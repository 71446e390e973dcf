"""
Topic progress: completion records and the per-subtopic lesson cache.

A progress row exists for a subtopic as soon as its lesson is first opened;
``lesson_content`` holds the generated outline, sections and last quiz as JSON
so reopening a lesson never calls the LLM twice for the same text.
"""

import json
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import SkillRoadmap, TopicProgress
from ..models.base import utcnow

logger = logging.getLogger(__name__)


def get_progress(db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str) -> TopicProgress | None:
    return db.execute(
        select(TopicProgress).where(
            TopicProgress.user_id == user_id,
            TopicProgress.roadmap_id == roadmap_id,
            TopicProgress.topic_id == topic_id,
            TopicProgress.subtopic_id == subtopic_id,
        )
    ).scalar_one_or_none()


def get_or_create_progress(db: Session, roadmap: SkillRoadmap, topic_id: str, subtopic_id: str) -> TopicProgress:
    """Progress rows may only point at subtopics the roadmap actually contains."""
    _, subtopic = roadmap.find_subtopic(topic_id, subtopic_id)
    if subtopic is None:
        raise NotFoundError("Subtopic not found in roadmap")

    row = get_progress(db, roadmap.user_id, roadmap.id, topic_id, subtopic_id)
    if row is None:
        row = TopicProgress(
            user_id=roadmap.user_id,
            roadmap_id=roadmap.id,
            topic_id=topic_id,
            subtopic_id=subtopic_id,
            is_completed=False,
            completion_percentage=0,
        )
        db.add(row)
        db.flush()
    return row


def mark_complete(db: Session, roadmap: SkillRoadmap, topic_id: str, subtopic_id: str) -> TopicProgress:
    """Set the subtopic to 100%. Calling it again changes nothing, not even the timestamp."""
    row = get_or_create_progress(db, roadmap, topic_id, subtopic_id)
    if not row.is_completed:
        row.is_completed = True
        row.completion_percentage = 100
        row.completed_at = utcnow()
        logger.info("User %s completed %s/%s in roadmap %s", roadmap.user_id, topic_id, subtopic_id, roadmap.id)
    db.commit()
    db.refresh(row)
    return row


# ── Lesson cache ───────────────────────────────────────────────────────

def load_lesson(row: TopicProgress) -> dict:
    if not row.lesson_content:
        return {"sections": [], "content": {}, "quiz": []}
    try:
        cached = json.loads(row.lesson_content)
    except json.JSONDecodeError:
        logger.warning("Discarding unreadable lesson cache on progress row %s", row.id)
        return {"sections": [], "content": {}, "quiz": []}
    cached.setdefault("sections", [])
    cached.setdefault("content", {})
    cached.setdefault("quiz", [])
    return cached


def save_lesson(row: TopicProgress, lesson: dict) -> None:
    row.lesson_content = json.dumps(lesson, ensure_ascii=False)


# ── Reporting ──────────────────────────────────────────────────────────

def completed_subtopic_count(db: Session, user_id: str, roadmap_id: str) -> int:
    return db.execute(
        select(func.count(TopicProgress.id)).where(
            TopicProgress.user_id == user_id,
            TopicProgress.roadmap_id == roadmap_id,
            TopicProgress.is_completed.is_(True),
        )
    ).scalar_one()


def completed_subtopics(db: Session, user_id: str, roadmap_id: str) -> list[dict]:
    rows = db.execute(
        select(TopicProgress.topic_id, TopicProgress.subtopic_id).where(
            TopicProgress.user_id == user_id,
            TopicProgress.roadmap_id == roadmap_id,
            TopicProgress.is_completed.is_(True),
        )
    ).all()
    return [{"topic_id": t, "subtopic_id": s} for t, s in rows]


def skill_progress(db: Session, roadmap: SkillRoadmap) -> int:
    total = roadmap.subtopic_count
    if not total:
        return 0
    return round(completed_subtopic_count(db, roadmap.user_id, roadmap.id) / total * 100)
