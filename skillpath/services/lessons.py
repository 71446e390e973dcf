"""Lesson content and quizzes for one subtopic, cached in its progress row."""

import logging

from sqlalchemy.orm import Session

from ..agents import learning_agent
from ..errors import InvalidRequestError
from . import progress, roadmaps

logger = logging.getLogger(__name__)


def _lesson_context(db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str):
    roadmap = roadmaps.get_roadmap(db, user_id, roadmap_id)
    row = progress.get_or_create_progress(db, roadmap, topic_id, subtopic_id)
    _, subtopic = roadmap.find_subtopic(topic_id, subtopic_id)
    return roadmap, subtopic, row


def _lesson_view(lesson: dict, row, cached: bool) -> dict:
    return {
        "sections": lesson["sections"],
        "content": lesson["content"],
        "is_completed": row.is_completed,
        "completion_percentage": row.completion_percentage,
        "cached": cached,
    }


def get_lesson(db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str) -> dict:
    """Outline plus first section; generated once, then served from the cache."""
    roadmap, subtopic, row = _lesson_context(db, user_id, roadmap_id, topic_id, subtopic_id)
    lesson = progress.load_lesson(row)
    if lesson["sections"]:
        db.commit()
        return _lesson_view(lesson, row, cached=True)

    outline = learning_agent.generate_lesson_outline(roadmap.skill_name, subtopic["title"])
    lesson["sections"] = outline["sections"]
    lesson["content"] = {outline["sections"][0]: outline["firstSectionContent"]}
    progress.save_lesson(row, lesson)
    db.commit()
    return _lesson_view(lesson, row, cached=False)


def get_section(
    db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str, section: str
) -> dict:
    """Content for one more section of an already outlined lesson."""
    roadmap, subtopic, row = _lesson_context(db, user_id, roadmap_id, topic_id, subtopic_id)
    lesson = progress.load_lesson(row)
    if not lesson["sections"]:
        raise InvalidRequestError("Open the lesson before requesting its sections")
    if section not in lesson["sections"]:
        raise InvalidRequestError(f"'{section}' is not a section of this lesson")

    if section in lesson["content"]:
        db.commit()
        return {"section": section, "content": lesson["content"][section], "cached": True}

    content = learning_agent.generate_lesson_section(roadmap.skill_name, subtopic["title"], section)
    lesson["content"][section] = content
    progress.save_lesson(row, lesson)
    db.commit()
    return {"section": section, "content": content, "cached": False}


def create_quiz(db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str) -> dict:
    """A fresh quiz every time; the latest one is what submissions are graded against."""
    roadmap, subtopic, row = _lesson_context(db, user_id, roadmap_id, topic_id, subtopic_id)
    questions = learning_agent.generate_quiz(roadmap.skill_name, subtopic["title"])

    lesson = progress.load_lesson(row)
    lesson["quiz"] = questions
    progress.save_lesson(row, lesson)
    db.commit()
    return {"questions": learning_agent.public_questions(questions), "total": len(questions)}


def submit_quiz(
    db: Session, user_id: str, roadmap_id: str, topic_id: str, subtopic_id: str, answers: list
) -> dict:
    """Grade the latest quiz; a pass marks the subtopic complete, a fail leaves it alone."""
    roadmap, _, row = _lesson_context(db, user_id, roadmap_id, topic_id, subtopic_id)
    questions = progress.load_lesson(row)["quiz"]
    result = learning_agent.grade_quiz(questions, answers)

    if result["passed"]:
        row = progress.mark_complete(db, roadmap, topic_id, subtopic_id)
    else:
        db.commit()
    logger.info(
        "User %s scored %d/%d on %s/%s (%s)",
        user_id, result["correct"], result["total"], topic_id, subtopic_id,
        "passed" if result["passed"] else "failed",
    )
    return {**result, "is_completed": row.is_completed}
