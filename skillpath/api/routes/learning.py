from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import List, Optional

from ...database import get_db
from ...services import lessons, progress, roadmaps
from ..deps import get_current_user_id

router = APIRouter()


class LessonRequest(BaseModel):
    roadmap_id: str
    topic_id: str
    subtopic_id: str


class SectionRequest(LessonRequest):
    section: str


class QuizSubmission(LessonRequest):
    answers: List[Optional[int]]


@router.post("/content")
def lesson_content(request: LessonRequest, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    """Section titles plus the first section's content."""
    return lessons.get_lesson(db, user_id, request.roadmap_id, request.topic_id, request.subtopic_id)


@router.post("/section")
def lesson_section(request: SectionRequest, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return lessons.get_section(
        db, user_id, request.roadmap_id, request.topic_id, request.subtopic_id, request.section
    )


@router.post("/quiz")
def lesson_quiz(request: LessonRequest, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    """Generate a 10-question quiz; answers stay server-side until submission."""
    return lessons.create_quiz(db, user_id, request.roadmap_id, request.topic_id, request.subtopic_id)


@router.post("/quiz/submit")
def submit_quiz(request: QuizSubmission, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return lessons.submit_quiz(
        db, user_id, request.roadmap_id, request.topic_id, request.subtopic_id, request.answers
    )


@router.post("/complete")
def mark_complete(request: LessonRequest, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    roadmap = roadmaps.get_roadmap(db, user_id, request.roadmap_id)
    row = progress.mark_complete(db, roadmap, request.topic_id, request.subtopic_id)
    return {
        "roadmap_id": roadmap.id,
        "topic_id": row.topic_id,
        "subtopic_id": row.subtopic_id,
        "is_completed": row.is_completed,
        "completion_percentage": row.completion_percentage,
        "completed_at": row.completed_at.isoformat() if row.completed_at else None,
        "skill_progress": progress.skill_progress(db, roadmap),
    }
