"""Learning path persistence: replace a generation, select one, report progress."""

import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from ..agents.path_agent import PATH_ORDER, generate_learning_paths, merge_skills
from ..errors import InvalidRequestError, NotFoundError
from ..models import LearningPath, SkillRoadmap
from . import profiles
from .progress import completed_subtopic_count

logger = logging.getLogger(__name__)


def list_paths(db: Session, user_id: str) -> list[LearningPath]:
    paths = db.execute(select(LearningPath).where(LearningPath.user_id == user_id)).scalars().all()
    return sorted(paths, key=lambda p: PATH_ORDER.index(p.path_type))


def get_path(db: Session, user_id: str, path_id: str) -> LearningPath:
    path = db.execute(
        select(LearningPath).where(LearningPath.id == path_id, LearningPath.user_id == user_id)
    ).scalar_one_or_none()
    if path is None:
        raise NotFoundError("Learning path not found")
    return path


def get_selected_path(db: Session, user_id: str) -> LearningPath | None:
    return db.execute(
        select(LearningPath).where(LearningPath.user_id == user_id, LearningPath.is_selected.is_(True))
    ).scalars().first()


def replace_paths(db: Session, user_id: str, generated: list[dict]) -> list[LearningPath]:
    """Drop the user's previous generation (roadmaps and progress cascade) and store the new one."""
    for old in list_paths(db, user_id):
        db.delete(old)
    db.flush()

    created = []
    for p in generated:
        path = LearningPath(
            user_id=user_id,
            path_type=p["type"],
            title=p["title"],
            description=p.get("description", ""),
            skills=p["skills"],
            estimated_duration=p.get("estimatedDuration", ""),
            market_demand=p.get("marketDemand", ""),
            salary_impact=p.get("salaryImpact", ""),
            is_selected=False,
        )
        db.add(path)
        created.append(path)
    db.commit()
    return sorted(created, key=lambda p: PATH_ORDER.index(p.path_type))


def generate_paths_for_user(db: Session, user_id: str, resume_skills: list[str] = None) -> list[LearningPath]:
    profile = profiles.get_profile(db, user_id)
    if profile is None or not profile.dream_job:
        raise InvalidRequestError("Complete onboarding with a dream job before generating paths")

    current_skills = merge_skills(profiles.list_skill_names(db, user_id), resume_skills)
    generated = generate_learning_paths(profile.dream_job, current_skills)
    paths = replace_paths(db, user_id, generated)
    logger.info("Stored %d learning paths for user %s", len(paths), user_id)
    return paths


def select_path(db: Session, user_id: str, path_id: str) -> LearningPath:
    """Mark one path selected and every other path of the user unselected, in one transaction."""
    path = get_path(db, user_id, path_id)
    db.execute(
        update(LearningPath)
        .where(LearningPath.user_id == user_id, LearningPath.id != path.id)
        .values(is_selected=False)
    )
    path.is_selected = True
    db.commit()
    db.refresh(path)
    return path


def path_progress(db: Session, user_id: str, path_id: str) -> dict:
    """Percentage of completed subtopics per skill that has a roadmap."""
    path = get_path(db, user_id, path_id)
    roadmaps = db.execute(
        select(SkillRoadmap).where(SkillRoadmap.user_id == user_id, SkillRoadmap.learning_path_id == path.id)
    ).scalars().all()

    skills = {}
    for roadmap in roadmaps:
        total = roadmap.subtopic_count
        done = completed_subtopic_count(db, user_id, roadmap.id)
        skills[roadmap.skill_name] = round(done / total * 100) if total else 0

    return {
        "path_id": path.id,
        "skills": {name: skills.get(name, 0) for name in path.skill_names},
    }
