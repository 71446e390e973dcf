"""Skill roadmap persistence, keyed by (user, learning path, skill)."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..agents.roadmap_agent import generate_skill_roadmap
from ..errors import InvalidRequestError, NotFoundError
from ..models import SkillRoadmap
from . import paths, profiles

logger = logging.getLogger(__name__)


def get_roadmap(db: Session, user_id: str, roadmap_id: str) -> SkillRoadmap:
    roadmap = db.execute(
        select(SkillRoadmap).where(SkillRoadmap.id == roadmap_id, SkillRoadmap.user_id == user_id)
    ).scalar_one_or_none()
    if roadmap is None:
        raise NotFoundError("Roadmap not found")
    return roadmap


def find_roadmap(db: Session, user_id: str, path_id: str, skill_name: str) -> SkillRoadmap | None:
    return db.execute(
        select(SkillRoadmap).where(
            SkillRoadmap.user_id == user_id,
            SkillRoadmap.learning_path_id == path_id,
            SkillRoadmap.skill_name == skill_name,
        )
    ).scalar_one_or_none()


def list_roadmaps(db: Session, user_id: str, path_id: str = None) -> list[SkillRoadmap]:
    query = select(SkillRoadmap).where(SkillRoadmap.user_id == user_id)
    if path_id:
        query = query.where(SkillRoadmap.learning_path_id == path_id)
    return list(db.execute(query.order_by(SkillRoadmap.created_at)).scalars().all())


def _match_path_skill(path, skill_name: str) -> str:
    """Canonical spelling of ``skill_name`` within the path, or InvalidRequestError."""
    wanted = (skill_name or "").strip().lower()
    for name in path.skill_names:
        if name.lower() == wanted:
            return name
    raise InvalidRequestError(f"'{skill_name}' is not part of the learning path '{path.title}'")


def generate_roadmap_for_skill(
    db: Session,
    user_id: str,
    path_id: str,
    skill_name: str,
    regenerate: bool = False,
) -> tuple[SkillRoadmap, bool]:
    """
    Return the roadmap for one skill of a path, generating it on first request.

    The second element tells whether the LLM was called.
    """
    path = paths.get_path(db, user_id, path_id)
    skill_name = _match_path_skill(path, skill_name)

    existing = find_roadmap(db, user_id, path.id, skill_name)
    if existing is not None and not regenerate:
        return existing, False

    profile = profiles.get_profile(db, user_id)
    dream_job = (profile.dream_job if profile else None) or path.title
    roadmap_data = generate_skill_roadmap(skill_name, dream_job)

    if existing is not None:
        db.delete(existing)
        db.flush()

    roadmap = SkillRoadmap(
        user_id=user_id,
        learning_path_id=path.id,
        skill_name=skill_name,
        roadmap_data=roadmap_data,
    )
    db.add(roadmap)
    db.commit()
    logger.info("Stored roadmap for %r (%d topics) for user %s", skill_name, len(roadmap.topics), user_id)
    return roadmap, True
