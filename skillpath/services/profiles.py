"""Profile + user skill persistence, and the onboarding write."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..errors import InvalidRequestError
from ..models import Profile, UserSkill
from ..agents.path_agent import merge_skills

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: str) -> Profile | None:
    return db.execute(select(Profile).where(Profile.user_id == user_id)).scalar_one_or_none()


def get_or_create_profile(db: Session, user_id: str, full_name: str = None) -> Profile:
    """Profiles are created on first sign-in, before onboarding has run."""
    profile = get_profile(db, user_id)
    if profile is None:
        profile = Profile(user_id=user_id, full_name=full_name, onboarding_completed=False)
        db.add(profile)
        db.commit()
        logger.info("Created profile for user %s", user_id)
    return profile


def list_skill_names(db: Session, user_id: str) -> list[str]:
    rows = db.execute(
        select(UserSkill.skill_name)
        .where(UserSkill.user_id == user_id)
        .order_by(UserSkill.created_at, UserSkill.skill_name)
    ).scalars().all()
    return list(rows)


def add_skills(db: Session, user_id: str, skills: list[str]) -> list[str]:
    """Insert skills the user does not have yet; duplicates are ignored. Returns the added names."""
    existing = {s.lower() for s in list_skill_names(db, user_id)}
    added = []
    for name in merge_skills(skills):
        if name.lower() in existing:
            continue
        db.add(UserSkill(user_id=user_id, skill_name=name))
        existing.add(name.lower())
        added.append(name)
    return added


def complete_onboarding(
    db: Session,
    user_id: str,
    full_name: str,
    dream_job: str,
    skills: list[str] = None,
    resume_skills: list[str] = None,
) -> Profile:
    """
    Upsert the profile with onboarding done and store the union of skills.

    Name and dream job are required; skills are optional.
    """
    full_name = (full_name or "").strip()
    dream_job = (dream_job or "").strip()
    if not full_name:
        raise InvalidRequestError("Full name is required")
    if not dream_job:
        raise InvalidRequestError("Dream job is required")

    profile = get_profile(db, user_id)
    if profile is None:
        profile = Profile(user_id=user_id)
        db.add(profile)
    profile.full_name = full_name
    profile.dream_job = dream_job
    profile.onboarding_completed = True

    added = add_skills(db, user_id, merge_skills(skills, resume_skills))
    db.commit()
    logger.info("User %s completed onboarding (%r, %d new skills)", user_id, dream_job, len(added))
    return profile
