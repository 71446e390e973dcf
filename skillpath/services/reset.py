"""Wiping a user's data (partial or full) and the admin wipe of every table."""

import logging

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from ..models import LearningPath, Profile, SkillRoadmap, TopicProgress, UserSkill

logger = logging.getLogger(__name__)

# Children first
TABLES = [TopicProgress, SkillRoadmap, LearningPath, UserSkill, Profile]


def reset_user_data(db: Session, user_id: str, full: bool = False) -> dict:
    """
    Partial reset: drop paths, roadmaps and progress and send the user back to onboarding.
    Full reset: also drop their skills and profile.
    """
    deleted = {}
    for model in (TopicProgress, SkillRoadmap, LearningPath):
        deleted[model.__tablename__] = db.execute(
            delete(model).where(model.user_id == user_id)
        ).rowcount or 0

    if full:
        for model in (UserSkill, Profile):
            deleted[model.__tablename__] = db.execute(
                delete(model).where(model.user_id == user_id)
            ).rowcount or 0
    else:
        db.execute(update(Profile).where(Profile.user_id == user_id).values(onboarding_completed=False))

    db.commit()
    logger.info("%s reset for user %s: %s", "Full" if full else "Partial", user_id, deleted)
    return {"full": full, "deleted": deleted}


def reset_database(db: Session) -> list[dict]:
    results = []
    for model in TABLES:
        count = db.execute(delete(model)).rowcount or 0
        logger.info("Deleted %d rows from %s", count, model.__tablename__)
        results.append({"table": model.__tablename__, "status": "success", "count": count})
    db.commit()
    return results
