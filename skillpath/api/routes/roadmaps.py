from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import Optional

from ...database import get_db
from ...services import progress, roadmaps
from ..deps import get_current_user_id

router = APIRouter()


class GenerateRoadmapRequest(BaseModel):
    path_id: str
    skill_name: str
    regenerate: bool = False


def roadmap_out(db: Session, roadmap, include_progress: bool = True) -> dict:
    out = {
        "id": roadmap.id,
        "learning_path_id": roadmap.learning_path_id,
        "skillName": roadmap.skill_name,
        "topics": roadmap.topics,
    }
    if include_progress:
        out["progress"] = progress.skill_progress(db, roadmap)
        out["completed"] = progress.completed_subtopics(db, roadmap.user_id, roadmap.id)
    return out


@router.post("/generate")
def generate_roadmap(
    request: GenerateRoadmapRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Roadmap for one skill of a learning path; reuses a stored one unless asked to regenerate."""
    roadmap, generated = roadmaps.generate_roadmap_for_skill(
        db, user_id, request.path_id, request.skill_name, regenerate=request.regenerate
    )
    return {**roadmap_out(db, roadmap), "generated": generated}


@router.get("")
def list_roadmaps(
    path_id: Optional[str] = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    items = roadmaps.list_roadmaps(db, user_id, path_id)
    return {"roadmaps": [roadmap_out(db, r) for r in items], "total": len(items)}


@router.get("/{roadmap_id}")
def get_roadmap(roadmap_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return roadmap_out(db, roadmaps.get_roadmap(db, user_id, roadmap_id))
