from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import List

from ...database import get_db
from ...services import paths
from ..deps import get_current_user_id

router = APIRouter()


class GeneratePathsRequest(BaseModel):
    resume_skills: List[str] = []


def path_out(path) -> dict:
    return {
        "id": path.id,
        "type": path.path_type,
        "title": path.title,
        "description": path.description or "",
        "skills": path.skills or [],
        "estimatedDuration": path.estimated_duration or "",
        "marketDemand": path.market_demand or "high",
        "salaryImpact": path.salary_impact or "",
        "is_selected": path.is_selected,
    }


def _suggested(path_list) -> str | None:
    selected = next((p for p in path_list if p.is_selected), None)
    recommended = next((p for p in path_list if p.path_type == "recommended"), None)
    chosen = selected or recommended or (path_list[0] if path_list else None)
    return chosen.id if chosen else None


@router.post("/generate")
def generate_paths(
    request: GeneratePathsRequest = GeneratePathsRequest(),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Generate three learning paths, replacing any earlier ones."""
    path_list = paths.generate_paths_for_user(db, user_id, resume_skills=request.resume_skills)
    return {"paths": [path_out(p) for p in path_list], "suggested_path_id": _suggested(path_list)}


@router.get("")
def list_paths(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    path_list = paths.list_paths(db, user_id)
    return {"paths": [path_out(p) for p in path_list], "suggested_path_id": _suggested(path_list)}


@router.get("/selected")
def get_selected_path(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    path = paths.get_selected_path(db, user_id)
    return {"path": path_out(path) if path else None}


@router.post("/{path_id}/select")
def select_path(path_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return path_out(paths.select_path(db, user_id, path_id))


@router.get("/{path_id}/progress")
def get_path_progress(path_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return paths.path_progress(db, user_id, path_id)
