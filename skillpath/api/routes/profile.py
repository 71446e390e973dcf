from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import List, Optional

from ...database import get_db
from ...errors import InvalidRequestError
from ...flow import View, can_transition, landing_view
from ...parsers.resume_parser import extract_resume_text, parse_resume_skills
from ...services import profiles
from ..deps import get_current_user_id, get_optional_user_id

router = APIRouter()


class OnboardingRequest(BaseModel):
    full_name: str
    dream_job: str
    skills: List[str] = []
    resume_skills: List[str] = []


class ResumeTextInput(BaseModel):
    resume_text: str


class TransitionRequest(BaseModel):
    current: View
    target: View


def profile_out(db: Session, profile) -> dict:
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "full_name": profile.full_name,
        "dream_job": profile.dream_job,
        "onboarding_completed": profile.onboarding_completed,
        "skills": profiles.list_skill_names(db, profile.user_id),
    }


@router.get("")
def get_profile(
    full_name: Optional[str] = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Current profile; created on first sign-in."""
    profile = profiles.get_or_create_profile(db, user_id, full_name=full_name)
    return profile_out(db, profile)


@router.post("/onboarding")
def complete_onboarding(
    request: OnboardingRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    profile = profiles.complete_onboarding(
        db,
        user_id,
        full_name=request.full_name,
        dream_job=request.dream_job,
        skills=request.skills,
        resume_skills=request.resume_skills,
    )
    return profile_out(db, profile)


@router.post("/parse-resume")
def parse_resume_text(input_data: ResumeTextInput, user_id: str = Depends(get_current_user_id)):
    """Resume text → skill names. Falls back to a starter list instead of failing."""
    return parse_resume_skills(input_data.resume_text)


@router.post("/parse-resume-file")
async def parse_resume_file(file: UploadFile = File(...), user_id: str = Depends(get_current_user_id)):
    """Parse an uploaded resume (PDF or plain text)."""
    if not file.filename:
        raise InvalidRequestError("A resume file is required")
    contents = await file.read()
    return parse_resume_skills(extract_resume_text(file.filename, contents))


@router.get("/view")
def get_landing_view(db: Session = Depends(get_db), user_id: Optional[str] = Depends(get_optional_user_id)):
    """Which screen the client should show right now."""
    return landing_view(db, user_id)


@router.post("/view/transition")
def check_transition(request: TransitionRequest):
    return {
        "current": request.current.value,
        "target": request.target.value,
        "allowed": can_transition(request.current, request.target),
    }
