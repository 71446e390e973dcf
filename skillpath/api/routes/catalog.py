from fastapi import APIRouter

from ...catalog import JOB_CATEGORIES, SKILL_CATEGORIES, search_jobs, search_skills

router = APIRouter()


@router.get("/jobs")
def list_jobs(q: str = ""):
    jobs = search_jobs(q)
    return {"jobs": jobs, "categories": JOB_CATEGORIES, "total": len(jobs)}


@router.get("/skills")
def list_skills(q: str = ""):
    skills = search_skills(q)
    return {"skills": skills, "categories": SKILL_CATEGORIES, "total": len(skills)}
