from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database import get_db
from ...services import reset
from ..deps import get_current_user_id, require_admin

router = APIRouter()


class ResetRequest(BaseModel):
    full: bool = False


@router.post("/reset")
def reset_my_data(
    request: ResetRequest = ResetRequest(),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Partial reset sends the user back to onboarding; full reset forgets them entirely."""
    return reset.reset_user_data(db, user_id, full=request.full)


@router.post("/admin/reset-db", dependencies=[Depends(require_admin)])
def reset_database(db: Session = Depends(get_db)):
    return {"message": "Reset complete", "results": reset.reset_database(db)}
