from typing import Optional

from fastapi import Header, HTTPException

from ..config import settings


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """The authentication provider in front of the API forwards the user id."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authenticated")
    return x_user_id.strip()


def get_optional_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    return x_user_id.strip() if x_user_id and x_user_id.strip() else None


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    if not settings.ADMIN_TOKEN or x_admin_token != settings.ADMIN_TOKEN:
        raise HTTPException(status_code=403, detail="Admin token required")
