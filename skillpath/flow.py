"""
View-state machine
==================
Which screen a signed-in user belongs on, and which moves between screens are
legal. The client renders; this module only decides.
"""

from enum import Enum

from sqlalchemy.orm import Session

from .services import paths, profiles


class View(str, Enum):
    LANDING = "landing"
    ONBOARDING = "onboarding"
    DASHBOARD = "dashboard"
    ROADMAPS = "roadmaps"
    LEARNING = "learning"


TRANSITIONS = {
    View.LANDING: {View.ONBOARDING},
    View.ONBOARDING: {View.DASHBOARD},
    View.DASHBOARD: {View.ROADMAPS},
    View.ROADMAPS: {View.DASHBOARD, View.LEARNING},
    View.LEARNING: {View.ROADMAPS, View.LEARNING},
}


def resolve_view(profile, selected_path) -> View:
    if profile is None or not profile.onboarding_completed:
        return View.ONBOARDING
    if selected_path is not None:
        return View.ROADMAPS
    return View.DASHBOARD


def landing_view(db: Session, user_id: str | None) -> dict:
    if not user_id:
        return {"view": View.LANDING.value, "selected_path_id": None}
    selected = paths.get_selected_path(db, user_id)
    view = resolve_view(profiles.get_profile(db, user_id), selected)
    return {
        "view": view.value,
        "selected_path_id": selected.id if view is View.ROADMAPS else None,
    }


def can_transition(current: View, target: View) -> bool:
    # Signing out is always allowed
    return target is View.LANDING or target in TRANSITIONS[current]
