"""Partial, full and admin resets."""

from skillpath.database import SessionLocal
from skillpath.models import LearningPath, Profile, SkillRoadmap, TopicProgress, UserSkill


def _count(model, user_id="user-1"):
    with SessionLocal() as session:
        return session.query(model).filter(model.user_id == user_id).count()


def test_partial_reset_returns_to_onboarding(onboarded, with_roadmap):
    onboarded.post("/api/v1/learning/complete", json={
        "roadmap_id": with_roadmap["id"], "topic_id": "topic-1", "subtopic_id": "subtopic-1-1",
    })

    body = onboarded.post("/api/v1/reset", json={"full": False}).json()

    assert body["deleted"]["learning_paths"] == 3
    assert body["deleted"]["topic_progress"] == 1
    assert _count(SkillRoadmap) == 0
    assert _count(UserSkill) == 2
    profile = onboarded.get("/api/v1/profile").json()
    assert profile["onboarding_completed"] is False
    assert profile["dream_job"] == "Data Engineer"
    assert onboarded.get("/api/v1/profile/view").json()["view"] == "onboarding"


def test_full_reset_forgets_user(onboarded, with_paths):
    onboarded.post("/api/v1/reset", json={"full": True})
    for model in (Profile, UserSkill, LearningPath, SkillRoadmap, TopicProgress):
        assert _count(model) == 0


def test_reset_only_touches_own_rows(onboarded, with_paths, other_client):
    other_client.post("/api/v1/profile/onboarding", json={"full_name": "Bob", "dream_job": "Designer"})
    other_client.post("/api/v1/reset", json={"full": True})
    assert _count(LearningPath) == 3
    assert _count(Profile) == 1


def test_admin_reset_requires_token(client):
    assert client.post("/api/v1/admin/reset-db").status_code == 403


def test_admin_reset_wipes_all_tables(onboarded, with_paths):
    response = onboarded.post("/api/v1/admin/reset-db", headers={"X-Admin-Token": "test-admin-token"})
    assert response.status_code == 200
    results = {r["table"]: r["count"] for r in response.json()["results"]}
    assert list(results) == ["topic_progress", "skill_roadmaps", "learning_paths", "user_skills", "profiles"]
    assert results["learning_paths"] == 3
    assert _count(Profile) == 0
