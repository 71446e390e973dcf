import os

# Must be set before skillpath.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["ADMIN_TOKEN"] = "test-admin-token"

import pytest
from fastapi.testclient import TestClient

from skillpath.database import Base, SessionLocal, engine
from skillpath.main import app

USER = "user-1"
OTHER_USER = "user-2"


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        c.headers.update({"X-User-Id": USER})
        yield c


@pytest.fixture
def other_client():
    with TestClient(app) as c:
        c.headers.update({"X-User-Id": OTHER_USER})
        yield c


# ── Canned LLM replies ─────────────────────────────────────────────────────

def make_path(path_type: str, skill_count: int = 5) -> dict:
    return {
        "type": path_type,
        "title": f"{path_type.title()} Data Engineer",
        "description": f"The {path_type} route.",
        "skills": [
            {"name": f"{path_type}-skill-{i}", "priority": "high", "estimatedHours": 10 * i}
            for i in range(1, skill_count + 1)
        ],
        "estimatedDuration": "4-6 months",
        "marketDemand": "Very high",
        "salaryImpact": "+20%",
    }


def make_paths_reply() -> dict:
    return {"paths": [make_path("recommended"), make_path("easier"), make_path("professional")]}


def make_roadmap_reply(topic_count: int = 4, subtopic_count: int = 2) -> dict:
    return {
        "skillName": "ignored",
        "topics": [
            {
                "id": f"topic-{t}",
                "title": f"Topic {t}",
                "description": "Why it matters.",
                "subtopics": [
                    {
                        "id": f"subtopic-{t}-{s}",
                        "title": f"Subtopic {t}.{s}",
                        "description": "Overview.",
                        "content": "Abstract.",
                    }
                    for s in range(1, subtopic_count + 1)
                ],
            }
            for t in range(1, topic_count + 1)
        ],
    }


def make_quiz_reply(count: int = 10) -> dict:
    return {
        "questions": [
            {
                "question": f"Question {i}?",
                "options": ["A", "B", "C", "D"],
                "correctAnswer": i % 4,
                "explanation": f"Because {i}.",
            }
            for i in range(count)
        ]
    }


class FakeLLM:
    """Stands in for ``chat_json``; returns the queued reply and records each call."""

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def onboarded(client):
    client.post(
        "/api/v1/profile/onboarding",
        json={"full_name": "Ada", "dream_job": "Data Engineer", "skills": ["Python", "SQL"]},
    )
    return client


@pytest.fixture
def with_paths(onboarded, monkeypatch):
    from skillpath.agents import path_agent

    monkeypatch.setattr(path_agent, "chat_json", FakeLLM(make_paths_reply()))
    return onboarded.post("/api/v1/paths/generate").json()


@pytest.fixture
def with_roadmap(onboarded, with_paths, monkeypatch):
    from skillpath.agents import roadmap_agent

    path = next(p for p in with_paths["paths"] if p["type"] == "recommended")
    monkeypatch.setattr(roadmap_agent, "chat_json", FakeLLM(make_roadmap_reply()))
    return onboarded.post(
        "/api/v1/roadmaps/generate",
        json={"path_id": path["id"], "skill_name": path["skills"][0]["name"]},
    ).json()
