"""Resume parsing never fails the request; it falls back to a starter list."""

from types import SimpleNamespace

import httpx
import openai
import pytest

from skillpath import ai_client
from skillpath.errors import ConfigurationError, MalformedResponseError, RateLimitError
from skillpath.parsers import resume_parser

from conftest import FakeLLM


def test_extracts_clean_skill_list(monkeypatch):
    fake = FakeLLM({"skills": ["Python", " python ", "SQL", ""]})
    monkeypatch.setattr(resume_parser, "chat_json", fake)

    result = resume_parser.parse_resume_skills("Jane Doe. Five years of Python and SQL.")

    assert result == {"skills": ["Python", "SQL"], "fallback": False}
    assert fake.calls[0]["model"] == resume_parser.RESUME_MODEL


@pytest.mark.parametrize("failure", [
    ConfigurationError("OPENAI_API_KEY is not configured"),
    RateLimitError("quota"),
    MalformedResponseError("bad json"),
])
def test_failures_fall_back(monkeypatch, failure):
    monkeypatch.setattr(resume_parser, "chat_json", FakeLLM(failure))
    result = resume_parser.parse_resume_skills("Some resume text")
    assert result["fallback"] is True
    assert result["skills"] == resume_parser.FALLBACK_SKILLS


def test_wrong_shape_falls_back(monkeypatch):
    monkeypatch.setattr(resume_parser, "chat_json", FakeLLM({"skill_list": "Python"}))
    assert resume_parser.parse_resume_skills("resume")["fallback"] is True


def test_empty_list_falls_back(monkeypatch):
    monkeypatch.setattr(resume_parser, "chat_json", FakeLLM({"skills": []}))
    assert resume_parser.parse_resume_skills("resume")["skills"]


def test_blank_text_skips_the_llm(monkeypatch):
    monkeypatch.setattr(resume_parser, "chat_json", FakeLLM(AssertionError("not called")))
    assert resume_parser.parse_resume_skills("   ")["fallback"] is True


def test_plain_text_upload_is_decoded():
    assert resume_parser.extract_resume_text("cv.txt", "Python, SQL".encode()) == "Python, SQL"


def test_unreadable_pdf_gives_empty_text():
    assert resume_parser.extract_resume_text("cv.pdf", b"not a pdf") == ""


def test_unexpected_sdk_error_falls_back(monkeypatch):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    error = openai.APIResponseValidationError(response=httpx.Response(200, request=request), body=None)

    def create(**kwargs):
        raise error

    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    monkeypatch.setattr(ai_client, "_get_openai", lambda: client)

    result = resume_parser.parse_resume_skills("Python developer")

    assert result["fallback"] is True
    assert result["skills"] == resume_parser.FALLBACK_SKILLS
