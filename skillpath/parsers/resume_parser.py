"""
Resume Parser  (OpenAI gpt-4o-mini)
====================================
Pulls a flat list of skill names out of resume text. This step is optional in
onboarding, so it never fails the request: when anything goes wrong the
learner gets a generic starter list and can edit it by hand.
"""

import io
import logging

from ..ai_client import chat_json, RESUME_MODEL
from ..agents.schemas import ResumeSkills, parse_reply
from ..errors import SkillPathError

logger = logging.getLogger(__name__)

FALLBACK_SKILLS = ["JavaScript", "Communication", "Problem Solving", "Teamwork", "Project Management"]

PARSER_SYSTEM = """You are an expert resume parser. Analyze the resume text and extract all skills mentioned. Look for:
1. Technical skills (programming languages, frameworks, tools)
2. Soft skills (communication, leadership, teamwork)
3. Domain knowledge (finance, healthcare, marketing)
4. Certifications and qualifications

Return exactly and only the skills as a JSON object with a key "skills" which is an array of strings."""


def extract_text_from_pdf_bytes(pdf_bytes: bytes) -> str:
    """Extract raw text from an uploaded PDF."""
    from pdfminer.high_level import extract_text
    return extract_text(io.BytesIO(pdf_bytes))


def extract_resume_text(filename: str, contents: bytes) -> str:
    """Text of an uploaded resume: PDFs go through pdfminer, anything else is read as UTF-8."""
    if filename.lower().endswith(".pdf"):
        try:
            return extract_text_from_pdf_bytes(contents)
        except Exception as e:
            logger.warning("Could not extract text from %s: %s", filename, e)
            return ""
    return contents.decode("utf-8", errors="ignore")


def _clean(skills: list[str]) -> list[str]:
    seen = set()
    cleaned = []
    for skill in skills:
        name = str(skill).strip()
        if name and name.lower() not in seen:
            seen.add(name.lower())
            cleaned.append(name)
    return cleaned


def parse_resume_skills(resume_text: str) -> dict:
    """
    Main entry point for resume parsing.

    Returns ``{"skills": [...], "fallback": bool}``; the list is never empty.
    """
    if not resume_text or not resume_text.strip():
        logger.warning("Empty resume text, using fallback skills")
        return {"skills": list(FALLBACK_SKILLS), "fallback": True}

    try:
        data = chat_json(
            prompt=f"Resume Text:\n{resume_text}",
            system=PARSER_SYSTEM,
            model=RESUME_MODEL,
            max_tokens=2048,
            temperature=0.1,      # low temp for deterministic JSON
        )
        skills = _clean(parse_reply(ResumeSkills, data, "skill list").skills)
    except SkillPathError as e:
        logger.warning("Fallback for resume parsing: %s", e.message)
        return {"skills": list(FALLBACK_SKILLS), "fallback": True}

    if not skills:
        logger.warning("Resume parser found no skills, using fallback skills")
        return {"skills": list(FALLBACK_SKILLS), "fallback": True}
    return {"skills": skills, "fallback": False}
