"""
Path Agent  (Groq llama-3.3-70b-versatile)
===========================================
Turns a dream job + current skills into exactly three learning paths:
recommended, easier and professional. The biggest model is used here because
it is one call per generation cycle and everything downstream hangs off it.
"""

import logging

from ..ai_client import chat_json, PATHS_MODEL
from .schemas import GeneratedPaths, parse_reply

logger = logging.getLogger(__name__)

PATH_ORDER = ["easier", "recommended", "professional"]

STRATEGIST_SYSTEM = """You are an elite career strategist. Analyze the user's dream job and current skills to create exactly 3 learning paths.

The three paths:
- "recommended": the balanced route most people should take
- "easier": a gentler route that builds on what the user already knows
- "professional": the ambitious route towards top-tier roles

For each path:
- Description: detailed, explaining the "why" and "how" based on current market trends.
- Skills: between 4 and 8 high-impact skills in demand for this specific path, each with a
  priority ("high", "medium" or "low") and an estimate of hours needed to learn it.
- Do not repeat skills the user already has unless the path needs a deeper level of them.

Respond ONLY with a JSON object in this format:
{
  "paths": [
    {
      "type": "recommended" | "easier" | "professional",
      "title": "string",
      "description": "A detailed description of this career path, analyzing market demand and key opportunities.",
      "skills": [{ "name": "string", "priority": "high" | "medium" | "low", "estimatedHours": 40 }],
      "estimatedDuration": "e.g. 4-6 months",
      "marketDemand": "short market demand label",
      "salaryImpact": "salary range"
    }
  ]
}"""


def merge_skills(*skill_lists) -> list[str]:
    """Union of skill names, de-duplicated case-insensitively, first spelling wins."""
    seen = set()
    merged = []
    for skills in skill_lists:
        for skill in skills or []:
            name = (skill or "").strip()
            if name and name.lower() not in seen:
                seen.add(name.lower())
                merged.append(name)
    return merged


def generate_learning_paths(dream_job: str, current_skills: list[str]) -> list[dict]:
    """
    Ask the LLM for three learning paths and validate them.

    Returns the paths as plain dicts ordered easier → recommended → professional.
    Raises MalformedResponseError when the reply breaks the schema.
    """
    skills_line = ", ".join(current_skills) if current_skills else "None specified"
    prompt = (
        f"Dream Job: {dream_job}\n"
        f"Current Skills: {skills_line}\n\n"
        "REQUIREMENT: Generate high-value paths based on current top-tier market demands."
    )

    logger.info("Generating learning paths for %r (%d current skills)", dream_job, len(current_skills))
    data = chat_json(
        prompt=prompt,
        system=STRATEGIST_SYSTEM,
        model=PATHS_MODEL,
        max_tokens=4096,
        temperature=0.4,
    )
    generated = parse_reply(GeneratedPaths, data, "learning path set")

    paths = [p.model_dump() for p in generated.paths]
    return sorted(paths, key=lambda p: PATH_ORDER.index(p["type"]))
