"""
Roadmap Agent  (Groq llama-3.1-8b-instant)
===========================================
One skill → a curriculum of topics and subtopics. The reply is stored as-is,
apart from filling in any ids the model forgot.
"""

import logging

from ..ai_client import chat_json, CONTENT_MODEL
from .schemas import GeneratedRoadmap, parse_reply

logger = logging.getLogger(__name__)

CURRICULUM_SYSTEM = """You are an elite career strategist and master curriculum architect. Create a structured learning roadmap for a specific skill.

FORMATTING RULES:
1. Scope: Provide 6-8 major topics (never fewer than 4 or more than 12). Each major topic must contain 3-5 subtopics.
2. No Time Estimates: Do NOT include any estimated hours/minutes.
3. Content is a one-paragraph technical abstract; the full lesson is generated later.
4. JSON Format: Respond STRICTLY with a valid JSON in this format:
{
  "skillName": "The Skill",
  "topics": [
    {
      "id": "topic-1",
      "title": "Topic Name",
      "description": "Professional relevance.",
      "subtopics": [
        {
          "id": "subtopic-1-1",
          "title": "Subtopic Name",
          "description": "Technical overview.",
          "content": "Technical abstract."
        }
      ]
    }
  ]
}"""


def _assign_ids(roadmap: dict) -> dict:
    """Fill missing or duplicate topic/subtopic ids with positional ones."""
    seen_topics = set()
    for t_index, topic in enumerate(roadmap["topics"], start=1):
        if not topic.get("id") or topic["id"] in seen_topics:
            topic["id"] = f"topic-{t_index}"
        seen_topics.add(topic["id"])

        seen_subtopics = set()
        for s_index, subtopic in enumerate(topic["subtopics"], start=1):
            if not subtopic.get("id") or subtopic["id"] in seen_subtopics:
                subtopic["id"] = f"subtopic-{t_index}-{s_index}"
            seen_subtopics.add(subtopic["id"])
    return roadmap


def generate_skill_roadmap(skill_name: str, dream_job: str) -> dict:
    """Return ``{"skillName", "topics": [...]}`` for one skill."""
    prompt = (
        f"Create a market-leading learning roadmap for: {skill_name}\n"
        f"Strategic Context: This is for a professional aiming to become a top-tier {dream_job}."
    )

    logger.info("Generating roadmap for %r (target: %r)", skill_name, dream_job)
    data = chat_json(
        prompt=prompt,
        system=CURRICULUM_SYSTEM,
        model=CONTENT_MODEL,
        max_tokens=4096,
        temperature=0.3,
    )
    generated = parse_reply(GeneratedRoadmap, data, "roadmap")

    roadmap = generated.model_dump()
    roadmap["skillName"] = skill_name
    return _assign_ids(roadmap)
