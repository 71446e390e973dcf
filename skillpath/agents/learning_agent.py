"""
Learning Agent  (Groq llama-3.1-8b-instant)
============================================
Lesson content for a single subtopic, generated lazily:

1. OUTLINE: a handful of section titles + the full first section
2. SECTION: one more section, on demand, as the learner scrolls on
3. QUIZ:    ten multiple-choice questions with explanations

Callers cache everything this module returns; nothing here touches the database.
"""

import logging

from ..ai_client import chat_json, chat_single, CONTENT_MODEL
from ..config import settings
from ..errors import InvalidRequestError
from .schemas import LessonOutline, Quiz, parse_reply

logger = logging.getLogger(__name__)

OUTLINE_SYSTEM = """You are an expert technical documentation designer. Provide {count} granular sub-topic titles and a RICH technical deep-dive for the first title.

FORMATTING RULES:
1. Use double line breaks between paragraphs for clarity.
2. **Bold** every important technical keyword or concept.
3. Use `code` tags for variables, methods, or small snippets.
4. Use professional Markdown headings and bullet points.

Respond STRICTLY in JSON:
{{
  "sections": ["Title 1", "Title 2", "Title 3", "Title 4"],
  "firstSectionContent": "Richly formatted Markdown content here..."
}}"""

TUTOR_SYSTEM = """You are a master technical tutor. Provide a RICH technical deep-dive for the section.

FORMATTING RULES:
1. **Bold** all key technical terms.
2. Use double line breaks between sections.
3. Include practical examples with `inline code` or blocks.
4. NO intro or greeting."""

EXAMINER_SYSTEM = """You are a technical examiner. Create a {count}-question multiple-choice quiz about the given topic.
Each question must have:
1. A clear question text.
2. 4 distinct options.
3. Exactly 1 correct answer (as index 0-3).
4. A brief explanation for the correct answer.

Respond STRICTLY in JSON format:
{{
  "questions": [
    {{
      "question": "Question text?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Explanation here..."
    }}
  ]
}}"""


def generate_lesson_outline(skill_name: str, subtopic_title: str, section_count: int = None) -> dict:
    """Return ``{"sections": [...], "firstSectionContent": str}``."""
    count = section_count or settings.LESSON_SECTION_COUNT
    data = chat_json(
        prompt=f"Skill: {skill_name} | Topic: {subtopic_title}",
        system=OUTLINE_SYSTEM.format(count=count),
        model=CONTENT_MODEL,
        max_tokens=4096,
        temperature=0.3,
    )
    outline = parse_reply(LessonOutline, data, "lesson outline")
    return {
        "sections": outline.sections[:count],
        "firstSectionContent": outline.firstSectionContent,
    }


def generate_lesson_section(skill_name: str, subtopic_title: str, section: str) -> str:
    """Markdown for one section of a lesson."""
    return chat_single(
        f"Skill: {skill_name} | Lesson: {subtopic_title} | Section: {section}",
        model=CONTENT_MODEL,
        system=TUTOR_SYSTEM,
        max_tokens=4096,
        temperature=0.3,
    ).strip()


def generate_quiz(skill_name: str, subtopic_title: str, question_count: int = None) -> list[dict]:
    count = question_count or settings.QUIZ_QUESTION_COUNT
    data = chat_json(
        prompt=f"Generate a {count}-question quiz for - Skill: {skill_name} | Lesson: {subtopic_title}",
        system=EXAMINER_SYSTEM.format(count=count),
        model=CONTENT_MODEL,
        max_tokens=4096,
        temperature=0.4,
    )
    quiz = parse_reply(Quiz, data, "quiz")
    if len(quiz.questions) < count:
        logger.warning("Quiz for %r came back with %d/%d questions", subtopic_title, len(quiz.questions), count)
    return [q.model_dump() for q in quiz.questions[:count]]


def public_questions(questions: list[dict]) -> list[dict]:
    """The quiz as shown to the learner: no answers, no explanations."""
    return [
        {"index": i, "question": q["question"], "options": q["options"]}
        for i, q in enumerate(questions)
    ]


def grade_quiz(questions: list[dict], answers: list[int], threshold: float = None) -> dict:
    """
    Score answers against the delivered questions.

    ``answers[i]`` is the chosen option for ``questions[i]``; ``None`` counts as wrong.
    Passing needs ``correct / len(questions) >= threshold``.
    """
    threshold = settings.QUIZ_PASS_THRESHOLD if threshold is None else threshold
    if not questions:
        raise InvalidRequestError("No quiz has been generated for this lesson")
    if len(answers) != len(questions):
        raise InvalidRequestError(
            f"Expected {len(questions)} answers, got {len(answers)}"
        )

    results = []
    correct = 0
    for i, (question, answer) in enumerate(zip(questions, answers)):
        is_correct = answer is not None and answer == question["correctAnswer"]
        correct += is_correct
        results.append({
            "index": i,
            "selected": answer,
            "correctAnswer": question["correctAnswer"],
            "isCorrect": is_correct,
            "explanation": question.get("explanation", ""),
        })

    total = len(questions)
    score = correct / total
    return {
        "correct": correct,
        "total": total,
        "score": round(score * 100),
        "passed": score >= threshold,
        "results": results,
    }
