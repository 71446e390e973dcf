"""
AI Client: dual routing, Groq (fast, free tier) + OpenAI (resume parsing)
==========================================================================
Routing strategy:
  GROQ (llama-3.3-70b-versatile / llama-3.1-8b-instant) for:
    - Learning path generation   (the big model, one call per cycle)
    - Skill roadmaps             (fast model)
    - Lesson sections & quizzes  (fast model)

  OPENAI (gpt-4o-mini) for:
    - Resume skill extraction

Both speak the OpenAI chat-completions protocol, so one SDK drives both.
SDK exceptions are translated into the ``errors`` taxonomy here and nowhere
else.
"""

import json
import logging

import openai
from openai import OpenAI

from .config import settings
from .errors import (
    ConfigurationError,
    MalformedResponseError,
    RateLimitError,
    TransportError,
)

logger = logging.getLogger(__name__)

# ── Model aliases ────────────────────────────────────────────────────
PATHS_MODEL   = settings.PATHS_MODEL     # "llama-3.3-70b-versatile"
CONTENT_MODEL = settings.CONTENT_MODEL   # "llama-3.1-8b-instant"
RESUME_MODEL  = settings.RESUME_MODEL    # "gpt-4o-mini", the only OpenAI model

_groq_client:   OpenAI | None = None
_openai_client: OpenAI | None = None


def _get_groq() -> OpenAI:
    """Groq, reached through its OpenAI-compatible API."""
    global _groq_client
    if not settings.GROQ_API_KEY:
        raise ConfigurationError("GROQ_API_KEY is not configured")
    if _groq_client is None:
        _groq_client = OpenAI(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
        )
    return _groq_client


def _get_openai() -> OpenAI:
    global _openai_client
    if not settings.OPENAI_API_KEY:
        raise ConfigurationError("OPENAI_API_KEY is not configured")
    if _openai_client is None:
        _openai_client = OpenAI(
            api_key=settings.OPENAI_API_KEY,
            base_url=settings.OPENAI_BASE_URL,
        )
    return _openai_client


def _is_openai_model(model: str) -> bool:
    return model.startswith("gpt-") or model == RESUME_MODEL


def chat(
    messages: list[dict],
    model: str = CONTENT_MODEL,
    system: str = "",
    max_tokens: int = 4096,
    temperature: float = 0.2,
    json_mode: bool = False,
) -> str:
    """
    Route to Groq or OpenAI depending on model and return the reply text.

    Raises ConfigurationError when the provider key is missing,
    RateLimitError / TransportError / MalformedResponseError on upstream failures.
    """
    full_messages = []
    if system:
        full_messages.append({"role": "system", "content": system})
    full_messages.extend(messages)

    if _is_openai_model(model):
        client = _get_openai()
        logger.info("[ai] → OpenAI %s", model)
    else:
        client = _get_groq()
        logger.info("[ai] → Groq %s", model)

    kwargs = {}
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    try:
        response = client.chat.completions.create(
            model=model,
            messages=full_messages,
            max_tokens=max_tokens,
            temperature=temperature,
            **kwargs,
        )
    except openai.RateLimitError as e:
        logger.warning("[ai] %s rate limited: %s", model, e)
        raise RateLimitError("The AI provider is rate limiting requests. Please try again shortly.") from e
    except openai.APIConnectionError as e:
        logger.error("[ai] %s unreachable: %s", model, e)
        raise TransportError(f"Could not reach the AI provider: {e}") from e
    except openai.APIStatusError as e:
        logger.error("[ai] %s returned %s", model, e.status_code)
        raise TransportError(f"AI provider error: {e.status_code}") from e
    except openai.APIError as e:
        logger.error("[ai] %s failed: %s", model, e)
        raise TransportError(f"AI provider error: {e.message}") from e

    if not response.choices:
        raise MalformedResponseError("No response from the AI provider")
    text = response.choices[0].message.content or ""
    if not text.strip():
        raise MalformedResponseError("Empty response from the AI provider")
    return text


def chat_single(
    prompt: str,
    system: str = "",
    model: str = CONTENT_MODEL,
    max_tokens: int = 4096,
    temperature: float = 0.2,
) -> str:
    """Convenience wrapper for a single user turn."""
    return chat(
        messages=[{"role": "user", "content": prompt}],
        model=model,
        system=system,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def chat_json(
    prompt: str,
    system: str = "",
    model: str = CONTENT_MODEL,
    max_tokens: int = 4096,
    temperature: float = 0.2,
) -> dict:
    """Single user turn in JSON mode; returns the decoded object."""
    text = chat(
        messages=[{"role": "user", "content": prompt}],
        model=model,
        system=system,
        max_tokens=max_tokens,
        temperature=temperature,
        json_mode=True,
    )
    return extract_json(text)


def extract_json(text: str) -> dict:
    """Decode the outermost JSON object in ``text`` (tolerates code fences and chatter)."""
    start = text.find("{")
    end = text.rfind("}") + 1
    if start >= 0 and end > start:
        try:
            data = json.loads(text[start:end])
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"AI returned invalid JSON: {e.msg}") from e
        if isinstance(data, dict):
            return data
    raise MalformedResponseError("AI returned an invalid response format. Please try again.")
