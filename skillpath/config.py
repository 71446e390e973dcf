import json
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    # AI Keys
    GROQ_API_KEY: str = ""
    OPENAI_API_KEY: str = ""

    # Groq serves paths, roadmaps, lessons and quizzes; OpenAI only parses resumes
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    PATHS_MODEL: str = "llama-3.3-70b-versatile"
    CONTENT_MODEL: str = "llama-3.1-8b-instant"
    RESUME_MODEL: str = "gpt-4o-mini"

    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    DATABASE_URL: str = "sqlite:///./data/skillpath.db"
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    ADMIN_TOKEN: str = ""

    # Learning
    QUIZ_PASS_THRESHOLD: float = 0.6
    QUIZ_QUESTION_COUNT: int = 10
    LESSON_SECTION_COUNT: int = 4

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        # JSON list or comma-separated
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
