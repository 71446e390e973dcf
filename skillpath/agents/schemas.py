## Pydantic schemas for structured LLM output
from typing import List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ..errors import MalformedResponseError

PathType = Literal["recommended", "easier", "professional"]
Priority = Literal["high", "medium", "low"]

T = TypeVar("T", bound=BaseModel)


class PathSkill(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    priority: Priority = "medium"
    estimatedHours: int = Field(default=0, ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("priority", mode="before")
    @classmethod
    def normalise_priority(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v if v in ("high", "medium", "low") else "medium"
        return "medium" if v is None else v

    @field_validator("estimatedHours", mode="before")
    @classmethod
    def coerce_hours(cls, v):
        try:
            return max(0, int(round(float(v))))
        except (TypeError, ValueError):
            return 0


class GeneratedPath(BaseModel):
    type: PathType
    title: str = Field(min_length=1)
    description: str = ""
    skills: List[PathSkill] = Field(min_length=4, max_length=8)
    estimatedDuration: str = ""
    marketDemand: str = "high"
    salaryImpact: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def normalise_type(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("estimatedDuration", "marketDemand", "salaryImpact", mode="before")
    @classmethod
    def stringify(cls, v):
        return "" if v is None else str(v)


class GeneratedPaths(BaseModel):
    paths: List[GeneratedPath] = Field(min_length=3, max_length=3)

    @model_validator(mode="after")
    def one_of_each_type(self):
        types = sorted(p.type for p in self.paths)
        if types != ["easier", "professional", "recommended"]:
            raise ValueError(f"expected one recommended, easier and professional path, got {types}")
        return self


class RoadmapSubtopic(BaseModel):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    description: str = ""
    content: str = ""


class RoadmapTopic(BaseModel):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    description: str = ""
    subtopics: List[RoadmapSubtopic] = Field(min_length=1)


class GeneratedRoadmap(BaseModel):
    skillName: Optional[str] = None
    topics: List[RoadmapTopic] = Field(min_length=4, max_length=12)


class LessonOutline(BaseModel):
    sections: List[str] = Field(min_length=1)
    firstSectionContent: str = Field(min_length=1)

    @field_validator("sections")
    @classmethod
    def drop_blank_sections(cls, v):
        cleaned = [s.strip() for s in v if s and s.strip()]
        if not cleaned:
            raise ValueError("no section titles")
        return cleaned


class QuizQuestion(BaseModel):
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=4, max_length=4)
    correctAnswer: int = Field(ge=0, le=3)
    explanation: str = ""


class Quiz(BaseModel):
    questions: List[QuizQuestion] = Field(min_length=1)


class ResumeSkills(BaseModel):
    skills: List[str]


def parse_reply(schema: Type[T], data: dict, what: str) -> T:
    """Validate a decoded LLM reply, turning schema violations into MalformedResponseError."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ())) or "reply"
        raise MalformedResponseError(
            f"AI returned an invalid {what}: {where}: {first.get('msg')}"
        ) from e
