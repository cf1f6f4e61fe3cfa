# extraction/models.py

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal[
    "Web Development",
    "Programming",
    "Database",
    "Networking",
    "Computer Science",
    "General",
]

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]


@dataclass(frozen=True)
class RawSection:
    text: str
    ordinal: int
    offset_start: int
    # Digits of the boundary marker; None when found by the fallback split
    label: str | None = None


class ParsedQuestion(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    category: Category
    subcategory: str = "General"
    difficulty: Difficulty
    tags: list[str] = Field(default_factory=list)
    # Reserved for multiple-choice questions, never populated by the parser
    options: list[str] | None = None

    model_config = ConfigDict(extra="forbid")
