# src/qa_kit/extraction/config.py

from dataclasses import dataclass

DEFAULT_UNSEPARATED_ANSWER = "Answer could not be separated from question."


@dataclass(frozen=True)
class ExtractionConfig:
    """Thresholds for accepting a parsed section.

    Immutable. Explicit. No magic defaults from environment.
    """

    min_question_length: int = 5
    min_answer_length: int = 3
    # Used as the answer when a section is a single sentence
    unseparated_answer: str = DEFAULT_UNSEPARATED_ANSWER

    def __post_init__(self) -> None:
        if self.min_question_length < 1:
            raise ValueError("min_question_length must be >= 1")
        if self.min_answer_length < 1:
            raise ValueError("min_answer_length must be >= 1")
        if not self.unseparated_answer.strip():
            raise ValueError("unseparated_answer must not be blank")
