from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Question:
    question_id: int
    level: int
    text: str
    options: tuple[str, str, str, str]
    correct_option: int

    def __post_init__(self) -> None:
        if len(self.options) != 4:
            raise ValueError("question must have exactly four options")
        if self.correct_option < 0 or self.correct_option > 3:
            raise ValueError("correct_option must be within 0..3")

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_option]
