from __future__ import annotations

import random
from datetime import datetime, timezone

from millionaire.game.questions.types import Question

UTC = timezone.utc
STARTED_AT = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


class FixedPersona:
    def __init__(self, name: str = "Default Friend") -> None:
        self.name = name

    def random_persona_name(self) -> str:
        return self.name


class FixedRoll(random.Random):
    """Seeded random source whose 0..99 roll is pinned."""

    def __init__(self, roll: int, *, seed: int = 1) -> None:
        super().__init__(seed)
        self.roll = roll

    def randrange(self, start, stop=None, step=1):  # noqa: ANN001, ANN201
        del start, stop, step
        return self.roll


def make_question(level: int, *, question_id: int | None = None, correct_option: int = 0) -> Question:
    return Question(
        question_id=question_id if question_id is not None else 1000 + level,
        level=level,
        text=f"Question for level {level}",
        options=(f"answer1-{level}", f"answer2-{level}", f"answer3-{level}", f"answer4-{level}"),
        correct_option=correct_option,
    )
