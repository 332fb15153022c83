from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from millionaire.game.questions.types import Question
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.types import SessionQuestion, SessionSnapshot
from tests.game.engine_fixtures import STARTED_AT, FixedPersona, make_question


@pytest.fixture
def config() -> EngineConfig:
    return EngineConfig(rng=random.Random(20261019), persona_source=FixedPersona())


@pytest.fixture
def ladder_questions() -> tuple[Question, ...]:
    return tuple(make_question(level, correct_option=level % 4) for level in range(15))


@pytest.fixture
def build_snapshot(ladder_questions: tuple[Question, ...]) -> Callable[..., SessionSnapshot]:
    def _build(**overrides: object) -> SessionSnapshot:
        # Identity permutation: letter a shows option 0, b option 1 and so on,
        # so the correct letter at level N is LETTERS[N % 4].
        questions = tuple(
            SessionQuestion(level=question.level, question=question, permutation=(0, 1, 2, 3))
            for question in ladder_questions
        )
        fields: dict[str, object] = {
            "user_id": 7,
            "questions": questions,
            "started_at": STARTED_AT,
        }
        fields.update(overrides)
        return SessionSnapshot(**fields)  # type: ignore[arg-type]

    return _build
