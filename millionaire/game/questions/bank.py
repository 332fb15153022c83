from __future__ import annotations

import random
from collections import defaultdict
from collections.abc import Collection, Iterable, Sequence
from typing import Protocol

from millionaire.game.questions.errors import NoQuestionAvailableError
from millionaire.game.questions.types import Question


class QuestionCatalog(Protocol):
    def questions_by_level(self, level: int) -> Sequence[Question]: ...


class InMemoryCatalog:
    def __init__(self, questions: Iterable[Question]) -> None:
        by_level: dict[int, list[Question]] = defaultdict(list)
        for question in questions:
            by_level[question.level].append(question)
        self._by_level = {
            level: tuple(sorted(items, key=lambda item: item.question_id))
            for level, items in by_level.items()
        }

    def questions_by_level(self, level: int) -> Sequence[Question]:
        return self._by_level.get(level, ())

    @property
    def levels(self) -> tuple[int, ...]:
        return tuple(sorted(self._by_level))


class QuestionBank:
    def __init__(self, catalog: QuestionCatalog, *, rng: random.Random) -> None:
        self._catalog = catalog
        self._rng = rng

    def pick_question_for_level(
        self,
        level: int,
        *,
        exclude_question_ids: Collection[int] = (),
    ) -> Question:
        candidates = [
            question
            for question in self._catalog.questions_by_level(level)
            if question.level == level and question.question_id not in exclude_question_ids
        ]
        if not candidates:
            raise NoQuestionAvailableError(level)
        return self._rng.choice(candidates)

    def pick_questions_for_session(self, *, max_level: int) -> tuple[Question, ...]:
        picked: list[Question] = []
        used_ids: set[int] = set()
        for level in range(max_level + 1):
            question = self.pick_question_for_level(level, exclude_question_ids=used_ids)
            used_ids.add(question.question_id)
            picked.append(question)
        return tuple(picked)
