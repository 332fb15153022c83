from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from uuid import UUID

from millionaire.game.hints.types import HintData, HintKind, HintPayload
from millionaire.game.questions.types import Question

LETTERS: tuple[str, str, str, str] = ("a", "b", "c", "d")


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAIL = "fail"
    TIMEOUT = "timeout"
    CASHED_OUT = "cashed_out"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class SessionQuestion:
    level: int
    question: Question
    permutation: tuple[int, int, int, int]
    hint_data: HintData = field(default_factory=HintData)

    def __post_init__(self) -> None:
        if sorted(self.permutation) != [0, 1, 2, 3]:
            raise ValueError(f"letter permutation must be a bijection onto 0..3, got {self.permutation}")

    @property
    def letter_permutation(self) -> dict[str, int]:
        return dict(zip(LETTERS, self.permutation))

    @property
    def correct_letter(self) -> str:
        return LETTERS[self.permutation.index(self.question.correct_option)]

    def variants(self) -> dict[str, str]:
        return {letter: self.question.options[slot] for letter, slot in zip(LETTERS, self.permutation)}

    def answer_correct(self, letter: str) -> bool:
        return letter == self.correct_letter

    def with_hint(self, kind: HintKind, payload: HintPayload) -> SessionQuestion:
        return replace(self, hint_data=self.hint_data.with_payload(kind, payload))


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    user_id: int
    questions: tuple[SessionQuestion, ...]
    started_at: datetime
    current_level: int = 0
    finished_at: datetime | None = None
    is_failed: bool = False
    prize: int = 0
    fifty_fifty_used: bool = False
    audience_help_used: bool = False
    friend_call_used: bool = False
    session_id: UUID | None = None

    @property
    def max_level(self) -> int:
        return len(self.questions) - 1

    @property
    def is_finished(self) -> bool:
        return self.finished_at is not None

    @property
    def previous_level(self) -> int:
        return self.current_level - 1

    @property
    def current_question(self) -> SessionQuestion | None:
        if self.current_level > self.max_level:
            return None
        return self.questions[self.current_level]

    @property
    def previous_question(self) -> SessionQuestion | None:
        if self.previous_level < 0:
            return None
        return self.questions[self.previous_level]

    def hint_used(self, kind: HintKind) -> bool:
        return bool(getattr(self, f"{kind.value}_used"))


@dataclass(slots=True)
class QuestionView:
    level: int
    text: str
    variants: dict[str, str]


@dataclass(slots=True)
class SessionView:
    session_id: UUID
    status: SessionStatus
    current_level: int
    prize: int
    hint_data: HintData
    fifty_fifty_used: bool
    audience_help_used: bool
    friend_call_used: bool
    question: QuestionView | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None


@dataclass(slots=True)
class SessionSummary:
    session_id: UUID
    status: SessionStatus
    current_level: int
    prize: int
    started_at: datetime
    finished_at: datetime | None
    hints_used: tuple[HintKind, ...] = ()
