"""Session progression rules.

Every function takes a ``SessionSnapshot`` and returns a new one; nothing is
mutated in place, so a call that raises leaves the caller's state untouched.
Status is never stored: ``resolve_status`` derives it from ``finished_at``,
``is_failed`` and ``current_level`` each time it is asked.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from uuid import UUID

from millionaire.game.hints.generator import apply_hint
from millionaire.game.hints.types import HintKind, HintPayload, parse_hint_kind
from millionaire.game.questions.types import Question
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.errors import (
    HintAlreadyUsedError,
    InvalidAnswerLetterError,
    NothingToCashError,
    SessionFinishedError,
)
from millionaire.game.sessions.types import LETTERS, SessionQuestion, SessionSnapshot, SessionStatus


def create_session_question(
    question: Question,
    *,
    rng: random.Random,
    level: int | None = None,
) -> SessionQuestion:
    permutation = [0, 1, 2, 3]
    rng.shuffle(permutation)
    return SessionQuestion(
        level=question.level if level is None else level,
        question=question,
        permutation=(permutation[0], permutation[1], permutation[2], permutation[3]),
    )


def new_session(
    *,
    user_id: int,
    questions: Sequence[Question],
    started_at: datetime,
    config: EngineConfig,
    session_id: UUID | None = None,
) -> SessionSnapshot:
    if len(questions) != config.prize_table.levels_count:
        raise ValueError(
            f"expected {config.prize_table.levels_count} questions, got {len(questions)}"
        )
    return SessionSnapshot(
        user_id=user_id,
        questions=tuple(
            create_session_question(question, rng=config.rng, level=level)
            for level, question in enumerate(questions)
        ),
        started_at=started_at,
        session_id=session_id,
    )


def normalize_letter(letter: str) -> str:
    normalized = str(letter).strip().lower()
    if normalized not in LETTERS:
        raise InvalidAnswerLetterError(f"answer letter must be one of {LETTERS}, got {letter!r}")
    return normalized


def elapsed(snapshot: SessionSnapshot, *, now_utc: datetime) -> timedelta:
    return (snapshot.finished_at or now_utc) - snapshot.started_at


def is_time_over(snapshot: SessionSnapshot, *, now_utc: datetime, config: EngineConfig) -> bool:
    return elapsed(snapshot, now_utc=now_utc) >= config.time_limit


def derive_status(
    *,
    started_at: datetime,
    finished_at: datetime | None,
    is_failed: bool,
    current_level: int,
    max_level: int,
    time_limit: timedelta,
) -> SessionStatus:
    if finished_at is None:
        return SessionStatus.IN_PROGRESS
    # Frozen at finished_at: a terminal session never changes status later.
    if finished_at - started_at >= time_limit:
        return SessionStatus.TIMEOUT
    if is_failed:
        return SessionStatus.FAIL
    if current_level > max_level:
        return SessionStatus.WON
    return SessionStatus.CASHED_OUT


def resolve_status(snapshot: SessionSnapshot, *, config: EngineConfig) -> SessionStatus:
    return derive_status(
        started_at=snapshot.started_at,
        finished_at=snapshot.finished_at,
        is_failed=snapshot.is_failed,
        current_level=snapshot.current_level,
        max_level=snapshot.max_level,
        time_limit=config.time_limit,
    )


def _ensure_active(snapshot: SessionSnapshot) -> None:
    if snapshot.is_finished:
        raise SessionFinishedError("game session is already finished")


def _finish(
    snapshot: SessionSnapshot,
    *,
    now_utc: datetime,
    prize: int,
    is_failed: bool,
    current_level: int | None = None,
) -> SessionSnapshot:
    return replace(
        snapshot,
        finished_at=now_utc,
        prize=prize,
        is_failed=is_failed,
        current_level=snapshot.current_level if current_level is None else current_level,
    )


def expire_if_timed_out(
    snapshot: SessionSnapshot,
    *,
    now_utc: datetime,
    config: EngineConfig,
) -> SessionSnapshot:
    if snapshot.is_finished or not is_time_over(snapshot, now_utc=now_utc, config=config):
        return snapshot
    return _finish(
        snapshot,
        now_utc=now_utc,
        prize=config.prize_table.checkpoint_prize(snapshot.current_level),
        is_failed=False,
    )


def answer_current_question(
    snapshot: SessionSnapshot,
    letter: str,
    *,
    now_utc: datetime,
    config: EngineConfig,
) -> SessionSnapshot:
    _ensure_active(snapshot)
    letter = normalize_letter(letter)

    if is_time_over(snapshot, now_utc=now_utc, config=config):
        return expire_if_timed_out(snapshot, now_utc=now_utc, config=config)

    question = snapshot.questions[snapshot.current_level]
    if not question.answer_correct(letter):
        return _finish(
            snapshot,
            now_utc=now_utc,
            prize=config.prize_table.checkpoint_prize(snapshot.current_level),
            is_failed=True,
        )

    next_level = snapshot.current_level + 1
    if next_level > snapshot.max_level:
        return _finish(
            snapshot,
            now_utc=now_utc,
            prize=config.prize_table.top_prize,
            is_failed=False,
            current_level=next_level,
        )
    return replace(snapshot, current_level=next_level)


def take_money(
    snapshot: SessionSnapshot,
    *,
    now_utc: datetime,
    config: EngineConfig,
) -> SessionSnapshot:
    _ensure_active(snapshot)

    if is_time_over(snapshot, now_utc=now_utc, config=config):
        return expire_if_timed_out(snapshot, now_utc=now_utc, config=config)
    if snapshot.current_level == 0:
        raise NothingToCashError("no question has been answered yet")

    return _finish(
        snapshot,
        now_utc=now_utc,
        prize=config.prize_table.cash_out_prize(snapshot.current_level),
        is_failed=False,
    )


def request_hint(
    snapshot: SessionSnapshot,
    kind: HintKind | str,
    *,
    config: EngineConfig,
) -> tuple[SessionSnapshot, HintPayload]:
    _ensure_active(snapshot)
    hint_kind = parse_hint_kind(kind)

    question = snapshot.questions[snapshot.current_level]
    if snapshot.hint_used(hint_kind) and not question.hint_data.has(hint_kind):
        raise HintAlreadyUsedError(f"hint {hint_kind.value} was already used in this game")

    updated_question, payload = apply_hint(question, hint_kind, config=config)
    questions = list(snapshot.questions)
    questions[snapshot.current_level] = updated_question
    updated = replace(
        snapshot,
        questions=tuple(questions),
        **{f"{hint_kind.value}_used": True},
    )
    return updated, payload
