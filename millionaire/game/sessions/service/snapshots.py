from __future__ import annotations

from millionaire.db.models.game_session_questions import GameSessionQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.db.models.questions import QuestionRow
from millionaire.game.hints.types import HintData, HintKind
from millionaire.game.questions.types import Question
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.rules import derive_status, resolve_status
from millionaire.game.sessions.types import (
    QuestionView,
    SessionQuestion,
    SessionSnapshot,
    SessionStatus,
    SessionSummary,
    SessionView,
)


def _question_from_row(row: QuestionRow) -> Question:
    return Question(
        question_id=row.id,
        level=row.level,
        text=row.question_text,
        options=(row.option_1, row.option_2, row.option_3, row.option_4),
        correct_option=row.correct_option_id,
    )


def _session_question_from_row(row: GameSessionQuestion) -> SessionQuestion:
    return SessionQuestion(
        level=row.level,
        question=_question_from_row(row.question),
        permutation=(row.slot_a, row.slot_b, row.slot_c, row.slot_d),
        hint_data=HintData.from_dict(row.hint_data),
    )


def _session_question_row(session_question: SessionQuestion, *, question_row: QuestionRow) -> GameSessionQuestion:
    slot_a, slot_b, slot_c, slot_d = session_question.permutation
    return GameSessionQuestion(
        level=session_question.level,
        question_id=question_row.id,
        question=question_row,
        slot_a=slot_a,
        slot_b=slot_b,
        slot_c=slot_c,
        slot_d=slot_d,
        hint_data=session_question.hint_data.to_dict(),
    )


def _snapshot_from_model(game_session: GameSession) -> SessionSnapshot:
    return SessionSnapshot(
        session_id=game_session.id,
        user_id=game_session.user_id,
        questions=tuple(
            _session_question_from_row(row)
            for row in sorted(game_session.questions, key=lambda item: item.level)
        ),
        started_at=game_session.started_at,
        current_level=game_session.current_level,
        finished_at=game_session.finished_at,
        is_failed=game_session.is_failed,
        prize=game_session.prize,
        fifty_fifty_used=game_session.fifty_fifty_used,
        audience_help_used=game_session.audience_help_used,
        friend_call_used=game_session.friend_call_used,
    )


def _apply_snapshot_to_model(game_session: GameSession, snapshot: SessionSnapshot) -> None:
    game_session.current_level = snapshot.current_level
    game_session.finished_at = snapshot.finished_at
    game_session.is_failed = snapshot.is_failed
    game_session.prize = snapshot.prize
    game_session.fifty_fifty_used = snapshot.fifty_fifty_used
    game_session.audience_help_used = snapshot.audience_help_used
    game_session.friend_call_used = snapshot.friend_call_used

    for row in game_session.questions:
        hint_data = snapshot.questions[row.level].hint_data.to_dict()
        if hint_data != row.hint_data:
            row.hint_data = hint_data


def _view_hint_data(snapshot: SessionSnapshot) -> HintData:
    level = min(snapshot.current_level, snapshot.max_level)
    return snapshot.questions[level].hint_data


def _build_session_view(snapshot: SessionSnapshot, *, config: EngineConfig) -> SessionView:
    if snapshot.session_id is None:
        raise ValueError("cannot build a view for an unsaved game session")

    status = resolve_status(snapshot, config=config)
    question_view = None
    current_question = snapshot.current_question
    if status is SessionStatus.IN_PROGRESS and current_question is not None:
        question_view = QuestionView(
            level=current_question.level,
            text=current_question.question.text,
            variants=current_question.variants(),
        )

    return SessionView(
        session_id=snapshot.session_id,
        status=status,
        current_level=snapshot.current_level,
        prize=snapshot.prize,
        hint_data=_view_hint_data(snapshot),
        fifty_fifty_used=snapshot.fifty_fifty_used,
        audience_help_used=snapshot.audience_help_used,
        friend_call_used=snapshot.friend_call_used,
        question=question_view,
        started_at=snapshot.started_at,
        finished_at=snapshot.finished_at,
    )


def _build_session_summary(game_session: GameSession, *, config: EngineConfig) -> SessionSummary:
    return SessionSummary(
        session_id=game_session.id,
        status=derive_status(
            started_at=game_session.started_at,
            finished_at=game_session.finished_at,
            is_failed=game_session.is_failed,
            current_level=game_session.current_level,
            max_level=config.max_level,
            time_limit=config.time_limit,
        ),
        current_level=game_session.current_level,
        prize=game_session.prize,
        started_at=game_session.started_at,
        finished_at=game_session.finished_at,
        hints_used=tuple(
            kind
            for kind, used in (
                (HintKind.FIFTY_FIFTY, game_session.fifty_fifty_used),
                (HintKind.AUDIENCE_HELP, game_session.audience_help_used),
                (HintKind.FRIEND_CALL, game_session.friend_call_used),
            )
            if used
        ),
    )
