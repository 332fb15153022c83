from __future__ import annotations

from datetime import datetime
from uuid import uuid4

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.game_sessions import GameSession
from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.db.repo.users_repo import UsersRepo
from millionaire.game.sessions.config import EngineConfig, get_engine_config
from millionaire.game.sessions.errors import ActiveSessionExistsError, UserNotFoundError
from millionaire.game.sessions.rules import expire_if_timed_out, new_session
from millionaire.game.sessions.types import SessionView

from .question_picking import _pick_session_questions
from .sessions_transitions import _commit_transition
from .snapshots import _build_session_view, _session_question_row, _snapshot_from_model

logger = structlog.get_logger("millionaire.game.sessions")


async def _close_stale_active_session(
    session: AsyncSession,
    *,
    user_id: int,
    now_utc: datetime,
    config: EngineConfig,
) -> None:
    active = await GameSessionsRepo.get_active_for_user_for_update(session, user_id=user_id)
    if active is None:
        return

    before = _snapshot_from_model(active)
    after = expire_if_timed_out(before, now_utc=now_utc, config=config)
    if not after.is_finished:
        logger.info(
            "game_session_active_exists",
            user_id=user_id,
            game_session_id=str(active.id),
        )
        raise ActiveSessionExistsError(active.id)

    logger.info("game_session_timed_out", user_id=user_id, game_session_id=str(active.id))
    await _commit_transition(
        session,
        game_session=active,
        before=before,
        after=after,
        now_utc=now_utc,
        config=config,
    )


async def create_session(
    session: AsyncSession,
    *,
    user_id: int,
    now_utc: datetime,
    config: EngineConfig | None = None,
) -> SessionView:
    engine_config = config or get_engine_config()

    user = await UsersRepo.get_by_id(session, user_id)
    if user is None:
        raise UserNotFoundError

    await _close_stale_active_session(
        session,
        user_id=user_id,
        now_utc=now_utc,
        config=engine_config,
    )

    questions, rows_by_id = await _pick_session_questions(session, config=engine_config)
    snapshot = new_session(
        user_id=user_id,
        questions=questions,
        started_at=now_utc,
        config=engine_config,
        session_id=uuid4(),
    )

    await GameSessionsRepo.create(
        session,
        game_session=GameSession(
            id=snapshot.session_id,
            user_id=user_id,
            current_level=0,
            is_failed=False,
            prize=0,
            fifty_fifty_used=False,
            audience_help_used=False,
            friend_call_used=False,
            started_at=now_utc,
            finished_at=None,
            questions=[
                _session_question_row(
                    session_question,
                    question_row=rows_by_id[session_question.question.question_id],
                )
                for session_question in snapshot.questions
            ],
        ),
    )
    logger.info(
        "game_session_created",
        user_id=user_id,
        game_session_id=str(snapshot.session_id),
        levels=len(snapshot.questions),
    )
    return _build_session_view(snapshot, config=engine_config)
