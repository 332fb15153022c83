from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.game.sessions.config import EngineConfig, get_engine_config
from millionaire.game.sessions.rules import answer_current_question
from millionaire.game.sessions.types import SessionView

from .sessions_transitions import _commit_transition, _load_owned_session_for_update
from .snapshots import _build_session_view, _snapshot_from_model


async def answer(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    letter: str,
    now_utc: datetime,
    config: EngineConfig | None = None,
) -> SessionView:
    engine_config = config or get_engine_config()
    game_session = await _load_owned_session_for_update(
        session,
        user_id=user_id,
        session_id=session_id,
    )

    before = _snapshot_from_model(game_session)
    after = answer_current_question(before, letter, now_utc=now_utc, config=engine_config)
    await _commit_transition(
        session,
        game_session=game_session,
        before=before,
        after=after,
        now_utc=now_utc,
        config=engine_config,
    )
    return _build_session_view(after, config=engine_config)
