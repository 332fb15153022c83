from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.game.hints.types import HintKind, parse_hint_kind
from millionaire.game.sessions.config import EngineConfig, get_engine_config
from millionaire.game.sessions.rules import request_hint
from millionaire.game.sessions.types import SessionView

from .sessions_transitions import _commit_transition, _load_owned_session_for_update
from .snapshots import _build_session_view, _snapshot_from_model

logger = structlog.get_logger("millionaire.game.sessions")


async def hint(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
    kind: HintKind | str,
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
    after, _ = request_hint(before, kind, config=engine_config)
    await _commit_transition(
        session,
        game_session=game_session,
        before=before,
        after=after,
        now_utc=now_utc,
        config=engine_config,
    )
    logger.info(
        "game_session_hint_used",
        user_id=user_id,
        game_session_id=str(session_id),
        hint_kind=parse_hint_kind(kind).value,
        current_level=after.current_level,
    )
    return _build_session_view(after, config=engine_config)
