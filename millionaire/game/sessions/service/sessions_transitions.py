from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.game_sessions import GameSession
from millionaire.db.repo.game_sessions_repo import GameSessionsRepo
from millionaire.economy.ledger.service import LedgerService
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.errors import SessionNotFoundError
from millionaire.game.sessions.rules import resolve_status
from millionaire.game.sessions.types import SessionSnapshot

from .snapshots import _apply_snapshot_to_model

logger = structlog.get_logger("millionaire.game.sessions")


async def _load_owned_session_for_update(
    session: AsyncSession,
    *,
    user_id: int,
    session_id: UUID,
) -> GameSession:
    game_session = await GameSessionsRepo.get_by_id_for_update(session, session_id)
    if game_session is None or game_session.user_id != user_id:
        raise SessionNotFoundError
    return game_session


async def _commit_transition(
    session: AsyncSession,
    *,
    game_session: GameSession,
    before: SessionSnapshot,
    after: SessionSnapshot,
    now_utc: datetime,
    config: EngineConfig,
) -> None:
    _apply_snapshot_to_model(game_session, after)
    await session.flush()

    if before.is_finished or not after.is_finished:
        return

    logger.info(
        "game_session_finished",
        user_id=game_session.user_id,
        game_session_id=str(game_session.id),
        status=resolve_status(after, config=config).value,
        current_level=after.current_level,
        prize=after.prize,
    )
    await LedgerService.credit_prize(
        session,
        user_id=game_session.user_id,
        game_session_id=game_session.id,
        amount=after.prize,
        now_utc=now_utc,
    )
