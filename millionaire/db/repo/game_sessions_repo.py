from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from millionaire.db.models.game_session_questions import GameSessionQuestion
from millionaire.db.models.game_sessions import GameSession

_WITH_QUESTIONS = selectinload(GameSession.questions).selectinload(GameSessionQuestion.question)


class GameSessionsRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, session_id: UUID) -> GameSession | None:
        stmt = select(GameSession).where(GameSession.id == session_id).options(_WITH_QUESTIONS)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_id_for_update(session: AsyncSession, session_id: UUID) -> GameSession | None:
        stmt = (
            select(GameSession)
            .where(GameSession.id == session_id)
            .options(_WITH_QUESTIONS)
            .with_for_update()
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_active_for_user_for_update(
        session: AsyncSession,
        *,
        user_id: int,
    ) -> GameSession | None:
        stmt = (
            select(GameSession)
            .where(
                GameSession.user_id == user_id,
                GameSession.finished_at.is_(None),
            )
            .options(_WITH_QUESTIONS)
            .with_for_update()
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_for_user(
        session: AsyncSession,
        *,
        user_id: int,
        limit: int = 50,
    ) -> list[GameSession]:
        stmt = (
            select(GameSession)
            .where(GameSession.user_id == user_id)
            .order_by(GameSession.started_at.desc(), GameSession.id.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def create(session: AsyncSession, *, game_session: GameSession) -> GameSession:
        session.add(game_session)
        await session.flush()
        return game_session
