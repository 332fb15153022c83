from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.questions import QuestionRow


class QuestionsRepo:
    @staticmethod
    async def list_active_by_levels(
        session: AsyncSession,
        *,
        levels: Sequence[int],
    ) -> list[QuestionRow]:
        if not levels:
            return []
        stmt = (
            select(QuestionRow)
            .where(
                QuestionRow.level.in_(tuple(levels)),
                QuestionRow.status == "ACTIVE",
            )
            .order_by(QuestionRow.level.asc(), QuestionRow.id.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def create(session: AsyncSession, *, question: QuestionRow) -> QuestionRow:
        session.add(question)
        await session.flush()
        return question
