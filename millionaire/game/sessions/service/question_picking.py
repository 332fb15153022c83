from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.questions import QuestionRow
from millionaire.db.repo.questions_repo import QuestionsRepo
from millionaire.game.questions.bank import InMemoryCatalog, QuestionBank
from millionaire.game.questions.types import Question
from millionaire.game.sessions.config import EngineConfig

from .snapshots import _question_from_row


async def _pick_session_questions(
    session: AsyncSession,
    *,
    config: EngineConfig,
) -> tuple[tuple[Question, ...], dict[int, QuestionRow]]:
    rows = await QuestionsRepo.list_active_by_levels(
        session,
        levels=tuple(range(config.max_level + 1)),
    )
    rows_by_id = {row.id: row for row in rows}
    bank = QuestionBank(
        InMemoryCatalog(_question_from_row(row) for row in rows),
        rng=config.rng,
    )
    picked = bank.pick_questions_for_session(max_level=config.max_level)
    return picked, rows_by_id
