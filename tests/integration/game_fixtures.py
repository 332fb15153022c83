from __future__ import annotations

from millionaire.db.models.questions import QuestionRow
from millionaire.db.repo.questions_repo import QuestionsRepo
from millionaire.db.repo.users_repo import UsersRepo
from millionaire.db.session import SessionLocal


async def _create_user(name: str) -> int:
    async with SessionLocal.begin() as session:
        user = await UsersRepo.create(session, name=name)
        return int(user.id)


async def _seed_question_ladder(*, per_level: int = 2, levels: int = 15) -> None:
    async with SessionLocal.begin() as session:
        for level in range(levels):
            for index in range(per_level):
                await QuestionsRepo.create(
                    session,
                    question=QuestionRow(
                        level=level,
                        question_text=f"Level {level} question {index}",
                        option_1=f"L{level}Q{index} first",
                        option_2=f"L{level}Q{index} second",
                        option_3=f"L{level}Q{index} third",
                        option_4=f"L{level}Q{index} fourth",
                        correct_option_id=(level + index) % 4,
                        status="ACTIVE",
                    ),
                )
