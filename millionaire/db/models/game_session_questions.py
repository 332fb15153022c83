from __future__ import annotations

from uuid import UUID

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, SmallInteger, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from millionaire.db.models.base import Base
from millionaire.db.models.questions import QuestionRow


class GameSessionQuestion(Base):
    __tablename__ = "game_session_questions"
    __table_args__ = (
        CheckConstraint("level >= 0", name="ck_game_session_questions_level_non_negative"),
        CheckConstraint(
            "slot_a BETWEEN 0 AND 3 AND slot_b BETWEEN 0 AND 3 "
            "AND slot_c BETWEEN 0 AND 3 AND slot_d BETWEEN 0 AND 3",
            name="ck_game_session_questions_slot_range",
        ),
        CheckConstraint(
            "slot_a + slot_b + slot_c + slot_d = 6 "
            "AND slot_a <> slot_b AND slot_a <> slot_c AND slot_a <> slot_d "
            "AND slot_b <> slot_c AND slot_b <> slot_d AND slot_c <> slot_d",
            name="ck_game_session_questions_slot_bijection",
        ),
    )

    session_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("game_sessions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    level: Mapped[int] = mapped_column(SmallInteger, primary_key=True)
    question_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("questions.id"), nullable=False)
    slot_a: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_b: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_c: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    slot_d: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    hint_data: Mapped[dict[str, object]] = mapped_column(
        JSONB,
        nullable=False,
        server_default=text("'{}'::jsonb"),
    )

    question: Mapped[QuestionRow] = relationship(lazy="raise")
