from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, SmallInteger, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from millionaire.db.models.base import Base


class QuestionRow(Base):
    __tablename__ = "questions"
    __table_args__ = (
        CheckConstraint("level >= 0", name="ck_questions_level_non_negative"),
        CheckConstraint(
            "correct_option_id >= 0 AND correct_option_id <= 3",
            name="ck_questions_correct_option_range",
        ),
        CheckConstraint("status IN ('ACTIVE','DISABLED')", name="ck_questions_status"),
        Index("idx_questions_level_status", "level", "status"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    level: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    option_1: Mapped[str] = mapped_column(Text, nullable=False)
    option_2: Mapped[str] = mapped_column(Text, nullable=False)
    option_3: Mapped[str] = mapped_column(Text, nullable=False)
    option_4: Mapped[str] = mapped_column(Text, nullable=False)
    correct_option_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, server_default=text("'ACTIVE'"))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
