from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    SmallInteger,
    text,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from millionaire.db.models.base import Base
from millionaire.db.models.game_session_questions import GameSessionQuestion


class GameSession(Base):
    __tablename__ = "game_sessions"
    __table_args__ = (
        CheckConstraint("current_level >= 0", name="ck_game_sessions_level_non_negative"),
        CheckConstraint("prize >= 0", name="ck_game_sessions_prize_non_negative"),
        CheckConstraint(
            "finished_at IS NULL OR finished_at >= started_at",
            name="ck_game_sessions_finished_after_start",
        ),
        CheckConstraint(
            "NOT is_failed OR finished_at IS NOT NULL",
            name="ck_game_sessions_failed_is_finished",
        ),
        Index("idx_game_sessions_user_started", "user_id", "started_at"),
        Index(
            "uq_game_sessions_user_active",
            "user_id",
            unique=True,
            postgresql_where=text("finished_at IS NULL"),
        ),
    )

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    user_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id"), nullable=False)
    current_level: Mapped[int] = mapped_column(SmallInteger, nullable=False, server_default=text("0"))
    is_failed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    prize: Mapped[int] = mapped_column(BigInteger, nullable=False, server_default=text("0"))
    fifty_fifty_used: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    audience_help_used: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    friend_call_used: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    finished_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    questions: Mapped[list[GameSessionQuestion]] = relationship(
        order_by=GameSessionQuestion.level,
        cascade="all, delete-orphan",
        lazy="raise",
    )
