from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from millionaire.db.models.ledger_entries import LedgerEntry
from millionaire.db.repo.ledger_repo import LedgerRepo
from millionaire.db.repo.users_repo import UsersRepo
from millionaire.economy.ledger.types import PrizeCreditResult
from millionaire.game.sessions.errors import UserNotFoundError

logger = structlog.get_logger("millionaire.economy.ledger")


def prize_idempotency_key(game_session_id: UUID) -> str:
    return f"prize:{game_session_id}"


class LedgerService:
    @staticmethod
    async def credit_prize(
        session: AsyncSession,
        *,
        user_id: int,
        game_session_id: UUID,
        amount: int,
        now_utc: datetime,
    ) -> PrizeCreditResult:
        if amount < 0:
            raise ValueError("prize amount must not be negative")

        user = await UsersRepo.get_by_id_for_update(session, user_id)
        if user is None:
            raise UserNotFoundError

        if amount == 0:
            logger.info(
                "game_prize_credit_skipped_zero",
                user_id=user_id,
                game_session_id=str(game_session_id),
            )
            return PrizeCreditResult(amount=0, balance_after=user.balance, idempotent_replay=False)

        idempotency_key = prize_idempotency_key(game_session_id)
        existing_entry = await LedgerRepo.get_by_idempotency_key(session, idempotency_key)
        if existing_entry is not None:
            return PrizeCreditResult(
                amount=existing_entry.amount,
                balance_after=existing_entry.balance_after,
                idempotent_replay=True,
            )

        user.balance += amount
        await LedgerRepo.create(
            session,
            entry=LedgerEntry(
                user_id=user_id,
                game_session_id=game_session_id,
                entry_type="PRIZE_CREDIT",
                direction="CREDIT",
                amount=amount,
                balance_after=user.balance,
                idempotency_key=idempotency_key,
                created_at=now_utc,
            ),
        )
        logger.info(
            "game_prize_credited",
            user_id=user_id,
            game_session_id=str(game_session_id),
            amount=amount,
            balance_after=user.balance,
        )
        return PrizeCreditResult(amount=amount, balance_after=user.balance, idempotent_replay=False)
