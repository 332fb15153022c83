from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from millionaire.economy.ledger import service as ledger_service
from millionaire.economy.ledger.service import LedgerService, prize_idempotency_key
from millionaire.game.sessions.errors import UserNotFoundError

UTC = timezone.utc
NOW = datetime(2026, 10, 19, 12, 30, tzinfo=UTC)


@pytest.fixture
def ledger_state(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    state: dict[str, object] = {
        "user": SimpleNamespace(id=5, balance=300),
        "entries": {},
    }

    async def _fake_get_user(session, user_id):  # noqa: ANN001
        del session
        user = state["user"]
        return user if user is not None and user.id == user_id else None

    async def _fake_get_entry(session, idempotency_key):  # noqa: ANN001
        del session
        return state["entries"].get(idempotency_key)

    async def _fake_create_entry(session, *, entry):  # noqa: ANN001
        del session
        state["entries"][entry.idempotency_key] = entry
        return entry

    monkeypatch.setattr(ledger_service.UsersRepo, "get_by_id_for_update", _fake_get_user)
    monkeypatch.setattr(ledger_service.LedgerRepo, "get_by_idempotency_key", _fake_get_entry)
    monkeypatch.setattr(ledger_service.LedgerRepo, "create", _fake_create_entry)
    return state


@pytest.mark.asyncio
async def test_credit_prize_increases_balance_and_records_entry(ledger_state) -> None:
    game_session_id = uuid4()

    result = await LedgerService.credit_prize(
        object(),
        user_id=5,
        game_session_id=game_session_id,
        amount=1_000,
        now_utc=NOW,
    )

    assert result.amount == 1_000
    assert result.balance_after == 1_300
    assert result.idempotent_replay is False
    entry = ledger_state["entries"][prize_idempotency_key(game_session_id)]
    assert entry.entry_type == "PRIZE_CREDIT"
    assert entry.direction == "CREDIT"
    assert entry.balance_after == 1_300
    assert entry.created_at == NOW


@pytest.mark.asyncio
async def test_credit_prize_replay_does_not_double_credit(ledger_state) -> None:
    game_session_id = uuid4()

    await LedgerService.credit_prize(object(), user_id=5, game_session_id=game_session_id, amount=500, now_utc=NOW)
    replay = await LedgerService.credit_prize(
        object(),
        user_id=5,
        game_session_id=game_session_id,
        amount=500,
        now_utc=NOW,
    )

    assert replay.idempotent_replay is True
    assert replay.balance_after == 800
    assert ledger_state["user"].balance == 800
    assert len(ledger_state["entries"]) == 1


@pytest.mark.asyncio
async def test_zero_prize_is_skipped(ledger_state) -> None:
    result = await LedgerService.credit_prize(object(), user_id=5, game_session_id=uuid4(), amount=0, now_utc=NOW)

    assert result.amount == 0
    assert result.balance_after == 300
    assert ledger_state["entries"] == {}


@pytest.mark.asyncio
async def test_negative_prize_is_rejected(ledger_state) -> None:
    with pytest.raises(ValueError):
        await LedgerService.credit_prize(object(), user_id=5, game_session_id=uuid4(), amount=-1, now_utc=NOW)


@pytest.mark.asyncio
async def test_missing_user_is_reported(ledger_state) -> None:
    with pytest.raises(UserNotFoundError):
        await LedgerService.credit_prize(object(), user_id=6, game_session_id=uuid4(), amount=100, now_utc=NOW)


def test_prize_idempotency_key_format() -> None:
    game_session_id = uuid4()

    assert prize_idempotency_key(game_session_id) == f"prize:{game_session_id}"
