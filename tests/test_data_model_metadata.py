from __future__ import annotations

from sqlalchemy import CheckConstraint, UniqueConstraint

from millionaire.db.models import (  # noqa: F401
    GameSession,
    GameSessionQuestion,
    LedgerEntry,
    QuestionRow,
    User,
)
from millionaire.db.models.base import Base


def _check_names(table_name: str) -> set[str]:
    table = Base.metadata.tables[table_name]
    return {constraint.name for constraint in table.constraints if isinstance(constraint, CheckConstraint)}


def test_all_game_tables_registered() -> None:
    assert {
        "users",
        "questions",
        "game_sessions",
        "game_session_questions",
        "ledger_entries",
    } == set(Base.metadata.tables)


def test_one_active_session_per_user_index() -> None:
    game_sessions = Base.metadata.tables["game_sessions"]
    indexes = {index.name: index for index in game_sessions.indexes}

    active_index = indexes["uq_game_sessions_user_active"]
    assert active_index.unique
    assert [column.name for column in active_index.columns] == ["user_id"]
    assert "idx_game_sessions_user_started" in indexes


def test_critical_constraints_present() -> None:
    assert "ck_game_sessions_failed_is_finished" in _check_names("game_sessions")
    assert "ck_game_sessions_prize_non_negative" in _check_names("game_sessions")
    assert "ck_game_session_questions_slot_bijection" in _check_names("game_session_questions")
    assert "ck_questions_correct_option_range" in _check_names("questions")
    assert "ck_users_balance_non_negative" in _check_names("users")

    game_session_questions = Base.metadata.tables["game_session_questions"]
    assert [column.name for column in game_session_questions.primary_key.columns] == ["session_id", "level"]


def test_ledger_idempotency_key_is_unique() -> None:
    ledger_entries = Base.metadata.tables["ledger_entries"]
    unique_columns = {
        tuple(column.name for column in constraint.columns)
        for constraint in ledger_entries.constraints
        if isinstance(constraint, UniqueConstraint)
    }
    unique_indexes = {
        tuple(column.name for column in index.columns) for index in ledger_entries.indexes if index.unique
    }

    assert ("idempotency_key",) in unique_columns | unique_indexes


def test_question_columns_and_server_defaults() -> None:
    questions = Base.metadata.tables["questions"]

    assert "question_text" in questions.columns
    assert str(questions.c.status.server_default.arg) == "'ACTIVE'"
    assert str(questions.c.created_at.server_default.arg) == "now()"
