from millionaire.db.models.game_session_questions import GameSessionQuestion
from millionaire.db.models.game_sessions import GameSession
from millionaire.db.models.ledger_entries import LedgerEntry
from millionaire.db.models.questions import QuestionRow
from millionaire.db.models.users import User

__all__ = [
    "GameSession",
    "GameSessionQuestion",
    "LedgerEntry",
    "QuestionRow",
    "User",
]
