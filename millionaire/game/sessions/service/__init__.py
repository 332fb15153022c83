from __future__ import annotations

from .question_picking import _pick_session_questions
from .sessions_answer import answer
from .sessions_cash_out import cash_out
from .sessions_create import create_session
from .sessions_hint import hint
from .sessions_queries import get_session, list_sessions_for_user
from .sessions_transitions import _commit_transition, _load_owned_session_for_update


class GameSessionService:
    _pick_session_questions = staticmethod(_pick_session_questions)
    _load_owned_session_for_update = staticmethod(_load_owned_session_for_update)
    _commit_transition = staticmethod(_commit_transition)
    create_session = staticmethod(create_session)
    answer = staticmethod(answer)
    hint = staticmethod(hint)
    cash_out = staticmethod(cash_out)
    get_session = staticmethod(get_session)
    list_sessions_for_user = staticmethod(list_sessions_for_user)


__all__ = [
    "GameSessionService",
]
