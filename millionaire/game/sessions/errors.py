from __future__ import annotations

from uuid import UUID


class GameSessionError(Exception):
    pass


class SessionNotFoundError(GameSessionError):
    pass


class UserNotFoundError(GameSessionError):
    pass


class SessionFinishedError(GameSessionError):
    pass


class ActiveSessionExistsError(GameSessionError):
    def __init__(self, session_id: UUID) -> None:
        super().__init__(f"user already has an active game session {session_id}")
        self.session_id = session_id


class NothingToCashError(GameSessionError):
    pass


class InvalidAnswerLetterError(GameSessionError):
    pass


class UnknownHintKindError(GameSessionError):
    pass


class HintAlreadyUsedError(GameSessionError):
    pass
