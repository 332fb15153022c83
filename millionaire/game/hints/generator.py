"""Lifeline payloads for a single session question.

Every generator reads the question's correct letter but never changes the
question itself: the hints only narrow or bias what the player is shown.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from millionaire.game.hints.personas import PersonaSource
from millionaire.game.hints.types import HintKind, HintPayload
from millionaire.game.sessions.errors import UnknownHintKindError
from millionaire.game.sessions.config import EngineConfig
from millionaire.game.sessions.types import LETTERS, SessionQuestion

AUDIENCE_BASE_VOTES_MAX = 44
AUDIENCE_CORRECT_BONUS_MIN = 5
AUDIENCE_CORRECT_BONUS_MAX = 50
FRIEND_CALL_TEMPLATE = "{persona} считает, что это вариант {letter}"


def random_of_hundred(rng: random.Random) -> int:
    return rng.randrange(100)


def fifty_fifty(session_question: SessionQuestion, *, rng: random.Random) -> tuple[str, str]:
    correct_letter = session_question.correct_letter
    wrong_letters = [letter for letter in LETTERS if letter != correct_letter]
    kept_wrong = rng.choice(wrong_letters)
    first, second = sorted((correct_letter, kept_wrong))
    return (first, second)


def audience_help(session_question: SessionQuestion, *, rng: random.Random) -> dict[str, int]:
    correct_letter = session_question.correct_letter
    votes = {letter: rng.randint(0, AUDIENCE_BASE_VOTES_MAX) for letter in LETTERS}
    votes[correct_letter] = max(votes.values()) + rng.randint(
        AUDIENCE_CORRECT_BONUS_MIN,
        AUDIENCE_CORRECT_BONUS_MAX,
    )
    total = sum(votes.values())
    # Floor division keeps the ordering, so the correct letter stays on top.
    return {letter: votes[letter] * 100 // total for letter in LETTERS}


def friend_call(
    letters: Sequence[str],
    correct_letter: str,
    *,
    rng: random.Random,
    persona_source: PersonaSource,
    confidence: int,
) -> str:
    if random_of_hundred(rng) < confidence:
        guess = correct_letter
    else:
        guess = rng.choice([letter for letter in letters if letter != correct_letter])
    return FRIEND_CALL_TEMPLATE.format(
        persona=persona_source.random_persona_name(),
        letter=guess.upper(),
    )


def generate_hint(
    session_question: SessionQuestion,
    kind: HintKind,
    *,
    config: EngineConfig,
) -> HintPayload:
    if kind is HintKind.FIFTY_FIFTY:
        return fifty_fifty(session_question, rng=config.rng)
    if kind is HintKind.AUDIENCE_HELP:
        return audience_help(session_question, rng=config.rng)
    if kind is HintKind.FRIEND_CALL:
        return friend_call(
            LETTERS,
            session_question.correct_letter,
            rng=config.rng,
            persona_source=config.personas,
            confidence=config.friend_call_confidence,
        )
    raise UnknownHintKindError(f"unknown hint kind: {kind!r}")


def apply_hint(
    session_question: SessionQuestion,
    kind: HintKind,
    *,
    config: EngineConfig,
) -> tuple[SessionQuestion, HintPayload]:
    cached = session_question.hint_data.get(kind)
    if cached is not None:
        return session_question, cached
    payload = generate_hint(session_question, kind, config=config)
    return session_question.with_hint(kind, payload), payload
